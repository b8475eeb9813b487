import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from models.database import CHAT_HISTORY
from prompts import APOLOGY_RESPONSE, DIET_PLANS_RESPONSE, HELLO_RESPONSE, HI_RESPONSE
from services.chat_service import ChatResponder, CompletionService, KEYWORD_RESPONSES, match_keyword
from utils.errors import UpstreamUnavailable


class TestKeywordTable:

    def test_table_order(self):
        keywords = [predicate.keyword for predicate, _ in KEYWORD_RESPONSES]
        assert keywords == ["hello", "hi", "workout splits", "diet plans", "fitness advice"]

    def test_first_match_wins(self):
        assert match_keyword("hi there, tell me about diet plans") == HI_RESPONSE

    def test_substring_match(self):
        # "this" contains "hi"
        assert match_keyword("what is this") == HI_RESPONSE

    def test_hello_checked_before_hi(self):
        assert match_keyword("hello") == HELLO_RESPONSE

    def test_no_match(self):
        assert match_keyword("tell me about protein timing") is None


class TestChatResponder:

    @pytest.mark.asyncio
    async def test_keyword_reply_skips_completion(self, fake_db, fake_completion):
        responder = ChatResponder(fake_db, fake_completion)

        reply = await responder.respond("HELLO")

        assert reply == HELLO_RESPONSE
        assert fake_completion.prompts == []
        logged = fake_db.documents(CHAT_HISTORY)
        assert len(logged) == 1
        assert logged[0]["userMessage"] == "hello"
        assert logged[0]["botResponse"] == HELLO_RESPONSE
        assert "timestamp" in logged[0]

    @pytest.mark.asyncio
    async def test_unmatched_message_uses_completion(self, fake_db, fake_completion):
        responder = ChatResponder(fake_db, fake_completion)

        reply = await responder.respond("Tell me about Protein timing")

        assert reply == "Generated answer"
        assert fake_completion.prompts == ["tell me about protein timing"]

    @pytest.mark.asyncio
    async def test_completion_failure_gives_apology(self, fake_db, fake_completion):
        fake_completion.fail = True
        responder = ChatResponder(fake_db, fake_completion)

        reply = await responder.respond("tell me about protein timing")

        assert reply == APOLOGY_RESPONSE
        assert fake_db.documents(CHAT_HISTORY)[0]["botResponse"] == APOLOGY_RESPONSE

    @pytest.mark.asyncio
    async def test_history_failure_keeps_reply(self, fake_db, fake_completion):
        fake_db.fail_inserts = True
        responder = ChatResponder(fake_db, fake_completion)

        reply = await responder.respond("any diet plans?")

        assert reply == DIET_PLANS_RESPONSE


class TestCompletionService:

    @pytest.mark.asyncio
    @patch("services.chat_service.get_llm")
    async def test_returns_model_text(self, mock_get_llm):
        llm = MagicMock()
        llm.ainvoke = AsyncMock(return_value=MagicMock(content="Eat protein after training."))
        mock_get_llm.return_value = llm

        service = CompletionService(api_key="sk-test")
        result = await service.complete("protein timing")

        assert result == "Eat protein after training."
        messages = llm.ainvoke.call_args.args[0]
        assert len(messages) == 1
        assert messages[0].content == "protein timing"
        mock_get_llm.assert_called_once_with("chat_responder", api_key="sk-test")

    @pytest.mark.asyncio
    @patch("services.chat_service.get_llm")
    async def test_model_error_is_upstream_unavailable(self, mock_get_llm):
        llm = MagicMock()
        llm.ainvoke = AsyncMock(side_effect=RuntimeError("rate limited"))
        mock_get_llm.return_value = llm

        with pytest.raises(UpstreamUnavailable):
            await CompletionService(api_key="sk-test").complete("protein timing")

    @pytest.mark.asyncio
    async def test_missing_api_key_is_upstream_unavailable(self):
        with pytest.raises(UpstreamUnavailable):
            await CompletionService(api_key="").complete("protein timing")
