import smtplib
import pytest
from unittest.mock import MagicMock, patch

from services.email_service import EmailService
from services.email_templates import appointment_email
from utils.errors import DeliveryFailed


class TestEmailService:

    def test_build_message_is_html(self):
        service = EmailService("team@example.com", "abcd efgh")
        message = service.build_message("jane@example.com", "Hi", "<h1>Hello</h1>")

        assert message["From"] == "team@example.com"
        assert message["To"] == "jane@example.com"
        assert message.get_content_type() == "text/html"
        assert service.password == "abcdefgh"

    @pytest.mark.asyncio
    @patch("services.email_service.smtplib.SMTP_SSL")
    async def test_send_logs_in_and_sends(self, mock_smtp):
        server = MagicMock()
        mock_smtp.return_value.__enter__.return_value = server

        await EmailService("team@example.com", "pw").send("jane@example.com", "Hi", "<p>x</p>")

        server.login.assert_called_once_with("team@example.com", "pw")
        server.send_message.assert_called_once()

    @pytest.mark.asyncio
    @patch("services.email_service.smtplib.SMTP_SSL")
    async def test_relay_error_is_delivery_failed(self, mock_smtp):
        server = MagicMock()
        server.login.side_effect = smtplib.SMTPAuthenticationError(535, b"bad credentials")
        mock_smtp.return_value.__enter__.return_value = server

        with pytest.raises(DeliveryFailed):
            await EmailService("team@example.com", "pw").send("jane@example.com", "Hi", "<p>x</p>")

    @pytest.mark.asyncio
    async def test_missing_credentials(self):
        with pytest.raises(DeliveryFailed):
            await EmailService("", "").send("jane@example.com", "Hi", "<p>x</p>")


def test_templates_escape_user_values():
    html = appointment_email("<b>Sam</b>", "2026-11-02", "10:30", "555")

    assert "&lt;b&gt;Sam&lt;/b&gt;" in html
    assert "<b>Sam</b>" not in html
