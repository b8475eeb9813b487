"""Chatbot route."""

from fastapi import APIRouter, Depends

from api.dependencies import AppContext, get_context
from schemas import ChatRequest
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(tags=["chat"])


@router.post("/chat")
async def chat(request: ChatRequest, ctx: AppContext = Depends(get_context)):
    """Answer a chat message. Upstream failures come back as an apology, never an error."""
    logger.info(f"Received chat message: {request.message[:100]}")
    bot_response = await ctx.responder.respond(request.message)
    return {"message": bot_response}
