"""Process-wide services shared by the route handlers."""

from dataclasses import dataclass

from fastapi import Request

from config.settings import Settings
from models.database import Database
from services.chat_service import ChatResponder, CompletionService
from services.email_service import EmailService


@dataclass
class AppContext:
    """Services built once at startup and never torn down mid-process."""
    database: Database
    mailer: EmailService
    responder: ChatResponder
    settings: Settings


def build_context(settings: Settings) -> AppContext:
    """Construct the services from settings. The database is not connected yet."""
    database = Database(settings.mongodb_url, settings.db_name)
    mailer = EmailService(
        settings.email_user,
        settings.email_pass,
        host=settings.smtp_host,
        port=settings.smtp_port,
    )
    completion = CompletionService(api_key=settings.openai_api_key)
    responder = ChatResponder(database, completion)
    return AppContext(database=database, mailer=mailer, responder=responder, settings=settings)


def get_context(request: Request) -> AppContext:
    """FastAPI dependency returning the context stored on the app."""
    return request.app.state.context
