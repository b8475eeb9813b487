"""Outbound email through an authenticated SMTP relay."""

import asyncio
import smtplib
import ssl
from email.message import EmailMessage

from utils.errors import DeliveryFailed
from utils.logger import setup_logger

logger = setup_logger(__name__)


class EmailService:
    """Sends one HTML email per call. Never retries."""

    def __init__(self, user: str, password: str, host: str = "smtp.gmail.com", port: int = 465):
        self.user = user
        # Gmail app passwords are displayed with spaces
        self.password = password.replace(" ", "")
        self.host = host
        self.port = port

    def build_message(self, to: str, subject: str, html_body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.user
        message["To"] = to
        message["Subject"] = subject
        message.set_content(html_body, subtype="html")
        return message

    def _send_sync(self, message: EmailMessage):
        context = ssl.create_default_context()
        with smtplib.SMTP_SSL(self.host, self.port, context=context) as server:
            server.login(self.user, self.password)
            server.send_message(message)

    async def send(self, to: str, subject: str, html_body: str):
        """Send an email, raising DeliveryFailed if the relay rejects it or is unreachable."""
        if not self.user or not self.password:
            raise DeliveryFailed("SMTP credentials not configured")

        message = self.build_message(to, subject, html_body)
        try:
            await asyncio.to_thread(self._send_sync, message)
        except (smtplib.SMTPException, OSError) as e:
            raise DeliveryFailed(f"Failed to send email to {to}: {e}") from e
        logger.info(f"Email sent to {to}: {subject}")
