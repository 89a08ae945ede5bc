import logging
from abc import ABC, abstractmethod
from email.utils import parseaddr

from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from fastapi_mail.errors import ConnectionErrors

from config.setting import Settings
from error import NotificationError
from schema.contact import ContactEntry

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Sends contact submissions to the site administrator"""

    @abstractmethod
    async def notify(self, entry: ContactEntry) -> None:
        ...


class NullNotifier(Notifier):
    """Used when no mail relay is configured; does nothing"""

    async def notify(self, entry: ContactEntry) -> None:
        return None


class MailService(Notifier):

    def __init__(self, settings: Settings):
        sender_name, sender = parseaddr(settings.SMTP_FROM or settings.SMTP_USER)
        self.admin_email = settings.ADMIN_EMAIL or settings.SMTP_USER
        self.mail_config = ConnectionConfig(
            MAIL_USERNAME=settings.SMTP_USER,
            MAIL_PASSWORD=str(settings.SMTP_PASS).strip(),
            MAIL_FROM=sender,
            MAIL_FROM_NAME=sender_name or None,
            MAIL_PORT=settings.SMTP_PORT,
            MAIL_SERVER=settings.SMTP_HOST,
            MAIL_SSL_TLS=settings.SMTP_SECURE,
            MAIL_STARTTLS=not settings.SMTP_SECURE,
            USE_CREDENTIALS=True,
            VALIDATE_CERTS=settings.VALIDATE_CERTS,
        )
        self.fm = FastMail(self.mail_config)

    def build_message(self, entry: ContactEntry) -> MessageSchema:
        return MessageSchema(
            subject=f"New contact message from {entry.name}",
            recipients=[self.admin_email],
            reply_to=[entry.email],
            body=entry.message,
            subtype=MessageType.plain,
        )

    async def notify(self, entry: ContactEntry) -> None:
        try:
            message = self.build_message(entry)
            await self.fm.send_message(message)
        except ConnectionErrors as e:
            raise NotificationError(f"Mail relay refused the message: {e}") from e
        except Exception as e:
            raise NotificationError(f"Failed to send message -> {str(e)}") from e
        logger.info(f"Contact notification sent for {entry.name}")


def build_notifier(settings: Settings) -> Notifier:
    """Pick the real mail sender or the null sender from the SMTP settings"""
    if not settings.smtp_enabled:
        logger.info("SMTP not configured, contact notifications disabled")
        return NullNotifier()
    return MailService(settings)
