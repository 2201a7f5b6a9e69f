"""Logging email adapter — writes outgoing mail to the application log.

Default adapter until a real mail transport is wired in.
"""

from uuid import uuid4

from loyalty.notification.channel.email_port import EmailPort
from loyalty.utils.logging import get_logger

logger = get_logger(__name__)


class LoggingEmailAdapter(EmailPort):
    def send(self, to: str, subject: str, body: str) -> dict:
        message_id = f"email-{uuid4().hex[:12]}"
        logger.info(
            "Sending email",
            message_id=message_id,
            to=to,
            subject=subject,
            body=body,
        )
        return {"message_id": message_id, "status": "sent"}
