"""SMTP email sender.

Delivers one HTML digest message per recipient through the configured
SMTP relay.  Each message has a single ``To`` recipient and no copies.

There is no retry: any ``smtplib.SMTPException`` or ``OSError`` raised by
the transport propagates to the caller and ends the run.
"""
from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from datetime import datetime, timezone
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

logger = logging.getLogger(__name__)


@dataclass
class DeliveryReceipt:
    """Record of a delivered message."""

    email: str
    timestamp: datetime
    refused: dict[str, tuple[int, bytes]]


class EmailSender:
    """Send digest messages via SMTP."""

    def __init__(
        self,
        smtp_host: str,
        smtp_port: int = 25,
        sender: str = "",
        subject: str = "",
    ) -> None:
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.sender = sender
        self.subject = subject

    def build_message(self, recipient: str, html_body: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = self.subject
        msg["From"] = self.sender
        msg["To"] = recipient
        msg.attach(MIMEText(html_body, "html", "utf-8"))
        return msg

    def send(self, recipient: str, html_body: str) -> DeliveryReceipt:
        """Send *html_body* to *recipient* and return the receipt."""
        msg = self.build_message(recipient, html_body)
        with smtplib.SMTP(self.smtp_host, self.smtp_port) as server:
            refused = server.sendmail(self.sender, [recipient], msg.as_string())
        logger.info("Sent notification to %s", recipient)
        return DeliveryReceipt(
            email=recipient,
            timestamp=datetime.now(timezone.utc),
            refused=dict(refused or {}),
        )
