"""Optional e-mail notification for new contact messages."""

from __future__ import annotations

import logging
import re
import smtplib
import ssl
from datetime import UTC, datetime
from email.message import EmailMessage

from portfolio.config import settings
from portfolio.schemas.contact import ContactRecord

logger = logging.getLogger(__name__)

_LINE_BREAKS = re.compile(r"[\r\n]+")


def header_safe(value: str) -> str:
    """Collapse line breaks so user text cannot add header lines."""
    return _LINE_BREAKS.sub(" ", value).strip()


class NotificationError(Exception):
    """Raised when the notification e-mail could not be delivered."""


class Mailer:
    def __init__(self):
        self.enabled = settings.email_enabled
        self.host = settings.smtp_host
        self.port = settings.smtp_port
        self.user = settings.smtp_user
        self.passwd = settings.smtp_pass
        self.use_ssl = settings.smtp_ssl
        self.use_starttls = settings.smtp_starttls

    def build_message(
        self,
        subject: str,
        body_text: str,
        reply_to: str | None = None,
    ) -> EmailMessage:
        msg = EmailMessage()
        try:
            msg["From"] = f"{settings.email_from_name} <{settings.email_from_addr}>"
            msg["To"] = settings.email_to_addr
            if reply_to:
                msg["Reply-To"] = header_safe(reply_to)
            msg["Subject"] = header_safe(subject)
            msg.set_content(body_text)
        except ValueError as exc:
            raise NotificationError(f"invalid notification header: {exc}") from exc
        return msg

    def send(self, msg: EmailMessage) -> None:
        try:
            if self.use_ssl:
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(self.host, self.port, context=context) as smtp:
                    if self.user:
                        smtp.login(self.user, self.passwd)
                    smtp.send_message(msg)
                return

            with smtplib.SMTP(self.host, self.port, timeout=10) as smtp:
                if self.use_starttls:
                    context = ssl.create_default_context()
                    smtp.starttls(context=context)
                if self.user:
                    smtp.login(self.user, self.passwd)
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as exc:
            raise NotificationError(str(exc)) from exc

    def notify_new_message(
        self, record: ContactRecord, submitted_at: datetime | None = None
    ) -> bool:
        """Send the site owner a copy of a stored message.

        Returns False without sending when notifications are disabled.
        """
        if not self.enabled:
            return False

        submitted_at = submitted_at or datetime.now(UTC)
        body = (
            "You have received a new message from your resume website.\n\n"
            f"Name: {record.full_name}\n"
            f"Email: {record.email}\n"
            f"Subject: {record.subject}\n"
            f"Reason: {record.reason}\n"
            f"Message:\n{record.message}\n\n"
            f"Submitted at: {submitted_at:%Y-%m-%d %H:%M:%S}\n"
            f"IP Address: {record.ip_address or 'unknown'}"
        )
        msg = self.build_message(
            f"New Contact Form Submission: {record.subject}",
            body,
            reply_to=record.email,
        )
        self.send(msg)
        logger.info("Sent contact notification to %s", settings.email_to_addr)
        return True


mailer = Mailer()


def get_mailer() -> Mailer:
    return mailer
