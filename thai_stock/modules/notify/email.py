import asyncio
import logging
import smtplib
from email.mime.text import MIMEText
from email.utils import parseaddr

from thai_stock.core.config import settings


logger = logging.getLogger(__name__)


class EmailNotifier:
    """SMTP sender. Without ``SMTP_HOST`` it only logs the message."""

    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        user: str | None = None,
        password: str | None = None,
        sender: str | None = None,
    ):
        self.host = settings.SMTP_HOST if host is None else host
        self.port = port or settings.SMTP_PORT
        self.user = settings.SMTP_USER if user is None else user
        self.password = settings.SMTP_PASS if password is None else password
        self.sender = sender or settings.SMTP_FROM

    @property
    def is_configured(self) -> bool:
        return bool(self.host)

    async def send(self, to: str, subject: str, body: str, html: bool = False) -> bool:
        if not self.is_configured:
            logger.info("[EMAIL MOCK] To: %s, Subject: %s", to, subject)
            logger.info("Body: %s", body)
            return True

        try:
            await asyncio.to_thread(self._deliver, to, subject, body, html)
        except (smtplib.SMTPException, OSError) as e:
            logger.error("[EMAIL ERROR] Failed to send email to %s: %s", to, e)
            return False

        logger.info("[EMAIL SENT] To: %s", to)
        return True

    def _deliver(self, to: str, subject: str, body: str, html: bool) -> None:
        msg = MIMEText(body, "html" if html else "plain", "utf-8")
        msg["Subject"] = subject
        msg["From"] = self.sender
        msg["To"] = to

        with smtplib.SMTP(self.host, self.port, timeout=30) as server:
            server.ehlo()
            if server.has_extn("starttls"):
                server.starttls()
                server.ehlo()
            if self.user:
                server.login(self.user, self.password)
            server.sendmail(parseaddr(self.sender)[1], [to], msg.as_string())
