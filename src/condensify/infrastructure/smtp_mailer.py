"""SMTP implementation of the Mailer interface."""

import html
import smtplib
from email.message import EmailMessage

from condensify.config import SmtpConfig
from condensify.exceptions import EmailDeliveryError
from condensify.infrastructure.interfaces import Mailer
from condensify.logging import setup_logging

logger = setup_logging()

_HTML_TEMPLATE = (
    '<pre style="font-family: Helvetica, Arial, sans-serif; '
    'font-size: 15px; line-height: 1.6;">{body}</pre>'
)


class SmtpMailer(Mailer):
    """Sends summaries through an SMTP relay."""

    def __init__(self, config: SmtpConfig):
        self._config = config

    def build_message(self, text: str, recipient: str) -> EmailMessage:
        """Builds a plain-text message with an HTML alternative."""
        message = EmailMessage()
        message["From"] = self._config.user
        message["To"] = recipient
        message["Subject"] = self._config.subject
        message.set_content(text)
        message.add_alternative(
            _HTML_TEMPLATE.format(body=html.escape(text)), subtype="html"
        )
        return message

    def send(self, text: str, recipient: str) -> None:
        message = self.build_message(text, recipient)
        try:
            with self._connect() as smtp:
                if self._config.user and self._config.password:
                    smtp.login(self._config.user, self._config.password)
                smtp.send_message(message)
            logger.info(
                "Summary email sent",
                extra={"recipient": recipient, "host": self._config.host},
            )
        except (smtplib.SMTPException, OSError) as e:
            logger.exception(
                "SMTP send failed",
                extra={"recipient": recipient, "host": self._config.host},
            )
            raise EmailDeliveryError(recipient, e) from e

    def _connect(self) -> smtplib.SMTP:
        timeout = self._config.timeout_seconds
        if self._config.use_ssl:
            return smtplib.SMTP_SSL(self._config.host, self._config.port, timeout=timeout)

        smtp = smtplib.SMTP(self._config.host, self._config.port, timeout=timeout)
        try:
            smtp.ehlo()
            if smtp.has_extn("starttls"):
                smtp.starttls()
                smtp.ehlo()
        except Exception:
            smtp.close()
            raise
        return smtp
