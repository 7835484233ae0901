# mail_relay/core/mailer.py
import logging
import smtplib
import ssl
from email.message import EmailMessage
from typing import Optional

from mail_relay.core.settings import settings

log = logging.getLogger("uvicorn.error")


class MailDeliveryError(Exception):
    """Raised when the SMTP provider could not accept the message."""


def build_message(name: str, email: str, message: str, sender: str, recipient: str) -> EmailMessage:
    # Headers cannot carry line breaks; the body keeps the values verbatim.
    subject_name = " ".join(name.splitlines())
    msg = EmailMessage()
    msg["Subject"] = f"New Contact Form Message from {subject_name}"
    if sender:
        msg["From"] = sender
    if recipient:
        msg["To"] = recipient
    msg.set_content(f"Name: {name}\nEmail: {email}\nMessage: {message}")
    return msg


class SMTPTransport:
    """One-shot SMTP client: a fresh connection per send, no retries."""

    def __init__(
        self,
        host: str,
        port: int,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_ssl: bool = True,
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_ssl = use_ssl
        self.timeout = timeout

    def _connect(self) -> smtplib.SMTP:
        if self.use_ssl:
            return smtplib.SMTP_SSL(
                self.host, self.port, timeout=self.timeout, context=ssl.create_default_context()
            )
        smtp = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        smtp.ehlo()
        if smtp.has_extn("starttls"):
            smtp.starttls(context=ssl.create_default_context())
            smtp.ehlo()
        return smtp

    def send(self, msg: EmailMessage) -> str:
        """Submit ``msg`` and return the server's reply to DATA, e.g. ``"250 2.0.0 OK"``."""
        if not self.username or not self.password:
            raise MailDeliveryError("SMTP credentials are not configured")

        sender = msg["From"]
        recipient = msg["To"]
        try:
            with self._connect() as smtp:
                smtp.login(self.username, self.password)
                code, resp = smtp.mail(sender)
                if code != 250:
                    raise smtplib.SMTPSenderRefused(code, resp, sender)
                code, resp = smtp.rcpt(recipient)
                if code not in (250, 251):
                    raise smtplib.SMTPRecipientsRefused({recipient: (code, resp)})
                # data() raises SMTPDataError on anything but 250
                code, resp = smtp.data(msg.as_bytes())
        except (smtplib.SMTPException, OSError) as exc:
            log.warning(f"[mailer] send via {self.host}:{self.port} failed: {exc!r}")
            raise MailDeliveryError(str(exc) or exc.__class__.__name__) from exc

        text = resp.decode("utf-8", "replace") if isinstance(resp, bytes) else str(resp)
        return f"{code} {text}"


def get_transport() -> SMTPTransport:
    # Built per request from static settings; nothing is shared between requests.
    return SMTPTransport(
        host=settings.smtp_host,
        port=settings.smtp_port,
        username=settings.smtp_username,
        password=settings.smtp_password,
        use_ssl=settings.smtp_use_ssl,
        timeout=settings.smtp_timeout,
    )


__all__ = ["MailDeliveryError", "SMTPTransport", "build_message", "get_transport"]
