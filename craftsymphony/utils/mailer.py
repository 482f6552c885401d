import logging
import smtplib
import ssl
from email.message import EmailMessage
from html import escape

logger = logging.getLogger(__name__)


class MailError(Exception):
    code = "UNEXPECTED"


class MailConfigError(MailError):
    code = "CONFIG_ERROR"


class MailVerifyError(MailError):
    code = "SMTP_VERIFY_FAILED"


class MailSendError(MailError):
    code = "SEND_FAILED"


class SmtpMailer:
    """Thin smtplib wrapper: connect, verify, send, one connection per inquiry."""

    def __init__(self, host, port=587, secure=False, user="", password="", timeout=10):
        self.host = host
        self.port = port
        self.secure = secure
        self.user = user
        self.password = password
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        if not config.get("SMTP_HOST"):
            raise MailConfigError("SMTP_HOST is not configured")
        return cls(
            host=config["SMTP_HOST"],
            port=config.get("SMTP_PORT", 587),
            secure=config.get("SMTP_SECURE", False),
            user=config.get("SMTP_USER", ""),
            password=config.get("SMTP_PASS", ""),
            timeout=config.get("SMTP_TIMEOUT", 10),
        )

    def connect(self):
        """Open an authenticated connection; failures raise ``MailVerifyError``."""
        smtp = None
        try:
            if self.secure:
                smtp = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout,
                                        context=ssl.create_default_context())
            else:
                smtp = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
                smtp.ehlo()
                if smtp.has_extn("starttls"):
                    smtp.starttls(context=ssl.create_default_context())
                    smtp.ehlo()
            if self.user:
                smtp.login(self.user, self.password)
            code, _ = smtp.noop()
            if code != 250:
                raise smtplib.SMTPResponseException(code, b"NOOP rejected")
        except (smtplib.SMTPException, OSError) as exc:
            if smtp is not None:
                smtp.close()
            logger.error("SMTP verify failed for %s:%s: %s", self.host, self.port, exc)
            raise MailVerifyError(str(exc)) from exc
        return smtp

    def send(self, message):
        smtp = self.connect()
        try:
            smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("SMTP send failed: %s", exc)
            raise MailSendError(str(exc)) from exc
        finally:
            try:
                smtp.quit()
            except (smtplib.SMTPException, OSError):
                pass


def build_inquiry_message(email, product_no, sender, recipient):
    msg = EmailMessage()
    msg["Subject"] = f"Zapytanie o produkt #{product_no}"
    msg["From"] = sender
    msg["To"] = recipient
    msg["Reply-To"] = email
    msg.set_content(f"Email klienta: {email}\nProdukt: {product_no}")
    msg.add_alternative(
        '<div style="font-family: system-ui, Roboto, Arial, sans-serif;">'
        '<h2 style="margin:0 0 8px;">Nowe zapytanie produktowe</h2>'
        f"<p><b>Email klienta:</b> {escape(email)}</p>"
        f"<p><b>Numer produktu:</b> {escape(product_no)}</p>"
        '<hr/><p style="color:#666;font-size:12px;">Wiadomość z formularza na stronie.</p>'
        "</div>",
        subtype="html",
    )
    return msg


def send_inquiry(config, email, product_no):
    recipient = config.get("INQUIRY_TO")
    if not recipient:
        raise MailConfigError("INQUIRY_TO is not configured")
    mailer = SmtpMailer.from_config(config)
    sender = config.get("INQUIRY_FROM") or config.get("SMTP_USER") or recipient
    mailer.send(build_inquiry_message(email, product_no, sender, recipient))
    logger.info("Inquiry for product #%s sent to %s", product_no, recipient)
