import logging
import re
from typing import List

from shared.utils.email_client import EmailClient
from shared.core.config import settings

logger = logging.getLogger(__name__)

EMAIL_TEMPLATES = {
    "password_reset": (
        "<p>Hello {name},</p>"
        "<p>We received a request to reset the password for your warehouse portal account.</p>"
        "<p><a href=\"{reset_link}\">Reset your password</a></p>"
        "<p>The link expires in {expires_minutes} minutes. If you did not ask for this, ignore this email.</p>"
    ),
    "customer_welcome": (
        "<p>Hello {name},</p>"
        "<p>A customer portal login has been created for {company_name}.</p>"
        "<p>Sign in at <a href=\"{login_link}\">{login_link}</a> with {email}.</p>"
    ),
}


class EmailHelper:
    """Sends the named templates above via EmailClient."""

    def __init__(self):
        self.mailer = EmailClient(
            smtp_host=settings.SMTP_HOST,
            smtp_port=settings.SMTP_PORT,
            username=settings.SMTP_USERNAME,
            password=settings.SMTP_PASSWORD,
            use_ssl=settings.SMTP_USE_SSL,
        )

    def send_email(
        self,
        template_code: str,
        recipients: List[str],
        subject: str,
        context: dict,
    ) -> bool:
        if not settings.SMTP_HOST:
            logger.warning(
                "SMTP_HOST not configured, skipping '%s' email to %s", template_code, recipients)
            return False

        html_body = EMAIL_TEMPLATES[template_code].format(**context)

        return self.mailer.send_email(
            sender=settings.EMAIL_SENDER,
            recipients=recipients,
            subject=subject,
            text_body=self._strip_html_tags(html_body),
            html_body=html_body,
        )

    @staticmethod
    def _strip_html_tags(html: str) -> str:
        return re.sub("<.*?>", "", html or "")
