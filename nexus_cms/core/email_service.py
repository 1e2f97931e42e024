import html
import logging
from typing import Dict, Optional

import resend

from nexus_cms.config import settings

logger = logging.getLogger(__name__)


def notifications_enabled() -> bool:
    return bool(settings.RESEND_API_KEY and settings.NOTIFY_EMAIL)


def send_email(to_email: str, subject: str, message: str, html_content: Optional[str] = None) -> bool:
    """
    Send an email through the Resend API. Returns False instead of raising so
    callers running as background tasks never fail the request.
    """
    try:
        resend.api_key = settings.RESEND_API_KEY

        params = {
            "from": settings.SENDER_EMAIL,
            "to": [to_email],
            "subject": subject,
            "text": message,
        }

        if html_content:
            params["html"] = html_content

        email = resend.Emails.send(params)

        logger.info("Email sent to %s (id=%s)", to_email, email.get("id"))
        return True

    except Exception:
        logger.exception("Could not send email to %s", to_email)
        return False


def notify_submission(kind: str, fields: Dict[str, Optional[str]]) -> bool:
    """Tell the site owner that a form was submitted (demo request, contact, application)."""
    if not notifications_enabled():
        logger.debug("Notifications disabled, skipping %s", kind)
        return False

    subject = f"New {kind} received"
    lines = [f"{label}: {value}" for label, value in fields.items() if value]
    rows = "".join(
        f"<tr><td><strong>{html.escape(label)}</strong></td><td>{html.escape(str(value))}</td></tr>"
        for label, value in fields.items() if value
    )
    html_content = f"""
    <!DOCTYPE html>
    <html>
    <body style="font-family: Arial, sans-serif; color: #333;">
        <h2>{html.escape(subject)}</h2>
        <table cellpadding="6">{rows}</table>
        <p style="color: #888;">Manage it from the Nexus admin dashboard.</p>
    </body>
    </html>
    """

    return send_email(settings.NOTIFY_EMAIL, subject, "\n".join(lines), html_content)
