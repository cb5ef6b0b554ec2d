"""Email notification for contact form submissions."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import httpx

from src.shared.contact.config import ContactSettings
from src.shared.contact.input_validation import sanitize_text
from src.shared.contact.schemas import ContactRequest

RESEND_API_URL = "https://api.resend.com/emails"
SUBJECT_PREFIX = "Portfolio Contact: "


@dataclass(frozen=True)
class NotificationResult:
    success: bool
    error: Optional[str] = None


def render_text_body(data: ContactRequest, sent_at: datetime) -> str:
    return f"""
New Contact Form Submission

Name: {data.name}
Email: {data.email}
Subject: {data.subject}

Message:
{data.message}

Timestamp: {sent_at.isoformat()}
"""


def render_html_body(data: ContactRequest, sent_at: datetime) -> str:
    name = sanitize_text(data.name)
    email = sanitize_text(data.email)
    subject = sanitize_text(data.subject)
    message = sanitize_text(data.message, preserve_newlines=True)
    return f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
    <h2 style="color: #333; border-bottom: 2px solid #06b6d4; padding-bottom: 10px;">
        New Contact Form Submission
    </h2>
    <div style="background: #f5f5f5; padding: 20px; border-radius: 5px; margin: 20px 0;">
        <p><strong>Name:</strong> {name}</p>
        <p><strong>Email:</strong> <a href="mailto:{email}">{email}</a></p>
        <p><strong>Subject:</strong> {subject}</p>
        <p><strong>Message:</strong></p>
        <p style="background: white; padding: 15px; border-left: 4px solid #06b6d4; margin-top: 10px;">
            {message}
        </p>
    </div>
    <p style="color: #666; font-size: 12px; margin-top: 20px;">
        Timestamp: {sent_at.isoformat()}
    </p>
</div>
"""


def _provider_error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return f"Email provider returned HTTP {response.status_code}"


class Notifier:
    """
    Best-effort email dispatch through the Resend API.

    Without an API key the notification is written to the log instead and
    always reported as sent. send() never raises.
    """

    def __init__(self, settings: ContactSettings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    async def send(self, data: ContactRequest) -> NotificationResult:
        if not self.settings.email_configured:
            return self._log_notification(data)

        sent_at = datetime.now(timezone.utc)
        payload = {
            "from": self.settings.contact_email_from,
            "to": [self.settings.contact_email],
            "reply_to": data.email,
            "subject": f"{SUBJECT_PREFIX}{data.subject}",
            "html": render_html_body(data, sent_at),
            "text": render_text_body(data, sent_at),
        }

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self.settings.email_timeout_seconds,
            ) as client:
                response = await client.post(
                    RESEND_API_URL,
                    json=payload,
                    headers={
                        "Authorization": f"Bearer {self.settings.resend_api_key}",
                        "Content-Type": "application/json",
                    },
                )

            if not response.is_success:
                error = _provider_error_message(response)
                logging.error(f"Resend API error: {error}")
                return NotificationResult(success=False, error=error)

            try:
                email_id = response.json().get("id")
            except ValueError:
                email_id = None
            logging.info(f"Contact form email sent successfully via Resend: {email_id}")
            return NotificationResult(success=True)

        except httpx.TimeoutException:
            error = f"Email provider timed out after {self.settings.email_timeout_seconds}s"
            logging.error(f"Failed to send email: {error}")
            return NotificationResult(success=False, error=error)
        except Exception as e:
            error = str(e) or e.__class__.__name__
            logging.error(f"Failed to send email: {error}", exc_info=True)
            return NotificationResult(success=False, error=error)

    def _log_notification(self, data: ContactRequest) -> NotificationResult:
        logging.info(
            "\n=== EMAIL NOTIFICATION (Resend not configured) ===\n"
            f"To: {self.settings.contact_email}\n"
            f"From: {data.name} <{data.email}>\n"
            f"Subject: {data.subject}\n"
            f"Message: {data.message}\n"
            f"Timestamp: {datetime.now(timezone.utc).isoformat()}\n"
            "========================"
        )
        return NotificationResult(success=True)
