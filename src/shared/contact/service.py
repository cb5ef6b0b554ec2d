"""Contact service: owns the rate limiter, submission log and notifier."""

import logging
from typing import Optional

from fastapi import Request

from src.shared.contact.config import ContactSettings
from src.shared.contact.notifier import Notifier
from src.shared.contact.rate_limit import RateLimiter
from src.shared.contact.schemas import ContactRequest
from src.shared.contact.submissions import SubmissionLog


class ContactService:
    """Process-scoped contact pipeline state, built once by create_app()."""

    def __init__(
        self,
        settings: ContactSettings,
        rate_limiter: Optional[RateLimiter] = None,
        submission_log: Optional[SubmissionLog] = None,
        notifier: Optional[Notifier] = None,
    ):
        self.settings = settings
        self.rate_limiter = rate_limiter or RateLimiter()
        self.submission_log = submission_log or SubmissionLog()
        self.notifier = notifier or Notifier(settings)

    async def deliver(self, data: ContactRequest, submission_id: int) -> None:
        """Send the notification; failures are only logged."""
        result = await self.notifier.send(data)
        if not result.success:
            logging.error(f"Failed to send email for submission {submission_id}: {result.error}")


def get_contact_service(request: Request) -> ContactService:
    """FastAPI dependency returning the service attached to the app."""
    return request.app.state.contact_service
