"""In-memory log of accepted contact form submissions."""

from dataclasses import dataclass
from datetime import datetime, timezone
from threading import Lock
from typing import List, Optional, Tuple

from src.shared.contact.schemas import ContactRequest, SubmissionSummary


@dataclass(frozen=True)
class ContactSubmission:
    """Accepted submission. Never mutated after creation."""
    id: int
    name: str
    email: str
    subject: str
    message: str
    timestamp: datetime
    client_identifier: str

    def to_summary(self) -> SubmissionSummary:
        return SubmissionSummary(
            id=self.id,
            name=self.name,
            email=self.email,
            subject=self.subject,
            timestamp=self.timestamp,
        )


class SubmissionLog:
    """
    Append-only submission store for the lifetime of the process.

    Ids start at 1 and are never reused; a restart resets the sequence since
    nothing is persisted.
    """

    def __init__(self, submissions: Optional[List[ContactSubmission]] = None):
        self._submissions: List[ContactSubmission] = list(submissions or [])
        self._next_id = max((s.id for s in self._submissions), default=0) + 1
        self._lock = Lock()

    def append(
        self,
        message: ContactRequest,
        identifier: str,
        timestamp: Optional[datetime] = None,
    ) -> ContactSubmission:
        with self._lock:
            submission = ContactSubmission(
                id=self._next_id,
                name=message.name,
                email=message.email,
                subject=message.subject,
                message=message.message,
                timestamp=timestamp or datetime.now(timezone.utc),
                client_identifier=identifier,
            )
            self._next_id += 1
            self._submissions.append(submission)
        return submission

    def list(self) -> Tuple[ContactSubmission, ...]:
        """Snapshot of all submissions in insertion order."""
        with self._lock:
            return tuple(self._submissions)

    def summaries(self) -> List[SubmissionSummary]:
        return [s.to_summary() for s in self.list()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._submissions)
