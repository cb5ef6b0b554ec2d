"""Pydantic schemas for contact API."""

from datetime import datetime
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from src.shared.contact.input_validation import (
    MIN_MESSAGE_LENGTH,
    clean_text,
    is_valid_email,
)


class ContactValidationError(ValueError):
    """Raised with the message of the first field that failed validation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _fail(message: str):
    # PydanticCustomError keeps the message free of the "Value error, " prefix
    raise PydanticCustomError("contact_field", message)


class ContactRequest(BaseModel):
    """
    Schema for contact form submission.

    Fields are checked in declaration order and values are stored trimmed.
    Missing or non-string values count as empty.
    """
    name: str = Field(default="", validate_default=True, description="Your name")
    email: str = Field(default="", validate_default=True, description="Your email address")
    subject: str = Field(default="", validate_default=True, description="Message subject")
    message: str = Field(default="", validate_default=True, description="Your message (at least 10 characters)")

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        cleaned = clean_text(v)
        if not cleaned:
            _fail("Name is required")
        return cleaned

    @field_validator('email', mode='before')
    @classmethod
    def validate_email(cls, v):
        cleaned = clean_text(v)
        if not cleaned:
            _fail("Email is required")
        if not is_valid_email(cleaned):
            _fail("Invalid email format")
        return cleaned

    @field_validator('subject', mode='before')
    @classmethod
    def validate_subject(cls, v):
        cleaned = clean_text(v)
        if not cleaned:
            _fail("Subject is required")
        return cleaned

    @field_validator('message', mode='before')
    @classmethod
    def validate_message(cls, v):
        cleaned = clean_text(v)
        if not cleaned:
            _fail("Message is required")
        if len(cleaned) < MIN_MESSAGE_LENGTH:
            _fail(f"Message must be at least {MIN_MESSAGE_LENGTH} characters")
        return cleaned


def validate_contact(raw: Any) -> ContactRequest:
    """
    Validate a decoded request body.

    Returns the validated message, or raises ContactValidationError naming
    only the first failure in field order.
    """
    if not isinstance(raw, dict):
        raw = {}
    try:
        return ContactRequest.model_validate(raw)
    except ValidationError as e:
        raise ContactValidationError(e.errors()[0]["msg"]) from e


class ContactResponse(BaseModel):
    """Schema for contact form response (camelCase on the wire)."""
    model_config = ConfigDict(populate_by_name=True)

    message: str
    submission_id: int = Field(alias="submissionId")
    remaining_submissions: int = Field(alias="remainingSubmissions")


class SubmissionSummary(BaseModel):
    """Public view of a stored submission (message body omitted)."""
    id: int
    name: str
    email: str
    subject: str
    timestamp: datetime


class SubmissionListResponse(BaseModel):
    total: int
    submissions: List[SubmissionSummary]
