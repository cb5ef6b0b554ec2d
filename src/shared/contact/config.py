"""Configuration for the contact pipeline, read from environment variables."""

import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file (for local development)
load_dotenv()

DEFAULT_CONTACT_EMAIL = "luckyverma.ara2005@gmail.com"
DEFAULT_CONTACT_EMAIL_FROM = "Portfolio Contact <onboarding@resend.dev>"
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


class ContactSettings(BaseModel):
    """Settings for email dispatch and error reporting."""
    resend_api_key: Optional[str] = None
    contact_email: str = DEFAULT_CONTACT_EMAIL
    contact_email_from: str = DEFAULT_CONTACT_EMAIL_FROM
    email_timeout_seconds: float = Field(default=5.0, gt=0)
    environment: str = "production"
    cors_origins: List[str] = Field(default_factory=lambda: DEFAULT_CORS_ORIGINS.split(","))

    @property
    def email_configured(self) -> bool:
        return bool(self.resend_api_key)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @classmethod
    def from_env(cls) -> "ContactSettings":
        """Build settings from the current process environment."""
        cors_origins = os.environ.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        return cls(
            resend_api_key=os.environ.get("RESEND_API_KEY") or None,
            contact_email=os.environ.get("CONTACT_EMAIL") or DEFAULT_CONTACT_EMAIL,
            contact_email_from=os.environ.get("CONTACT_EMAIL_FROM") or DEFAULT_CONTACT_EMAIL_FROM,
            email_timeout_seconds=float(os.environ.get("CONTACT_EMAIL_TIMEOUT", "5")),
            environment=os.environ.get("ENVIRONMENT", "production"),
            cors_origins=[o.strip() for o in cors_origins.split(",") if o.strip()],
        )
