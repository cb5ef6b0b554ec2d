import pytest
from fastapi.testclient import TestClient

from src.app import create_app
from src.shared.contact.config import ContactSettings
from src.shared.contact.rate_limit import RateLimiter
from src.shared.contact.service import ContactService


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    return ContactSettings(resend_api_key=None, environment="production")


@pytest.fixture
def contact_service(settings, clock):
    return ContactService(settings, rate_limiter=RateLimiter(clock=clock))


@pytest.fixture
def client(settings, contact_service):
    app = create_app(settings=settings, contact_service=contact_service)
    return TestClient(app)


@pytest.fixture
def valid_payload():
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "subject": "Collaboration",
        "message": "I enjoyed your portfolio and would like to chat.",
    }
