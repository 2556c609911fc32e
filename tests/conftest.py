import pytest

from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from main import app
from routers.contact import email_service_factory
from services.email import EmailService


@pytest.fixture
def ses_client():
    client = MagicMock()
    client.send_email.return_value = {"MessageId": "test-message-id"}
    return client


@pytest.fixture
def email_service(ses_client):
    return EmailService(
        ses_client=ses_client,
        from_email="sender@example.com",
        default_to_email="recipient@example.com",
    )


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def use_email_service(client):
    """Route requests to the given email service (real or mocked)."""

    def _use(service):
        app.dependency_overrides[email_service_factory] = lambda: (lambda: service)
        return service

    return _use
