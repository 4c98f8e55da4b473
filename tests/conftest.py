"""Shared test fixtures."""

import pytest

from email_dispatch.config import ProviderConfig, DispatchSettings
from email_dispatch.models import EmailRequest
from email_dispatch.providers.mock import MockEmailProvider
from email_dispatch.simulator import Simulator

ENV_VARS = [
    "EMAILJS_SERVICE_ID",
    "EMAILJS_TEMPLATE_ID",
    "EMAILJS_PUBLIC_KEY",
    "EMAILJS_PRIVATE_KEY",
    "EXPO_PUBLIC_EMAILJS_SERVICE_ID",
    "EXPO_PUBLIC_EMAILJS_TEMPLATE_ID",
    "EXPO_PUBLIC_EMAILJS_PUBLIC_KEY",
    "EXPO_PUBLIC_EMAILJS_PRIVATE_KEY",
]


class SleepRecorder:
    """Stand-in for time.sleep that records requested delays."""

    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)

    @property
    def total(self):
        return sum(self.calls)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure no real EmailJS credentials leak into tests.

    Every variable is set then removed so monkeypatch unsets it again on
    teardown, even when a test loads it from a .env file.
    """
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def provider_config():
    """A complete provider configuration."""
    return ProviderConfig(
        service_id="service_test",
        template_id="template_test",
        public_key="public_test",
        private_key="private_test",
    )


@pytest.fixture
def settings():
    return DispatchSettings()


@pytest.fixture
def mock_provider():
    return MockEmailProvider()


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()


@pytest.fixture
def simulator(sleep_recorder):
    """Simulator with a recorded sleep and a fixed clock."""
    return Simulator(delay=1.5, sleep=sleep_recorder, clock=lambda: 1700000000.123)


@pytest.fixture
def valid_request():
    return EmailRequest(
        to="alice@example.com",
        subject="Hello",
        body="line1\nline2",
    )


@pytest.fixture
def sample_requests():
    """Three requests, the last with an invalid address."""
    return [
        EmailRequest(to="alice@example.com", subject="Hi Alice", body="Hello Alice"),
        EmailRequest(to="bob@example.com", subject="Hi Bob", body="Hello Bob"),
        EmailRequest(to="invalid-email", subject="Hi Charlie", body="Hello Charlie"),
    ]
