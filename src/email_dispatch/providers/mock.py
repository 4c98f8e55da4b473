"""Mock email provider for testing and preview operations."""

from typing import List, Optional, Tuple, Union

from ..models import TemplateParameters
from .base import BaseEmailProvider, ProviderResponse

Outcome = Union[str, Exception]


class MockEmailProvider(BaseEmailProvider):
    """Provider that records calls instead of sending emails.

    Each send consumes the next queued outcome: a string becomes the
    response text, an exception is raised. Once the queue is empty every
    send succeeds with ``default_text``.
    """

    name = "mock"

    def __init__(self, outcomes: Optional[List[Outcome]] = None, default_text: str = "OK"):
        self.outcomes = list(outcomes or [])
        self.default_text = default_text
        self.calls: List[Tuple[str, str, TemplateParameters]] = []

    def send(
        self, service_id: str, template_id: str, parameters: TemplateParameters
    ) -> ProviderResponse:
        """Record the call and return or raise the next queued outcome."""
        self.calls.append((service_id, template_id, dict(parameters)))
        outcome = self.outcomes.pop(0) if self.outcomes else self.default_text
        if isinstance(outcome, Exception):
            raise outcome
        return ProviderResponse(status=200, text=outcome)
