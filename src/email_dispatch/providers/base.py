"""Base email provider interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ..models import TemplateParameters


@dataclass(frozen=True)
class ProviderResponse:
    """Raw response returned by a provider send."""

    status: int
    text: str
    raw: Any = None


class BaseEmailProvider(ABC):
    """Abstract base class for template-based email providers."""

    name: str = "base"

    @abstractmethod
    def send(
        self, service_id: str, template_id: str, parameters: TemplateParameters
    ) -> ProviderResponse:
        """Send an email through a provider-side template.

        Args:
            service_id: Provider service identifier
            template_id: Provider template identifier
            parameters: Flat mapping of template variables

        Returns:
            ProviderResponse on success

        Raises:
            ProviderError: If the provider rejects or fails the send
        """
        pass

    def close(self) -> None:
        """Release any underlying resources."""
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"


def describe_response(response: ProviderResponse) -> str:
    """Short description of a response for log lines."""
    return f"{response.status} {response.text!r}"
