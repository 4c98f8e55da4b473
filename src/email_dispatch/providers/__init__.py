"""Email provider implementations."""

from .base import BaseEmailProvider, ProviderResponse
from .emailjs import EmailJSProvider
from .mock import MockEmailProvider

__all__ = ["BaseEmailProvider", "ProviderResponse", "EmailJSProvider", "MockEmailProvider"]
