"""Custom exceptions for email dispatch."""

from typing import Optional


class EmailDispatchError(Exception):
    """Base exception for all email dispatch errors."""

    pass


class ConfigurationError(EmailDispatchError):
    """Raised when a provider cannot be built from the given configuration."""

    pass


class ProviderError(EmailDispatchError):
    """Raised when the email provider rejects or fails a send."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


class ProviderConfigurationError(ProviderError):
    """Raised when the provider reports bad credentials or identifiers."""

    pass


class RateLimitError(ProviderError):
    """Raised when rate limit is exceeded."""

    pass


class NetworkError(ProviderError):
    """Raised when the provider cannot be reached."""

    pass


class DeliveryError(ProviderError):
    """Raised when email delivery fails."""

    pass
