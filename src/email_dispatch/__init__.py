"""Best-effort outbound email dispatch via EmailJS with a simulation fallback."""

__version__ = "0.1.0"

from .exceptions import (
    EmailDispatchError,
    ConfigurationError,
    ProviderError,
    ProviderConfigurationError,
    RateLimitError,
    NetworkError,
    DeliveryError,
)
from .models import (
    EmailRequest,
    TemplateRequest,
    DispatchResult,
    BulkFailure,
    BulkOutcome,
    ErrorKind,
)
from .config import (
    ProviderConfig,
    DispatchSettings,
    resolve_config,
    is_configured,
    load_settings,
    initialize_provider,
)
from .validators import validate_email_address, validate_request
from .rendering import HtmlRenderer, preview_email
from .parameters import build_template_parameters, build_template_variables
from .simulator import Simulator
from .dispatcher import EmailDispatcher, classify_provider_error, create_dispatcher
from .logging import setup_logging
from .bulk import BulkDispatcher
from .providers import EmailJSProvider, MockEmailProvider

__all__ = [
    "EmailDispatchError",
    "ConfigurationError",
    "ProviderError",
    "ProviderConfigurationError",
    "RateLimitError",
    "NetworkError",
    "DeliveryError",
    "EmailRequest",
    "TemplateRequest",
    "DispatchResult",
    "BulkFailure",
    "BulkOutcome",
    "ErrorKind",
    "ProviderConfig",
    "DispatchSettings",
    "resolve_config",
    "is_configured",
    "load_settings",
    "initialize_provider",
    "validate_email_address",
    "validate_request",
    "HtmlRenderer",
    "preview_email",
    "build_template_parameters",
    "build_template_variables",
    "Simulator",
    "EmailDispatcher",
    "classify_provider_error",
    "create_dispatcher",
    "setup_logging",
    "BulkDispatcher",
    "EmailJSProvider",
    "MockEmailProvider",
]
