"""Single email dispatch against the configured provider or the simulator."""

import logging
import time
from dataclasses import fields, replace
from typing import Any, Dict, Optional, Tuple

from .config import (
    DispatchSettings,
    ProviderConfig,
    initialize_provider,
    is_configured,
    load_settings,
    resolve_config,
)
from .exceptions import NetworkError, ProviderConfigurationError, RateLimitError
from .logging import setup_logging
from .models import DispatchResult, EmailRequest, ErrorKind, TemplateRequest
from .parameters import build_template_parameters, build_template_variables
from .providers.base import BaseEmailProvider, describe_response
from .rendering import HtmlRenderer
from .simulator import Simulator
from .validators import validate_request

logger = logging.getLogger(__name__)

CONFIGURATION_ERROR_MESSAGE = "Invalid email configuration. Please check your EmailJS settings."
RATE_LIMIT_ERROR_MESSAGE = "Too many emails sent. Please wait a moment and try again."
NETWORK_ERROR_MESSAGE = (
    "Network connection error. Please check your internet connection and try again."
)
GENERIC_ERROR_MESSAGE = "Failed to send email. Please try again."

TEMPLATE_SIMULATION_SUBJECT = "Template Email"
TEMPLATE_SIMULATION_BODY = "This would be a template-based email."

_EMAIL_REQUEST_FIELDS = {f.name for f in fields(EmailRequest)}


def classify_provider_error(error: BaseException) -> Tuple[ErrorKind, str]:
    """Map a provider failure onto an error kind and a user-facing message.

    Typed provider errors are trusted first. Anything else is classified by
    its message: "rate limit" and "network" match in any case, "invalid"
    only as "invalid" or "Invalid".

    Args:
        error: Exception raised by the provider

    Returns:
        Tuple of (error_kind, message)
    """
    if isinstance(error, RateLimitError):
        return ErrorKind.RATE_LIMIT, RATE_LIMIT_ERROR_MESSAGE
    if isinstance(error, NetworkError):
        return ErrorKind.NETWORK, NETWORK_ERROR_MESSAGE
    if isinstance(error, ProviderConfigurationError):
        return ErrorKind.CONFIGURATION, CONFIGURATION_ERROR_MESSAGE

    message = str(error)
    if "rate limit" in message.lower():
        return ErrorKind.RATE_LIMIT, RATE_LIMIT_ERROR_MESSAGE
    if "invalid" in message or "Invalid" in message:
        return ErrorKind.CONFIGURATION, CONFIGURATION_ERROR_MESSAGE
    if "network" in message.lower():
        return ErrorKind.NETWORK, NETWORK_ERROR_MESSAGE
    if not message:
        return ErrorKind.UNKNOWN, GENERIC_ERROR_MESSAGE
    return ErrorKind.GENERIC, f"Send failed: {message}"


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


class EmailDispatcher:
    """Validates, maps and submits email requests.

    Falls back to the simulator whenever the provider is not configured;
    that is an expected state in development and is only logged as a
    notice. Send methods never raise, every outcome is a DispatchResult.
    """

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        provider: Optional[BaseEmailProvider] = None,
        settings: Optional[DispatchSettings] = None,
        simulator: Optional[Simulator] = None,
        env_file: Optional[str] = None,
    ):
        """Initialize the dispatcher.

        Args:
            config: Fixed provider configuration; when None the environment
                is read again on every send
            provider: Provider client; when None one is built from the
                configuration's keys
            settings: Dispatch settings
            simulator: Simulator used when the provider is not configured
            env_file: .env file consulted when reading configuration
        """
        self.config = config
        self.provider = provider
        self.settings = settings or DispatchSettings()
        self.simulator = simulator or Simulator(delay=self.settings.simulation_delay)
        self.env_file = env_file
        self.renderer = HtmlRenderer(attribution=self.settings.attribution)
        self._provider_cache: Dict[Tuple[Optional[str], Optional[str]], BaseEmailProvider] = {}

    def current_config(self) -> ProviderConfig:
        """Return the configuration to use for the next send."""
        if self.config is not None:
            return self.config
        return resolve_config(self.env_file)

    def _get_provider(self, config: ProviderConfig) -> Optional[BaseEmailProvider]:
        if self.provider is not None:
            return self.provider

        key = (config.public_key, config.private_key)
        if key not in self._provider_cache:
            init = initialize_provider(config, self.settings)
            if not init.ok:
                return None
            self._provider_cache[key] = init.provider
        return self._provider_cache[key]

    def close(self) -> None:
        """Close the provider clients built by this dispatcher.

        An injected provider belongs to the caller and is left open.
        """
        while self._provider_cache:
            _, provider = self._provider_cache.popitem()
            provider.close()

    def __enter__(self) -> "EmailDispatcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def preview(self, request: EmailRequest) -> str:
        """Render the request body as it would look in HTML."""
        return self.renderer.render(request.body)

    def send(self, request: EmailRequest) -> DispatchResult:
        """Send a single email.

        Args:
            request: Email request

        Returns:
            DispatchResult; failures are reported, never raised
        """
        config = self.current_config()
        if not is_configured(config):
            logger.info("EmailJS configuration is missing. Falling back to simulation.")
            return self.simulator.simulate(request)

        is_valid, reason = validate_request(request)
        if not is_valid:
            logger.warning(f"Rejected email to {request.to!r}: {reason}")
            return DispatchResult(success=False, error=reason, error_kind=ErrorKind.VALIDATION)

        provider = self._get_provider(config)
        if provider is None:
            logger.info("EmailJS client unavailable. Falling back to simulation.")
            return self.simulator.simulate(request)

        try:
            parameters = build_template_parameters(
                request,
                default_from_name=self.settings.default_from_name,
                default_from_email=self.settings.default_from_email,
            )
            logger.info(f"Sending email via {provider.name} to {request.to} (subject: {request.subject!r})")
            response = provider.send(config.service_id, config.template_id, parameters)
        except Exception as e:
            kind, message = classify_provider_error(e)
            logger.error(
                f"Error sending email to {request.to} ({kind.value}): {e}",
                extra={"recipient": request.to, "error_kind": kind.value},
            )
            return DispatchResult(success=False, error=message, details=e, error_kind=kind)

        message_id = response.text or f"emailjs_{_timestamp_ms()}"
        logger.info(
            f"Email sent to {request.to}: {describe_response(response)}",
            extra={"recipient": request.to, "message_id": message_id},
        )
        return DispatchResult(success=True, message_id=message_id, details=response)

    def _template_simulation_request(
        self, template_request: TemplateRequest, overrides: Optional[Dict[str, Any]]
    ) -> EmailRequest:
        request = EmailRequest(
            to=template_request.to,
            subject=TEMPLATE_SIMULATION_SUBJECT,
            body=TEMPLATE_SIMULATION_BODY,
        )
        known = {k: v for k, v in (overrides or {}).items() if k in _EMAIL_REQUEST_FIELDS}
        return replace(request, **known)

    def send_template(
        self, template_request: TemplateRequest, overrides: Optional[Dict[str, Any]] = None
    ) -> DispatchResult:
        """Send through a provider-side template.

        Only a destination address is required; content is authored in the
        template. Provider errors are reported with their raw message.

        Args:
            template_request: Destination, optional template id and variables
            overrides: Extra parameters merged over the variables

        Returns:
            DispatchResult; failures are reported, never raised
        """
        config = self.current_config()
        template_id = template_request.template_id or config.template_id
        if not config.service_id or not template_id:
            logger.info("EmailJS template configuration is missing. Falling back to simulation.")
            return self.simulator.simulate(self._template_simulation_request(template_request, overrides))

        if not template_request.to:
            return DispatchResult(
                success=False, error="Missing destination address", error_kind=ErrorKind.VALIDATION
            )

        provider = self._get_provider(config)
        if provider is None:
            logger.info("EmailJS client unavailable. Falling back to simulation.")
            return self.simulator.simulate(self._template_simulation_request(template_request, overrides))

        parameters = build_template_variables(template_request.to, template_request.variables, overrides)
        try:
            response = provider.send(config.service_id, template_id, parameters)
        except Exception as e:
            message = str(e)
            kind = ErrorKind.GENERIC if message else ErrorKind.UNKNOWN
            logger.error(
                f"Error sending template {template_id} to {template_request.to}: {e}",
                extra={"recipient": template_request.to, "template_id": template_id, "error_kind": kind.value},
            )
            return DispatchResult(
                success=False,
                error=message or "Unknown error",
                details=e,
                error_kind=kind,
            )

        message_id = response.text or f"emailjs_template_{_timestamp_ms()}"
        logger.info(
            f"Template {template_id} sent to {template_request.to}: {describe_response(response)}",
            extra={"recipient": template_request.to, "template_id": template_id, "message_id": message_id},
        )
        return DispatchResult(success=True, message_id=message_id, details=response)


def create_dispatcher(env_file: Optional[str] = None, configure_logging: bool = False) -> EmailDispatcher:
    """Build a dispatcher from the environment.

    Settings are loaded once; provider configuration is still read on
    every send. With ``configure_logging`` the package logger is set up
    from the ``MAIL_DISPATCH_LOG_*`` settings.
    """
    settings = load_settings(env_file)
    if configure_logging:
        setup_logging(settings.log)
    return EmailDispatcher(settings=settings, env_file=env_file)
