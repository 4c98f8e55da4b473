"""Configuration management for email dispatch."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .providers.base import BaseEmailProvider
from .providers.emailjs import EmailJSProvider

logger = logging.getLogger(__name__)

EMAILJS_API_URL = "https://api.emailjs.com/api/v1.0/email/send"


class ProviderConfig(BaseModel):
    """Immutable snapshot of the provider credentials and identifiers."""

    model_config = ConfigDict(frozen=True)

    service_id: Optional[str] = None
    template_id: Optional[str] = None
    public_key: Optional[str] = None
    private_key: Optional[str] = None


class ProviderSettings(BaseSettings):
    """EmailJS credentials read from the environment."""

    service_id: Optional[str] = Field(
        None, validation_alias=AliasChoices("EMAILJS_SERVICE_ID", "EXPO_PUBLIC_EMAILJS_SERVICE_ID")
    )
    template_id: Optional[str] = Field(
        None, validation_alias=AliasChoices("EMAILJS_TEMPLATE_ID", "EXPO_PUBLIC_EMAILJS_TEMPLATE_ID")
    )
    public_key: Optional[str] = Field(
        None, validation_alias=AliasChoices("EMAILJS_PUBLIC_KEY", "EXPO_PUBLIC_EMAILJS_PUBLIC_KEY")
    )
    private_key: Optional[str] = Field(
        None, validation_alias=AliasChoices("EMAILJS_PRIVATE_KEY", "EXPO_PUBLIC_EMAILJS_PRIVATE_KEY")
    )

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field("INFO", description="Logging level")
    format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )
    file_path: Optional[str] = Field(None, description="Path to log file")
    max_file_size: int = Field(10 * 1024 * 1024, description="Maximum log file size in bytes")
    backup_count: int = Field(5, description="Number of backup log files to keep")
    console_output: bool = Field(True, description="Enable console logging")

    model_config = SettingsConfigDict(env_prefix="MAIL_DISPATCH_LOG_", case_sensitive=False, extra="ignore")


class DispatchSettings(BaseSettings):
    """Tunables for dispatching, pacing and simulation."""

    pacing_delay: float = Field(1.0, description="Seconds to wait after each send in a bulk run")
    simulation_delay: float = Field(1.5, description="Seconds a simulated send takes")
    request_timeout: Optional[float] = Field(
        None, description="Timeout for the provider call in seconds; unset means no timeout"
    )
    api_url: str = Field(EMAILJS_API_URL, description="EmailJS send endpoint")
    default_from_name: str = Field("Business Manager", description="Sender name when none is given")
    default_from_email: str = Field(
        "noreply@businessmanager.com", description="Sender address when none is given"
    )
    attribution: str = Field("Sent via Business Manager", description="Footer line of rendered HTML")
    log: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(env_prefix="MAIL_DISPATCH_", case_sensitive=False, extra="ignore")


def _load_env_file(env_file: Optional[str]) -> None:
    """Load a .env file without overriding variables already set."""
    if env_file and Path(env_file).exists():
        load_dotenv(env_file, override=False)


def resolve_config(env_file: Optional[str] = None) -> ProviderConfig:
    """Read the provider configuration from the environment.

    The environment is read on every call so that changes between calls
    are picked up. Values are not validated; absent ones come back as None.

    Args:
        env_file: Optional .env file loaded before reading

    Returns:
        ProviderConfig snapshot
    """
    _load_env_file(env_file)
    settings = ProviderSettings()
    return ProviderConfig(
        service_id=settings.service_id,
        template_id=settings.template_id,
        public_key=settings.public_key,
        private_key=settings.private_key,
    )


def is_configured(config: ProviderConfig) -> bool:
    """Return True when real sends are possible.

    The private key is only used to authenticate the client and does not
    count towards readiness.
    """
    return bool(config.service_id and config.template_id and config.public_key)


def load_settings(env_file: Optional[str] = None) -> DispatchSettings:
    """Load dispatch settings from defaults, an optional .env file and the environment."""
    _load_env_file(env_file)
    try:
        return DispatchSettings()
    except Exception as e:
        raise ValueError(f"Failed to load configuration: {e}")


@dataclass(frozen=True)
class ProviderInit:
    """Outcome of building a provider client."""

    provider: Optional[BaseEmailProvider] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.provider is not None


def initialize_provider(
    config: ProviderConfig, settings: Optional[DispatchSettings] = None
) -> ProviderInit:
    """Build the EmailJS client for a configuration.

    Failure is reported in the returned ProviderInit rather than raised, so
    callers can degrade to simulation.
    """
    settings = settings or DispatchSettings()
    try:
        provider = EmailJSProvider(
            public_key=config.public_key,
            private_key=config.private_key,
            api_url=settings.api_url,
            timeout=settings.request_timeout,
        )
    except ConfigurationError as e:
        logger.warning(f"EmailJS client could not be initialized: {e}")
        return ProviderInit(error=str(e))
    return ProviderInit(provider=provider)
