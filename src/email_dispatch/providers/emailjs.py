"""EmailJS REST provider."""

import logging
from typing import Optional

import requests

from ..models import TemplateParameters
from ..exceptions import (
    ConfigurationError,
    DeliveryError,
    NetworkError,
    ProviderConfigurationError,
    RateLimitError,
)
from .base import BaseEmailProvider, ProviderResponse

logger = logging.getLogger(__name__)


class EmailJSProvider(BaseEmailProvider):
    """EmailJS provider using the ``/email/send`` REST endpoint."""

    name = "emailjs"

    def __init__(
        self,
        public_key: str,
        private_key: Optional[str] = None,
        api_url: str = "https://api.emailjs.com/api/v1.0/email/send",
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the EmailJS provider.

        Args:
            public_key: EmailJS public key (sent as ``user_id``)
            private_key: Optional private key (sent as ``accessToken``)
            api_url: Send endpoint
            timeout: Request timeout in seconds, None for no timeout
            session: Optional requests session to reuse

        Raises:
            ConfigurationError: If no public key is given
        """
        if not public_key:
            raise ConfigurationError("EmailJS public key is required")
        self.public_key = public_key
        self.private_key = private_key
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def send(
        self, service_id: str, template_id: str, parameters: TemplateParameters
    ) -> ProviderResponse:
        """Send a templated email via EmailJS.

        Args:
            service_id: EmailJS service id
            template_id: EmailJS template id
            parameters: Template parameters

        Returns:
            ProviderResponse with the status code and response text

        Raises:
            RateLimitError: On HTTP 429
            ProviderConfigurationError: On HTTP 401 or 403
            NetworkError: If the API cannot be reached
            DeliveryError: On any other non-success response
        """
        payload = {
            "service_id": service_id,
            "template_id": template_id,
            "user_id": self.public_key,
            "template_params": parameters,
        }
        if self.private_key:
            payload["accessToken"] = self.private_key

        try:
            response = self.session.post(self.api_url, json=payload, timeout=self.timeout)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            raise NetworkError(f"Network error contacting EmailJS: {e}") from e
        except requests.exceptions.RequestException as e:
            raise DeliveryError(f"Request to EmailJS failed: {e}") from e

        if response.status_code == 429:
            raise RateLimitError(
                f"EmailJS rate limit exceeded: {response.text}",
                status_code=response.status_code,
                response_text=response.text,
            )
        if response.status_code in [401, 403]:
            raise ProviderConfigurationError(
                response.text or f"EmailJS refused the credentials (status {response.status_code})",
                status_code=response.status_code,
                response_text=response.text,
            )
        if response.status_code not in [200, 201, 202]:
            raise DeliveryError(
                response.text or f"EmailJS returned status {response.status_code}",
                status_code=response.status_code,
                response_text=response.text,
            )

        logger.debug(f"EmailJS accepted message for service {service_id}: {response.text}")
        return ProviderResponse(status=response.status_code, text=response.text, raw=response)

    def close(self) -> None:
        self.session.close()
