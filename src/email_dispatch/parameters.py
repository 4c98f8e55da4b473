"""Mapping of email requests onto provider template parameters."""

from typing import Any, Dict, Optional

from .models import EmailRequest, TemplateParameters

DEFAULT_FROM_NAME = "Business Manager"
DEFAULT_FROM_EMAIL = "noreply@businessmanager.com"


class TemplateParameterBuilder:
    """Ordered builder for a flat template parameter mapping.

    Optional keys are only added when their value is non-empty; the
    provider would otherwise read an empty string as an explicit override.
    """

    def __init__(self):
        self._params: Dict[str, Any] = {}

    def set(self, key: str, value: Any) -> "TemplateParameterBuilder":
        self._params[key] = value
        return self

    def set_optional(self, key: str, value: Any) -> "TemplateParameterBuilder":
        if value:
            self._params[key] = value
        return self

    def update(self, values: Optional[Dict[str, Any]]) -> "TemplateParameterBuilder":
        if values:
            self._params.update(values)
        return self

    def build(self) -> TemplateParameters:
        return dict(self._params)


def build_template_parameters(
    request: EmailRequest,
    default_from_name: str = DEFAULT_FROM_NAME,
    default_from_email: str = DEFAULT_FROM_EMAIL,
) -> TemplateParameters:
    """Build EmailJS template parameters from a validated request.

    The body is passed through unrendered; formatting is left to the
    provider-side template.

    Args:
        request: Validated email request
        default_from_name: Sender name used when the request has no sender
        default_from_email: Sender address used when the request has no sender

    Returns:
        Template parameters
    """
    builder = (
        TemplateParameterBuilder()
        .set("to_email", request.to)
        .set("to_name", request.to.split("@", 1)[0])
        .set("from_name", request.from_email or default_from_name)
        .set("from_email", request.from_email or default_from_email)
        .set("subject", request.subject)
        .set("message", request.body)
        .set("reply_to", request.reply_to or request.from_email or default_from_email)
        .set_optional("cc_emails", ", ".join(request.cc or []))
        .set_optional("bcc_emails", ", ".join(request.bcc or []))
    )
    return builder.build()


def build_template_variables(
    to: str,
    variables: Optional[Dict[str, Any]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> TemplateParameters:
    """Build parameters for a template send.

    Caller variables are merged over ``{"to_email": to}`` and overrides over
    both; on key collisions the later source wins.
    """
    return TemplateParameterBuilder().set("to_email", to).update(variables).update(overrides).build()
