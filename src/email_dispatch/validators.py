"""Email request validation utilities."""

import re
from typing import Optional, Tuple

from .models import EmailRequest

# Whitespace for addresses and body lines. Unlike ``str.isspace`` this
# excludes the \x1c-\x1f separators and U+0085, and includes U+FEFF.
WHITESPACE = "".join(
    chr(c)
    for c in [0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x1680, *range(0x2000, 0x200B),
              0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF]
)

_ADDRESS_PART = f"[^{WHITESPACE}@]+"
EMAIL_PATTERN = re.compile(rf"^{_ADDRESS_PART}@{_ADDRESS_PART}\.{_ADDRESS_PART}$")

MISSING_FIELDS_REASON = "Missing required fields (to, subject, or body)"
INVALID_ADDRESS_REASON = "Invalid address format"


def validate_email_address(email: str) -> bool:
    """Check an address against the lightweight ``local@domain.tld`` grammar.

    No DNS or MX lookup is made and internationalized addresses are not
    special-cased.

    Args:
        email: Email address to validate

    Returns:
        True if the address is syntactically acceptable
    """
    # fullmatch so a trailing newline cannot slip past ``$``
    return bool(email) and EMAIL_PATTERN.fullmatch(email) is not None


def validate_request(request: EmailRequest) -> Tuple[bool, Optional[str]]:
    """Validate that a request can be handed to a provider.

    Args:
        request: Email request to validate

    Returns:
        Tuple of (is_valid, reason); reason is None when valid
    """
    if not request.to or not request.subject or not request.body:
        return False, MISSING_FIELDS_REASON

    if not validate_email_address(request.to):
        return False, INVALID_ADDRESS_REASON

    return True, None
