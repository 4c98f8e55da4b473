"""Data models for email dispatch."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any
from enum import Enum

TemplateParameters = Dict[str, Any]


class ErrorKind(str, Enum):
    """Category of a failed dispatch."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    RATE_LIMIT = "rate_limit"
    NETWORK = "network"
    GENERIC = "generic"
    UNKNOWN = "unknown"


@dataclass
class EmailRequest:
    """Represents an outbound email request."""

    to: str
    subject: str
    body: str
    from_email: Optional[str] = None
    cc: List[str] = field(default_factory=list)
    bcc: List[str] = field(default_factory=list)
    reply_to: Optional[str] = None


@dataclass
class TemplateRequest:
    """Request for a send driven by a provider-side template."""

    to: str
    template_id: Optional[str] = None
    variables: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DispatchResult:
    """Result of dispatching an email."""

    success: bool
    message_id: Optional[str] = None
    error: Optional[str] = None
    details: Any = None
    error_kind: Optional[ErrorKind] = None
    simulated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "success": self.success,
            "message_id": self.message_id,
            "error": self.error,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "simulated": self.simulated,
        }


@dataclass
class BulkFailure:
    """A request that could not be delivered during a bulk send."""

    request: EmailRequest
    error: str


@dataclass
class BulkOutcome:
    """Partitioned results of a bulk send, in input order."""

    succeeded: List[DispatchResult] = field(default_factory=list)
    failed: List[BulkFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "succeeded": [r.to_dict() for r in self.succeeded],
            "failed": [
                {"to": f.request.to, "subject": f.request.subject, "error": f.error}
                for f in self.failed
            ],
        }
