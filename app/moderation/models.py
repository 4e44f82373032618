from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from app.storage.models import StorageLocation
from app.vision.models import ModerationLabel


class MimeCategory(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    PDF = "pdf"
    UNSUPPORTED = "unsupported"


class ReasonCode(str, Enum):
    CONTENT_VIOLATION = "ContentViolation"
    TOXIC_CONTENT = "ToxicContent"
    NEGATIVE_SENTIMENT = "NegativeSentiment"
    UNSUPPORTED_TYPE = "UnsupportedType"
    ANALYSIS_FAILURE = "AnalysisFailure"


DEFAULT_MESSAGES: dict[ReasonCode, str] = {
    ReasonCode.CONTENT_VIOLATION: "Content violation detected",
    ReasonCode.TOXIC_CONTENT: "Toxic content detected and file deleted",
    ReasonCode.NEGATIVE_SENTIMENT: "Negative sentiment detected in content",
    ReasonCode.UNSUPPORTED_TYPE: "Unsupported file type",
    ReasonCode.ANALYSIS_FAILURE: "Content analysis failed",
}


@dataclass(frozen=True)
class Accepted:
    """The file passed every check and stays in storage."""

    location: StorageLocation
    public_url: str


@dataclass(frozen=True)
class Rejected:
    """The file failed a check; its stored object has been rolled back."""

    location: StorageLocation
    category: MimeCategory
    reason: ReasonCode
    message: str
    violations: list[ModerationLabel] = field(default_factory=list)
    details: dict[str, Any] | None = None


Verdict = Accepted | Rejected


def rejection(
    location: StorageLocation,
    category: MimeCategory,
    reason: ReasonCode,
    *,
    violations: list[ModerationLabel] | None = None,
    details: dict[str, Any] | None = None,
) -> Rejected:
    """Build a Rejected verdict carrying the default message for reason."""
    return Rejected(
        location=location,
        category=category,
        reason=reason,
        message=DEFAULT_MESSAGES[reason],
        violations=list(violations or []),
        details=details,
    )


def public_url(base_url: str, location: StorageLocation) -> str:
    """Externally addressable URL: the public base concatenated with the key."""
    return f"{base_url}{location.key}"
