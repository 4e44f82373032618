from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class ModerationLabel:
    """A flagged visual category with its confidence (0-100)."""

    name: str
    confidence: float
    parent_name: str = ""
    timestamp_ms: int | None = None


class VideoJobState(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class VideoJobStatus:
    """One poll response of a video moderation job."""

    job_id: str
    state: VideoJobState
    labels: list[ModerationLabel] = field(default_factory=list)
    status_message: str = ""
