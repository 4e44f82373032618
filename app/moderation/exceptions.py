from app.moderation.models import ReasonCode
from app.storage.models import StorageLocation


class ModerationError(Exception):
    """Base exception for all moderation-related errors."""


class AnalysisFailureError(ModerationError):
    """Raised when a file could not be analysed.

    A failed analysis is not evidence of a violation: callers answer with a
    server-side error instead of a moderation verdict.
    """

    reason = ReasonCode.ANALYSIS_FAILURE

    def __init__(self, message: str, location: StorageLocation | None = None) -> None:
        super().__init__(message)
        self.location = location
