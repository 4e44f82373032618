from app.moderation.exceptions import AnalysisFailureError, ModerationError
from app.moderation.mime import classify_mime
from app.moderation.models import Accepted, MimeCategory, ReasonCode, Rejected, Verdict
from app.moderation.pipeline import ModerationPipeline, build_pipeline

__all__ = [
    "Accepted",
    "AnalysisFailureError",
    "MimeCategory",
    "ModerationError",
    "ModerationPipeline",
    "ReasonCode",
    "Rejected",
    "Verdict",
    "build_pipeline",
    "classify_mime",
]
