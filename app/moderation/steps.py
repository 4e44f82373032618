from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from app.logging.logger import Log
from app.moderation.exceptions import AnalysisFailureError
from app.moderation.models import MimeCategory, ReasonCode, Rejected, rejection
from app.moderation.video_poller import VideoModerationPoller, VideoPollState
from app.storage.models import StorageLocation
from app.text_extraction.base import BaseTextExtractor
from app.toxicity.base import BaseToxicityClassifier
from app.toxicity.models import ToxicityResult
from app.vision.base import BaseVisionModerator
from app.vision.models import ModerationLabel


@dataclass(slots=True)
class ModerationContext:
    location: StorageLocation
    category: MimeCategory
    violations: list[ModerationLabel] = field(default_factory=list)
    extracted_text: str = ""
    toxicity: ToxicityResult | None = None
    rejection: Rejected | None = None


class ModerationStep(ABC):
    @abstractmethod
    async def run(self, context: ModerationContext) -> ModerationContext:
        raise NotImplementedError


def filter_violations(labels: list[ModerationLabel], threshold: float) -> list[ModerationLabel]:
    """Keep only labels strictly above the confidence threshold."""
    return [label for label in labels if label.confidence > threshold]


class ImageLabelsStep(ModerationStep):
    def __init__(self, moderator: BaseVisionModerator, confidence_threshold: float) -> None:
        self._moderator = moderator
        self._threshold = confidence_threshold

    async def run(self, context: ModerationContext) -> ModerationContext:
        labels = await self._moderator.detect_image_labels(context.location)
        context.violations = filter_violations(labels, self._threshold)
        if context.violations:
            context.rejection = rejection(
                context.location,
                context.category,
                ReasonCode.CONTENT_VIOLATION,
                violations=context.violations,
            )
        return context


class VideoLabelsStep(ModerationStep):
    def __init__(self, poller: VideoModerationPoller, confidence_threshold: float) -> None:
        self._poller = poller
        self._threshold = confidence_threshold

    async def run(self, context: ModerationContext) -> ModerationContext:
        outcome = await self._poller.run(context.location)
        if outcome.state is not VideoPollState.SUCCEEDED:
            raise AnalysisFailureError(
                f"Video analysis {outcome.state.value.lower()} for job {outcome.job_id}: "
                f"{outcome.message}",
                location=context.location,
            )
        context.violations = filter_violations(outcome.labels, self._threshold)
        if context.violations:
            context.rejection = rejection(
                context.location,
                context.category,
                ReasonCode.CONTENT_VIOLATION,
                violations=context.violations,
            )
        return context


class ExtractTextStep(ModerationStep):
    def __init__(self, extractor: BaseTextExtractor) -> None:
        self._extractor = extractor

    async def run(self, context: ModerationContext) -> ModerationContext:
        context.extracted_text = await self._extractor.extract_text(context.location)
        Log.info(f"Extracted {len(context.extracted_text)} chars from {context.location.key}")
        return context


class ToxicityStep(ModerationStep):
    """Classify extracted text; skipped when there is no text."""

    def __init__(
        self,
        classifier: BaseToxicityClassifier,
        threshold: float,
        reason: ReasonCode,
    ) -> None:
        self._classifier = classifier
        self._threshold = threshold
        self._reason = reason

    async def run(self, context: ModerationContext) -> ModerationContext:
        if not context.extracted_text.strip():
            return context
        context.toxicity = await self._classifier.classify(context.extracted_text)
        if context.toxicity.toxicity_score > self._threshold:
            Log.info(
                f"Toxicity {context.toxicity.toxicity_score} exceeds {self._threshold} "
                f"for {context.location.key}"
            )
            context.rejection = rejection(
                context.location,
                context.category,
                self._reason,
                details=context.toxicity.detail,
            )
        return context
