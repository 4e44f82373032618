from collections.abc import Mapping, Sequence

from app.config.settings import Settings
from app.logging.logger import Log
from app.moderation.exceptions import AnalysisFailureError
from app.moderation.models import (
    Accepted,
    MimeCategory,
    ReasonCode,
    Verdict,
    public_url,
    rejection,
)
from app.moderation.steps import (
    ExtractTextStep,
    ImageLabelsStep,
    ModerationContext,
    ModerationStep,
    ToxicityStep,
    VideoLabelsStep,
)
from app.moderation.video_poller import VideoModerationPoller
from app.storage.base import BaseObjectStore
from app.storage.exceptions import StorageError
from app.storage.models import StorageLocation
from app.storage.rollback import delete_quietly
from app.text_extraction.base import BaseTextExtractor
from app.text_extraction.exceptions import TextExtractionError
from app.toxicity.base import BaseToxicityClassifier
from app.toxicity.exceptions import ToxicityError
from app.vision.base import BaseVisionModerator
from app.vision.exceptions import VisionError

_PROVIDER_ERRORS = (VisionError, TextExtractionError, ToxicityError, StorageError)


class ModerationPipeline:
    """Runs the checks that apply to a stored file and decides its verdict.

    Checks for each category run in a fixed order and stop at the first
    rejection. Every rejection rolls back the stored object before the verdict
    is returned. Provider failures raise AnalysisFailureError and leave the
    object in place for the caller to handle.
    """

    def __init__(
        self,
        *,
        store: BaseObjectStore,
        steps: Mapping[MimeCategory, Sequence[ModerationStep]],
        public_base_url: str,
    ) -> None:
        self._store = store
        self._steps = {category: list(chain) for category, chain in steps.items()}
        self._public_base_url = public_base_url

    async def evaluate(self, category: MimeCategory, location: StorageLocation) -> Verdict:
        """Moderate the object at location as a file of the given category."""
        Log.info(f"Evaluating {location.key} as {category.value}")

        chain = self._steps.get(category)
        if category is MimeCategory.UNSUPPORTED or chain is None:
            verdict = rejection(location, category, ReasonCode.UNSUPPORTED_TYPE)
        else:
            context = ModerationContext(location=location, category=category)
            for step in chain:
                context = await self._run_step(step, context)
                if context.rejection is not None:
                    break
            verdict = context.rejection

        if verdict is not None:
            Log.warning(
                f"Rejected {location.key}: {verdict.reason.value}",
                violations=len(verdict.violations),
            )
            await delete_quietly(self._store, location)
            return verdict

        Log.info(f"Accepted {location.key}")
        return Accepted(location=location, public_url=public_url(self._public_base_url, location))

    @staticmethod
    async def _run_step(step: ModerationStep, context: ModerationContext) -> ModerationContext:
        try:
            return await step.run(context)
        except _PROVIDER_ERRORS as exc:
            Log.error(f"{type(step).__name__} failed for {context.location.key}: {exc}")
            raise AnalysisFailureError(
                f"{type(step).__name__} failed: {exc}",
                location=context.location,
            ) from exc


def build_pipeline(
    settings: Settings,
    *,
    store: BaseObjectStore,
    moderator: BaseVisionModerator,
    extractor: BaseTextExtractor,
    classifier: BaseToxicityClassifier,
) -> ModerationPipeline:
    """Wire the per-category check chains from settings and provider clients."""
    confidence = settings.moderation_confidence_threshold
    toxicity = settings.toxicity_threshold
    poller = VideoModerationPoller(
        moderator,
        interval_seconds=settings.video_poll_interval_seconds,
        max_attempts=settings.video_poll_max_attempts,
    )
    extract_text = ExtractTextStep(extractor)
    steps: dict[MimeCategory, list[ModerationStep]] = {
        MimeCategory.IMAGE: [
            ImageLabelsStep(moderator, confidence),
            extract_text,
            ToxicityStep(classifier, toxicity, ReasonCode.NEGATIVE_SENTIMENT),
        ],
        MimeCategory.VIDEO: [
            VideoLabelsStep(poller, confidence),
        ],
        MimeCategory.PDF: [
            extract_text,
            ToxicityStep(classifier, toxicity, ReasonCode.TOXIC_CONTENT),
        ],
    }
    return ModerationPipeline(
        store=store,
        steps=steps,
        public_base_url=settings.cloudfront_base_url,
    )
