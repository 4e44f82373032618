import asyncio
from collections.abc import Collection, Sequence

from app.config.settings import Settings
from app.logging.logger import Log
from app.moderation.exceptions import AnalysisFailureError
from app.moderation.mime import classify_mime
from app.moderation.models import MimeCategory, Rejected, Verdict
from app.moderation.pipeline import ModerationPipeline, build_pipeline
from app.storage.base import BaseObjectStore
from app.storage.factory import ObjectStoreFactory
from app.storage.models import StorageLocation
from app.storage.rollback import delete_all_quietly
from app.text_extraction.factory import TextExtractorFactory
from app.toxicity.factory import ToxicityClassifierFactory
from app.upload.exceptions import MissingFileError
from app.upload.models import BatchOutcome, UploadedFile
from app.vision.factory import VisionModeratorFactory


class UploadOrchestrator:
    """Stores uploaded files and runs each through the moderation pipeline.

    Files are always stored before they are evaluated. `accepted` restricts a
    call site to some categories; files outside it are treated as unsupported,
    so they are stored, rejected and rolled back like any other rejection.
    """

    def __init__(self, store: BaseObjectStore, pipeline: ModerationPipeline) -> None:
        self._store = store
        self._pipeline = pipeline

    async def upload(
        self,
        file: UploadedFile | None,
        folder: str | None = None,
        accepted: Collection[MimeCategory] | None = None,
    ) -> Verdict:
        """Store one file and return its moderation verdict.

        Raises:
            MissingFileError: if no file was provided.
            AnalysisFailureError: if analysis failed; the object is rolled back.
        """
        if file is None:
            raise MissingFileError("No file provided")

        location = await self._store_file(file, folder)
        category = self._categorize(file, accepted)
        try:
            return await self._pipeline.evaluate(category, location)
        except AnalysisFailureError:
            await delete_all_quietly(self._store, [location])
            raise

    async def upload_batch(
        self,
        files: Sequence[UploadedFile],
        folder: str | None = None,
        accepted: Collection[MimeCategory] | None = None,
    ) -> BatchOutcome:
        """Store every file concurrently, then evaluate them in order.

        The first rejection stops evaluation. The batch is all-or-none: every
        other stored object of the batch is rolled back and only that
        rejection is reported.

        Raises:
            MissingFileError: if files is empty.
            AnalysisFailureError: if analysis failed; the batch is rolled back.
        """
        if not files:
            raise MissingFileError("No files provided")

        locations = await self._store_batch(files, folder)
        outcome = BatchOutcome()
        for file, location in zip(files, locations):
            category = self._categorize(file, accepted)
            try:
                verdict = await self._pipeline.evaluate(category, location)
            except AnalysisFailureError:
                await delete_all_quietly(self._store, locations)
                raise
            if isinstance(verdict, Rejected):
                others = [other for other in locations if other != location]
                Log.warning(
                    f"Batch rejected at {location.key}, rolling back {len(others)} other files"
                )
                await delete_all_quietly(self._store, others)
                return BatchOutcome(rejection=verdict)
            outcome.accepted.append(verdict)

        Log.info(f"Batch of {len(files)} files accepted")
        return outcome

    async def _store_file(self, file: UploadedFile, folder: str | None) -> StorageLocation:
        location = self._store.location_for(folder, file.original_name)
        stored = await self._store.put(location, file.content, file.mime_type)
        Log.info(
            f"Stored {file.original_name} ({file.size_bytes} bytes)",
            bucket=stored.bucket,
            key=stored.key,
        )
        return stored

    async def _store_batch(
        self,
        files: Sequence[UploadedFile],
        folder: str | None,
    ) -> list[StorageLocation]:
        results = await asyncio.gather(
            *(self._store_file(file, folder) for file in files),
            return_exceptions=True,
        )
        stored = [result for result in results if isinstance(result, StorageLocation)]
        errors = [result for result in results if isinstance(result, BaseException)]
        if errors:
            Log.error(f"Batch store failed for {len(errors)} of {len(files)} files")
            await delete_all_quietly(self._store, stored)
            raise errors[0]
        return stored

    @staticmethod
    def _categorize(
        file: UploadedFile,
        accepted: Collection[MimeCategory] | None,
    ) -> MimeCategory:
        category = classify_mime(file.mime_type)
        if accepted is not None and category not in accepted:
            Log.warning(f"{file.original_name} ({file.mime_type}) is not accepted here")
            return MimeCategory.UNSUPPORTED
        return category


def build_orchestrator(settings: Settings) -> UploadOrchestrator:
    """Build an UploadOrchestrator with all configured provider adapters."""
    store = ObjectStoreFactory.create(settings)
    pipeline = build_pipeline(
        settings,
        store=store,
        moderator=VisionModeratorFactory.create(settings),
        extractor=TextExtractorFactory.create(settings, store),
        classifier=ToxicityClassifierFactory.create(settings),
    )
    return UploadOrchestrator(store=store, pipeline=pipeline)
