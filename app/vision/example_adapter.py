"""Example vision moderation adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseVisionModerator and register the provider in VisionModeratorFactory.
"""

from typing import ClassVar

from app.storage.models import StorageLocation
from app.vision.base import BaseVisionModerator
from app.vision.models import ModerationLabel, VideoJobState, VideoJobStatus


class ExampleModerator(BaseVisionModerator):
    """Example adapter that never flags content.

    No network calls. Video jobs succeed on the first poll with no labels.
    """

    JOB_PREFIX: ClassVar[str] = "example-job:"

    async def detect_image_labels(self, location: StorageLocation) -> list[ModerationLabel]:
        _ = location
        return []

    async def start_video_moderation(self, location: StorageLocation) -> str:
        return f"{self.JOB_PREFIX}{location.key}"

    async def get_video_moderation(self, job_id: str) -> VideoJobStatus:
        return VideoJobStatus(job_id=job_id, state=VideoJobState.SUCCEEDED)
