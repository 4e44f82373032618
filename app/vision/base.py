from abc import ABC, abstractmethod

from app.storage.models import StorageLocation
from app.vision.models import ModerationLabel, VideoJobStatus


class BaseVisionModerator(ABC):
    """Contract for all visual moderation adapters."""

    @abstractmethod
    async def detect_image_labels(self, location: StorageLocation) -> list[ModerationLabel]:
        """Return every moderation label the provider reports for a stored image.

        Raises:
            VisionError: on any provider failure.
        """

    @abstractmethod
    async def start_video_moderation(self, location: StorageLocation) -> str:
        """Submit an analysis job for a stored video and return its job id.

        Raises:
            VisionError: on any provider failure.
        """

    @abstractmethod
    async def get_video_moderation(self, job_id: str) -> VideoJobStatus:
        """Fetch the current status of a video job.

        Labels are populated only once the job has succeeded.

        Raises:
            VisionError: on any provider failure.
        """
