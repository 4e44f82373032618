import asyncio
from dataclasses import dataclass, field
from enum import Enum

from app.logging.logger import Log
from app.storage.models import StorageLocation
from app.vision.base import BaseVisionModerator
from app.vision.models import ModerationLabel, VideoJobState


class VideoPollState(str, Enum):
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
    TIMED_OUT = "TIMED_OUT"


@dataclass(frozen=True)
class VideoJobOutcome:
    """Terminal result of waiting on a video moderation job."""

    state: VideoPollState
    job_id: str
    labels: list[ModerationLabel] = field(default_factory=list)
    message: str = ""
    attempts: int = 0


class VideoModerationPoller:
    """Submit a video job, then poll it at a fixed interval until it finishes.

    Polling stops after max_attempts status checks; a job still running by
    then is reported as TIMED_OUT.
    """

    def __init__(
        self,
        moderator: BaseVisionModerator,
        *,
        interval_seconds: float = 5,
        max_attempts: int = 120,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._moderator = moderator
        self._interval_seconds = interval_seconds
        self._max_attempts = max_attempts

    async def run(self, location: StorageLocation) -> VideoJobOutcome:
        job_id = await self._moderator.start_video_moderation(location)

        for attempt in range(1, self._max_attempts + 1):
            status = await self._moderator.get_video_moderation(job_id)
            if status.state is VideoJobState.SUCCEEDED:
                Log.info(f"Video job {job_id} succeeded after {attempt} polls")
                return VideoJobOutcome(
                    state=VideoPollState.SUCCEEDED,
                    job_id=job_id,
                    labels=status.labels,
                    attempts=attempt,
                )
            if status.state is VideoJobState.FAILED:
                Log.error(f"Video job {job_id} failed: {status.status_message}")
                return VideoJobOutcome(
                    state=VideoPollState.FAILED,
                    job_id=job_id,
                    message=status.status_message or "Video analysis failed",
                    attempts=attempt,
                )
            if attempt < self._max_attempts:
                Log.debug(f"Video job {job_id} still in progress, sleeping")
                await asyncio.sleep(self._interval_seconds)

        Log.error(f"Video job {job_id} did not finish after {self._max_attempts} polls")
        return VideoJobOutcome(
            state=VideoPollState.TIMED_OUT,
            job_id=job_id,
            message=f"Video analysis did not finish after {self._max_attempts} polls",
            attempts=self._max_attempts,
        )
