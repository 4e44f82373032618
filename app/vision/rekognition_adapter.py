import asyncio
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from app.logging.logger import Log
from app.storage.models import StorageLocation
from app.vision.base import BaseVisionModerator
from app.vision.exceptions import VisionError
from app.vision.models import ModerationLabel, VideoJobState, VideoJobStatus


def _s3_object(location: StorageLocation) -> dict[str, dict[str, str]]:
    return {"S3Object": {"Bucket": location.bucket, "Name": location.key}}


def _parse_label(raw: dict[str, Any], timestamp: Any = None) -> ModerationLabel:
    """Map one Rekognition label payload; malformed entries raise VisionError."""
    try:
        return ModerationLabel(
            name=str(raw.get("Name") or ""),
            confidence=float(raw["Confidence"]),
            parent_name=str(raw.get("ParentName") or ""),
            timestamp_ms=int(timestamp) if timestamp is not None else None,
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise VisionError(f"Malformed moderation label in Rekognition response: {raw!r}") from exc


class RekognitionModerator(BaseVisionModerator):
    """Visual moderation adapter built on a boto3 Rekognition client."""

    def __init__(self, client: Any) -> None:
        self._client = client

    async def detect_image_labels(self, location: StorageLocation) -> list[ModerationLabel]:
        response = await self._call(
            "detect_moderation_labels", Image=_s3_object(location)
        )
        labels = [_parse_label(raw) for raw in response.get("ModerationLabels") or []]
        Log.debug(f"Rekognition returned {len(labels)} labels for {location.key}")
        return labels

    async def start_video_moderation(self, location: StorageLocation) -> str:
        response = await self._call(
            "start_content_moderation", Video=_s3_object(location)
        )
        job_id = response.get("JobId")
        if not job_id:
            raise VisionError("Rekognition did not return a JobId")
        Log.info(f"Started video moderation job {job_id} for {location.key}")
        return str(job_id)

    async def get_video_moderation(self, job_id: str) -> VideoJobStatus:
        response = await self._call("get_content_moderation", JobId=job_id)
        raw_state = response.get("JobStatus", "")
        try:
            state = VideoJobState(raw_state)
        except ValueError as exc:
            raise VisionError(f"Unexpected job status {raw_state!r} for job {job_id}") from exc

        if state is not VideoJobState.SUCCEEDED:
            return VideoJobStatus(
                job_id=job_id,
                state=state,
                status_message=response.get("StatusMessage", ""),
            )

        raw_labels = list(response.get("ModerationLabels") or [])
        next_token = response.get("NextToken")
        while next_token:
            page = await self._call(
                "get_content_moderation", JobId=job_id, NextToken=next_token
            )
            raw_labels.extend(page.get("ModerationLabels") or [])
            next_token = page.get("NextToken")

        return VideoJobStatus(
            job_id=job_id,
            state=state,
            labels=[
                _parse_label(raw["ModerationLabel"], raw.get("Timestamp"))
                for raw in raw_labels
                if isinstance(raw, dict) and raw.get("ModerationLabel")
            ],
        )

    async def _call(self, operation: str, **params: Any) -> dict[str, Any]:
        try:
            response = await asyncio.to_thread(getattr(self._client, operation), **params)
        except (BotoCoreError, ClientError) as exc:
            raise VisionError(f"Rekognition {operation} failed: {exc}") from exc
        if not isinstance(response, dict):
            raise VisionError(f"Rekognition {operation} returned {type(response).__name__}")
        return response
