import asyncio
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from app.logging.logger import Log
from app.storage.base import BaseObjectStore
from app.storage.exceptions import ObjectNotFoundError, StorageError
from app.storage.models import StorageLocation

_MISSING_OBJECT_CODES = frozenset({"NoSuchKey", "404", "NotFound"})


class S3ObjectStore(BaseObjectStore):
    """Object store adapter built on a boto3 S3 client.

    boto3 is blocking, so every call runs in a worker thread.
    """

    def __init__(self, client: Any, bucket: str, default_folder: str = "Worktool") -> None:
        super().__init__(bucket, default_folder)
        self._client = client

    async def put(
        self,
        location: StorageLocation,
        content: bytes,
        content_type: str,
    ) -> StorageLocation:
        try:
            await asyncio.to_thread(
                self._client.put_object,
                Bucket=location.bucket,
                Key=location.key,
                Body=content,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(
                f"Failed to store {location.bucket}/{location.key}: {exc}"
            ) from exc
        Log.debug("Stored object", bucket=location.bucket, key=location.key, size=len(content))
        return location

    async def get(self, location: StorageLocation) -> bytes:
        try:
            response = await asyncio.to_thread(
                self._client.get_object,
                Bucket=location.bucket,
                Key=location.key,
            )
            return await asyncio.to_thread(response["Body"].read)
        except ClientError as exc:
            code = str(exc.response.get("Error", {}).get("Code", ""))
            if code in _MISSING_OBJECT_CODES:
                raise ObjectNotFoundError(
                    f"Object not found: {location.bucket}/{location.key}"
                ) from exc
            raise StorageError(
                f"Failed to read {location.bucket}/{location.key}: {exc}"
            ) from exc
        except BotoCoreError as exc:
            raise StorageError(
                f"Failed to read {location.bucket}/{location.key}: {exc}"
            ) from exc

    async def delete(self, location: StorageLocation) -> None:
        try:
            await asyncio.to_thread(
                self._client.delete_object,
                Bucket=location.bucket,
                Key=location.key,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(
                f"Failed to delete {location.bucket}/{location.key}: {exc}"
            ) from exc
        Log.debug("Deleted object", bucket=location.bucket, key=location.key)
