"""In-process object store.

Keeps objects in a dict. Used for local development and tests; nothing
survives a restart.
"""

import asyncio

from app.storage.base import BaseObjectStore
from app.storage.exceptions import ObjectNotFoundError
from app.storage.models import StorageLocation


class MemoryObjectStore(BaseObjectStore):
    """Object store adapter backed by a dict keyed on (bucket, key)."""

    def __init__(self, bucket: str, default_folder: str = "Worktool") -> None:
        super().__init__(bucket, default_folder)
        self._objects: dict[StorageLocation, tuple[bytes, str]] = {}
        self._lock = asyncio.Lock()

    async def put(
        self,
        location: StorageLocation,
        content: bytes,
        content_type: str,
    ) -> StorageLocation:
        async with self._lock:
            self._objects[location] = (content, content_type)
        return location

    async def get(self, location: StorageLocation) -> bytes:
        try:
            return self._objects[location][0]
        except KeyError:
            raise ObjectNotFoundError(
                f"Object not found: {location.bucket}/{location.key}"
            ) from None

    async def delete(self, location: StorageLocation) -> None:
        async with self._lock:
            self._objects.pop(location, None)

    def content_type(self, location: StorageLocation) -> str | None:
        entry = self._objects.get(location)
        return entry[1] if entry else None

    def __contains__(self, location: object) -> bool:
        return location in self._objects

    def __len__(self) -> int:
        return len(self._objects)
