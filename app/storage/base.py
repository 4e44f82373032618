from abc import ABC, abstractmethod

from app.storage.models import StorageLocation, compose_key


class BaseObjectStore(ABC):
    """Contract for all object store adapters."""

    def __init__(self, bucket: str, default_folder: str = "Worktool") -> None:
        self._bucket = bucket
        self._default_folder = default_folder

    @property
    def bucket(self) -> str:
        return self._bucket

    def location_for(self, folder: str | None, original_name: str) -> StorageLocation:
        """Resolve where a file with this name is stored inside the bucket."""
        return StorageLocation(
            bucket=self._bucket,
            key=compose_key(folder, original_name, self._default_folder),
        )

    @abstractmethod
    async def put(
        self,
        location: StorageLocation,
        content: bytes,
        content_type: str,
    ) -> StorageLocation:
        """Persist bytes at location.

        Returns:
            The location the provider reports for the stored object.

        Raises:
            StorageError: if the object cannot be written.
        """

    @abstractmethod
    async def get(self, location: StorageLocation) -> bytes:
        """Read the bytes of a stored object.

        Raises:
            ObjectNotFoundError: if nothing is stored at location.
            StorageError: on any other failure.
        """

    @abstractmethod
    async def delete(self, location: StorageLocation) -> None:
        """Remove a stored object. Deleting a missing object is not an error.

        Raises:
            StorageError: if the provider rejects the delete.
        """
