class StorageError(Exception):
    """Raised when an object store operation fails."""


class ObjectNotFoundError(StorageError):
    """Raised when a requested object does not exist in the bucket."""
