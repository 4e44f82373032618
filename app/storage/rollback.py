from collections.abc import Iterable

from app.logging.logger import Log
from app.storage.base import BaseObjectStore
from app.storage.models import StorageLocation


async def delete_quietly(store: BaseObjectStore, location: StorageLocation) -> bool:
    """Best-effort compensating delete. Failures are logged, never raised.

    Returns:
        True when the object was deleted.
    """
    try:
        await store.delete(location)
    except Exception as exc:
        Log.error(
            f"Rollback delete failed: {exc}",
            bucket=location.bucket,
            key=location.key,
        )
        return False
    Log.info("Rolled back stored object", bucket=location.bucket, key=location.key)
    return True


async def delete_all_quietly(
    store: BaseObjectStore,
    locations: Iterable[StorageLocation],
) -> list[StorageLocation]:
    """Delete every distinct location, one at a time.

    Returns:
        Locations whose delete failed.
    """
    failed: list[StorageLocation] = []
    for location in dict.fromkeys(locations):
        if not await delete_quietly(store, location):
            failed.append(location)
    return failed
