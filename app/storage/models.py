from dataclasses import dataclass


@dataclass(frozen=True)
class StorageLocation:
    """Address of a persisted object: bucket + key."""

    bucket: str
    key: str


def compose_key(folder: str | None, original_name: str, default_folder: str) -> str:
    """Build an object key: {folder}/{original_name}.

    A missing or blank folder falls back to default_folder.
    """
    logical_folder = (folder or "").strip() or default_folder
    return f"{logical_folder}/{original_name}"
