from app.config.aws import create_aws_client
from app.config.settings import Settings
from app.storage.base import BaseObjectStore
from app.storage.memory_adapter import MemoryObjectStore
from app.storage.s3_adapter import S3ObjectStore


class ObjectStoreFactory:
    """Creates the configured object store adapter."""

    PROVIDERS: tuple[str, ...] = ("s3", "memory")

    @classmethod
    def create(cls, settings: Settings) -> BaseObjectStore:
        provider = settings.storage_provider.lower()
        if provider == "memory":
            return MemoryObjectStore(
                bucket=settings.aws_bucket_name or "local",
                default_folder=settings.default_storage_folder,
            )
        if provider == "s3":
            if not settings.aws_bucket_name:
                raise ValueError("aws_bucket_name is required for storage_provider=s3")
            return S3ObjectStore(
                client=create_aws_client("s3", settings),
                bucket=settings.aws_bucket_name,
                default_folder=settings.default_storage_folder,
            )
        raise ValueError(
            f"Unknown storage provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
