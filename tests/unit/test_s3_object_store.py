from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from app.storage.exceptions import ObjectNotFoundError, StorageError
from app.storage.models import StorageLocation
from app.storage.s3_adapter import S3ObjectStore

LOCATION = StorageLocation(bucket="media", key="Worktool/cat.png")


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


def _make_store() -> tuple[S3ObjectStore, MagicMock]:
    client = MagicMock()
    return S3ObjectStore(client=client, bucket="media"), client


class TestS3ObjectStore:
    def test_location_for_composes_key(self) -> None:
        store, _client = _make_store()
        assert store.location_for(None, "cat.png") == LOCATION
        assert store.location_for("avatars", "cat.png").key == "avatars/cat.png"

    @pytest.mark.asyncio
    async def test_put_uploads_body_with_content_type(self) -> None:
        store, client = _make_store()

        stored = await store.put(LOCATION, b"png", "image/png")

        assert stored == LOCATION
        client.put_object.assert_called_once_with(
            Bucket="media",
            Key="Worktool/cat.png",
            Body=b"png",
            ContentType="image/png",
        )

    @pytest.mark.asyncio
    async def test_put_wraps_client_error(self) -> None:
        store, client = _make_store()
        client.put_object.side_effect = _client_error("AccessDenied", "PutObject")

        with pytest.raises(StorageError, match="Failed to store"):
            await store.put(LOCATION, b"png", "image/png")

    @pytest.mark.asyncio
    async def test_get_reads_body(self) -> None:
        store, client = _make_store()
        body = MagicMock()
        body.read.return_value = b"png"
        client.get_object.return_value = {"Body": body}

        assert await store.get(LOCATION) == b"png"
        client.get_object.assert_called_once_with(Bucket="media", Key="Worktool/cat.png")

    @pytest.mark.asyncio
    async def test_get_missing_object_raises_not_found(self) -> None:
        store, client = _make_store()
        client.get_object.side_effect = _client_error("NoSuchKey", "GetObject")

        with pytest.raises(ObjectNotFoundError):
            await store.get(LOCATION)

    @pytest.mark.asyncio
    async def test_get_wraps_connection_error(self) -> None:
        store, client = _make_store()
        client.get_object.side_effect = EndpointConnectionError(endpoint_url="https://s3")

        with pytest.raises(StorageError, match="Failed to read"):
            await store.get(LOCATION)

    @pytest.mark.asyncio
    async def test_delete_removes_object(self) -> None:
        store, client = _make_store()

        await store.delete(LOCATION)

        client.delete_object.assert_called_once_with(Bucket="media", Key="Worktool/cat.png")

    @pytest.mark.asyncio
    async def test_delete_wraps_client_error(self) -> None:
        store, client = _make_store()
        client.delete_object.side_effect = _client_error("AccessDenied", "DeleteObject")

        with pytest.raises(StorageError, match="Failed to delete"):
            await store.delete(LOCATION)
