"""Decodes multipart upload forms into UploadedFile objects."""

from fastapi import Request
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from app.upload.exceptions import InvalidUploadError
from app.upload.models import UploadedFile

FOLDER_FIELD = "key"
DEFAULT_MIME_TYPE = "application/octet-stream"


async def read_upload_form(request: Request, field: str) -> tuple[list[UploadedFile], str | None]:
    """Read every file sent under `field` plus the optional storage folder.

    File parts without a filename (empty inputs) are ignored.

    Raises:
        InvalidUploadError: if the body is not a decodable multipart form.
    """
    try:
        form = await request.form()
    except MultiPartException as exc:
        raise InvalidUploadError(f"Malformed upload: {exc.message}") from exc
    except HTTPException as exc:
        # Starlette re-raises parser errors as a 400 when running inside an app.
        raise InvalidUploadError(f"Malformed upload: {exc.detail}") from exc

    files: list[UploadedFile] = []
    for item in form.getlist(field):
        if not isinstance(item, UploadFile) or not item.filename:
            continue
        content = await item.read()
        files.append(
            UploadedFile.from_bytes(
                original_name=item.filename,
                mime_type=item.content_type or DEFAULT_MIME_TYPE,
                content=content,
            )
        )

    folder = form.get(FOLDER_FIELD)
    return files, folder if isinstance(folder, str) else None
