from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api import endpoints
from app.api.dependencies import get_orchestrator
from app.api.endpoints import UploadEndpoint
from app.api.forms import read_upload_form
from app.logging.logger import Log
from app.moderation.exceptions import AnalysisFailureError
from app.moderation.models import Rejected
from app.storage.exceptions import StorageError
from app.upload.exceptions import InvalidUploadError, MissingFileError
from app.upload.orchestrator import UploadOrchestrator

router = APIRouter(prefix="/upload", tags=["upload"])

ANALYSIS_FAILURE_MESSAGE = "Content analysis failed, please try again later"
STORAGE_FAILURE_MESSAGE = "File could not be stored, please try again later"


@router.post("/image")
async def upload_image(
    request: Request,
    orchestrator: UploadOrchestrator = Depends(get_orchestrator),
) -> JSONResponse:
    """Upload a single image under the `image` field."""
    return await _handle(request, orchestrator, endpoints.IMAGE)


@router.post("/pdf")
async def upload_pdf(
    request: Request,
    orchestrator: UploadOrchestrator = Depends(get_orchestrator),
) -> JSONResponse:
    """Upload a single PDF under the `file` field."""
    return await _handle(request, orchestrator, endpoints.PDF)


@router.post("/multiple")
async def upload_multiple(
    request: Request,
    orchestrator: UploadOrchestrator = Depends(get_orchestrator),
) -> JSONResponse:
    """Upload one or more files of any supported type under the `file` field."""
    return await _handle(request, orchestrator, endpoints.MULTIPLE)


@router.post("/video")
async def upload_video(
    request: Request,
    orchestrator: UploadOrchestrator = Depends(get_orchestrator),
) -> JSONResponse:
    """Upload one or more videos under the `media` field."""
    return await _handle(request, orchestrator, endpoints.VIDEO)


@router.post("/uni")
async def upload_universal(
    request: Request,
    orchestrator: UploadOrchestrator = Depends(get_orchestrator),
) -> JSONResponse:
    """Upload a single file of any supported type under the `file` field."""
    return await _handle(request, orchestrator, endpoints.UNIVERSAL)


async def _handle(
    request: Request,
    orchestrator: UploadOrchestrator,
    endpoint: UploadEndpoint,
) -> JSONResponse:
    try:
        files, folder = await read_upload_form(request, endpoint.form_field)
        if endpoint.batch:
            outcome = await orchestrator.upload_batch(files, folder, endpoint.accepted)
            if outcome.rejection is not None:
                return JSONResponse(
                    status_code=400,
                    content=endpoint.rejection_payload(outcome.rejection),
                )
            return JSONResponse(status_code=200, content=endpoint.success_payload(outcome.urls))

        if len(files) > 1:
            raise InvalidUploadError(
                f"Only one file may be sent under '{endpoint.form_field}', got {len(files)}"
            )
        verdict = await orchestrator.upload(files[0] if files else None, folder, endpoint.accepted)
        if isinstance(verdict, Rejected):
            return JSONResponse(status_code=400, content=endpoint.rejection_payload(verdict))
        return JSONResponse(
            status_code=200,
            content=endpoint.success_payload([verdict.public_url]),
        )
    except MissingFileError:
        return JSONResponse(status_code=400, content={"error": endpoint.missing_message})
    except InvalidUploadError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except AnalysisFailureError as e:
        Log.error(f"Analysis failure on {request.url.path}: {e}")
        return JSONResponse(status_code=500, content={"error": ANALYSIS_FAILURE_MESSAGE})
    except StorageError as e:
        Log.error(f"Storage failure on {request.url.path}: {e}")
        return JSONResponse(status_code=500, content={"error": STORAGE_FAILURE_MESSAGE})
    except Exception as e:
        Log.exception(f"Unexpected error on {request.url.path}: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})
