from fastapi import Request

from app.upload.orchestrator import UploadOrchestrator


def get_orchestrator(request: Request) -> UploadOrchestrator:
    return request.app.state.orchestrator
