import uvicorn
from fastapi import FastAPI

from app.api.router import router as upload_router
from app.config.settings import Settings
from app.logging.logger import Log
from app.upload.orchestrator import UploadOrchestrator, build_orchestrator


def create_app(
    settings: Settings | None = None,
    orchestrator: UploadOrchestrator | None = None,
) -> FastAPI:
    """Build the HTTP app. Provider adapters come from settings unless injected."""
    settings = settings if settings is not None else Settings()
    app = FastAPI(title="Media Intake Service", version="0.1.0")
    app.state.settings = settings
    app.state.orchestrator = (
        orchestrator if orchestrator is not None else build_orchestrator(settings)
    )
    app.include_router(upload_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


def main() -> None:
    """Entry point: load settings -> build dependencies -> serve HTTP."""
    settings = Settings()
    Log.configure(settings.log_level)
    app = create_app(settings)
    Log.info(f"Server is running on http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
