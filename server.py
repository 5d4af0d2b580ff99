import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from video_catalog.api.v1.endpoints.videos import router as video_router
from video_catalog.api.v1.schemas.video import ErrorsMessagesResponse
from video_catalog.config import Settings, get_settings
from video_catalog.domain.entities.video import FieldError
from video_catalog.domain.repositories.video_repository import VideoRepository
from video_catalog.infrastructure.demo_seed import seed_demo_videos
from video_catalog.infrastructure.repositories.in_memory_video_repository import InMemoryVideoRepository

logger = logging.getLogger(__name__)


async def malformed_body_handler(request: Request, exc: RequestValidationError):
    # Bodies that are not a JSON object get the same error shape as field errors
    errors = []
    for err in exc.errors():
        loc = err.get("loc") or ()
        field = "body" if not loc or loc[0] == "body" else str(loc[-1])
        errors.append(FieldError(message=err.get("msg", "Invalid request"), field=field))
    body = ErrorsMessagesResponse.from_errors(errors)
    return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))


def create_app(repository: Optional[VideoRepository] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Video Catalog API")

    # Setup CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, malformed_body_handler)

    # Each app owns its store
    app.state.video_repository = repository if repository is not None else InMemoryVideoRepository()
    if settings.seed_demo_videos:
        seed_demo_videos(app.state.video_repository)

    # Register routers
    app.include_router(video_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Hello World!"

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    from video_catalog.logging_config import setup_logging

    settings = get_settings()
    setup_logging(log_level=settings.log_level, log_file=settings.log_file)
    logger.info(f"Starting Video Catalog API on {settings.api_host}:{settings.api_port}")
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
