"""FastAPI application - stories API."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from momandme.config import get_settings, load_seed_drafts
from momandme.errors import StoreUnavailableError, ValidationError
from momandme.models import Story, StoryDraft
from momandme.persistence import create_story_store
from momandme.services import StoryService

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Wire store and service; seed static stories when configured."""
    settings = get_settings()
    service = StoryService(create_story_store(settings))
    if settings.seed_file:
        service.seed_stories(load_seed_drafts(Path(settings.seed_file)))
    app.state.story_service = service
    yield
    app.state.story_service = None


app = FastAPI(
    title="MomAndMe Stories",
    description="Create and list children's stories",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)


def get_story_service(request: Request) -> StoryService:
    """Service created at startup."""
    return request.app.state.story_service


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "validation_error", "field": exc.field, "message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are reported like rule failures: 400 naming the first bad field."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = [part for part in first.get("loc", ()) if part != "body"]
    if first.get("type") == "json_invalid" or not loc:
        field = "body"
    else:
        field = str(loc[0])
    logger.info("Rejected story request on %s: %s", field, first.get("msg"))
    return JSONResponse(
        status_code=400,
        content={
            "error": "validation_error",
            "field": field,
            "message": first.get("msg", "Invalid request body"),
        },
    )


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
    logger.error("Story store unavailable: %s", exc, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "store_unavailable", "message": str(exc)},
    )


@app.post("/api/stories", response_model=Story)
def create_story(
    draft: StoryDraft,
    service: StoryService = Depends(get_story_service),
) -> Story:
    """Validate, default and store a new story."""
    return service.create_story(draft)


@app.get("/api/stories", response_model=list[Story])
def list_stories(service: StoryService = Depends(get_story_service)) -> list[Story]:
    """All stories, newest first."""
    return service.list_stories()
