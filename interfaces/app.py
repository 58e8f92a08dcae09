import logging
import time
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from application.ports import DescriptionProvider, TaskRepository
from application.use_cases import TaskUseCases, ANTHROPIC, OLLAMA, GEMINI
from domain.errors import TaskServiceError, ValidationError
from infrastructure.config import Settings, load_settings
from infrastructure.database import Database
from infrastructure.providers import AnthropicProvider, GeminiProvider, OllamaProvider
from interfaces.api import router as task_router

logger = logging.getLogger(__name__)

CORS_MAX_AGE = 12 * 60 * 60


def build_providers(settings: Settings) -> Dict[str, DescriptionProvider]:
    return {
        ANTHROPIC: AnthropicProvider(
            api_key=settings.anthropic_api_key,
            api_url=settings.anthropic_api_url,
            model=settings.anthropic_model,
        ),
        OLLAMA: OllamaProvider(api_url=settings.ollama_api_url, model=settings.ollama_model),
        GEMINI: GeminiProvider(api_key=settings.gemini_api_key, api_url=settings.gemini_api_url),
    }


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg')}")
    return "; ".join(parts) or "Invalid request"


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[TaskRepository] = None,
    providers: Optional[Dict[str, DescriptionProvider]] = None,
) -> FastAPI:
    """Wires the store and description providers into a FastAPI application."""
    settings = settings or load_settings()
    if database is None:
        database = Database(settings.database_path)
    if providers is None:
        providers = build_providers(settings)

    app = FastAPI(title="Task Service")
    app.state.settings = settings
    app.state.use_cases = TaskUseCases(database, providers)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type"],
        expose_headers=["Content-Length"],
        max_age=CORS_MAX_AGE,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)")
        return response

    @app.exception_handler(TaskServiceError)
    async def handle_task_error(request: Request, exc: TaskServiceError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        error = ValidationError(_validation_message(exc))
        return JSONResponse(status_code=error.status_code, content={"error": error.message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    app.include_router(task_router)
    return app
