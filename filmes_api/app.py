import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from filmes_api.api.v1 import routes_filme, routes_health
from filmes_api.core.config import settings
from filmes_api.core.exceptions import FilmeApiError, MovieNotFoundError, MovieValidationError
from filmes_api.core.logging import setup_logging
from filmes_api.db import session
from filmes_api.schemas.filme import ErrorResponse, ValidationErrorResponse
from filmes_api.services.mapper import MovieMapper
from filmes_api.services.validation import field_errors_from_pydantic

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.ENV == "development":
        await session.init_db()
    yield
    await session.engine.dispose()


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        description=settings.PROJECT_DESCRIPTION,
        lifespan=lifespan
    )
    app.state.movie_mapper = MovieMapper()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        routes_health.router,
        prefix=settings.API_PREFIX
    )
    app.include_router(
        routes_filme.router,
        prefix=settings.API_PREFIX
    )

    @app.exception_handler(MovieNotFoundError)
    async def not_found_handler(request: Request, ex: MovieNotFoundError):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(MovieValidationError)
    async def validation_error_handler(request: Request, ex: MovieValidationError):
        body = ValidationErrorResponse(error=ex.message, errors=ex.errors)
        return JSONResponse(status_code=ex.status_code, content=body.model_dump())

    @app.exception_handler(FilmeApiError)
    async def filme_error_handler(request: Request, ex: FilmeApiError):
        logger.warning(f"{request.method} {request.url.path} failed: {ex.message}")
        return JSONResponse(status_code=ex.status_code, content=ErrorResponse(error=ex.message).model_dump())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, ex: RequestValidationError):
        body = ValidationErrorResponse(
            error="One or more validation errors occurred",
            errors=field_errors_from_pydantic(ex.errors()))
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())

    return app


app = create_app()
