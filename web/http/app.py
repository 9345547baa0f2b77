"""FastAPI application - exposes the FAQ views over HTTP."""

from contextlib import asynccontextmanager
from typing import Annotated

import duckdb
from fastapi import FastAPI, Form, Header, Request
from fastapi.responses import HTMLResponse, JSONResponse
from loguru import logger

from app.container import container
from app.models.faq import ALL
from app.repositories import close_db
from settings import AJAX_ACTION, AJAX_PATH, SCHEMA_MAX
from web.api import faq
from web.api.errors import AuthorizationError, ValidationError
from web.api.faq.schemas import (
    DEFAULT_INSTANCE_ID,
    CategoriesResponse,
    ErrorInfo,
    ErrorResponse,
    FilterRequest,
    FilterResponse,
)


def _error(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(data=ErrorInfo(code=code, message=message))
    return JSONResponse(status_code=status_code, content=body.model_dump())


@asynccontextmanager
async def lifespan(_: FastAPI):
    try:
        container.cache_repo.purge_expired()
    except duckdb.Error as e:
        logger.warning("Durable cache purge failed: {}", e)
    yield
    close_db()


def create_app() -> FastAPI:
    """Build the app; the container is initialized here, once."""
    container.init()
    app = FastAPI(title="FAQ Filter", lifespan=lifespan)

    @app.exception_handler(AuthorizationError)
    async def authorization_failed(request: Request, exc: AuthorizationError) -> JSONResponse:
        logger.warning("Rejected {} {}: {}", request.method, request.url.path, exc.message)
        return _error(403, exc.code, exc.message)

    @app.exception_handler(ValidationError)
    async def validation_failed(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning("Bad request {} {}: {}", request.method, request.url.path, exc.message)
        return _error(400, exc.code, exc.message)

    @app.post(AJAX_PATH, response_model=FilterResponse)
    def filter_faqs(
        action: Annotated[str, Form()] = AJAX_ACTION,
        nonce: Annotated[str | None, Form()] = None,
        term: Annotated[str, Form()] = ALL,
        instance_id: Annotated[str, Form(alias="instanceId")] = DEFAULT_INSTANCE_ID,
        accept_language: Annotated[str | None, Header()] = None,
    ) -> FilterResponse:
        request = FilterRequest(action=action, nonce=nonce, term=term, instanceId=instance_id)
        return faq.handle_filter_request(request, faq.resolve_locale(accept_language))

    @app.get("/categories", response_model=CategoriesResponse)
    def categories() -> CategoriesResponse:
        return faq.get_categories()

    @app.get("/", response_class=HTMLResponse)
    def page(
        heading: str = "",
        term: str = ALL,
        schema_max: str = str(SCHEMA_MAX),
        accept_language: Annotated[str | None, Header()] = None,
    ) -> str:
        return faq.render_page(
            AJAX_PATH,
            locale=faq.resolve_locale(accept_language),
            heading=heading,
            default_term=term,
            schema_max=schema_max,
        )

    return app
