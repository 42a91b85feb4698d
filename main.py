"""
main.py
-------
Entry point for the Jobly API.

Responsibilities:
    - Build the FastAPI application and register all routers.
    - Open the database connection pool and ensure the schema on startup.
    - Render application errors as JSON.
"""

from contextlib import asynccontextmanager
from typing import Optional

import psycopg2
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from psycopg2 import errors

from config import API_HOST, API_PORT
from db.connection import Database
from db.init_db import create_tables
from handlers import account_handler, auth_handler, organization_handler, posting_handler
from utils.errors import AppError, BadRequestError
from utils.logger import get_logger

logger = get_logger(__name__)


def _error_response(status: int, message: str, errors_list: Optional[list] = None) -> JSONResponse:
    body = {"error": {"message": message, "status": status}}
    if errors_list:
        body["error"]["errors"] = errors_list
    return JSONResponse(status_code=status, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Map the error taxonomy (and storage faults) to HTTP responses."""

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        errors_list = exc.errors if isinstance(exc, BadRequestError) else None
        return _error_response(exc.status_code, exc.message, errors_list)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        messages = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        ]
        return _error_response(400, "; ".join(messages), messages)

    @app.exception_handler(errors.UniqueViolation)
    async def handle_unique_violation(request: Request, exc: errors.UniqueViolation) -> JSONResponse:
        logger.warning(f"Unique violation on {request.method} {request.url.path}: {exc}")
        return _error_response(409, "Duplicate entry")

    @app.exception_handler(psycopg2.Error)
    async def handle_storage_error(request: Request, exc: psycopg2.Error) -> JSONResponse:
        logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
        return _error_response(500, "Internal Server Error")


def create_app(db: Optional[Database] = None) -> FastAPI:
    """
    Build the application around a Database handle.

    The pool is opened (and the schema created) when the app starts
    serving, and closed when it stops.
    """
    database = db or Database()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # ── 1. Database setup ─────────────────────────────
        logger.info("Initializing database...")
        database.open()
        create_tables(database)
        yield
        # ── 2. Cleanup on shutdown ────────────────────────
        database.close()
        logger.info("Jobly API stopped.")

    app = FastAPI(title="Jobly API", lifespan=lifespan)
    app.state.db = database

    app.include_router(auth_handler.router)
    app.include_router(organization_handler.router)
    app.include_router(posting_handler.router)
    app.include_router(account_handler.router)
    register_error_handlers(app)
    return app


def main() -> None:
    """Run the API with uvicorn."""
    logger.info(f"Starting Jobly API on {API_HOST}:{API_PORT}")
    uvicorn.run(create_app(), host=API_HOST, port=API_PORT)


if __name__ == "__main__":
    main()
