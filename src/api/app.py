import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.adapter.database import Database
from src.api.utils.audit import entity_type_for
from src.app.services.audit_dispatcher import AuditDispatcher
from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(
        f"Client error on {request.method} {request.url.path}: "
        f"{exc.status_code} {exc.base_error.code}"
    )
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} ({exc.base_error.message})")
    return JSONResponse(status_code=exc.status_code, content=exc.body())


def _unparsable_path_id(exc: RequestValidationError) -> bool:
    errors = exc.errors()
    return bool(errors) and all(tuple(err.get("loc", ()))[:2] == ("path", "id") for err in errors)


async def handle_validation_error(request: Request, exc: RequestValidationError):
    # Identifiers are opaque: one that cannot be parsed simply does not exist
    if _unparsable_path_id(exc):
        entity_type = entity_type_for(request.url.path) or "resource"
        error_dict = {
            "code": f"{entity_type.upper()}_NOT_FOUND",
            "message": f"{entity_type.capitalize()} not found",
        }
        logger.warning(f"Unknown id on {request.method} {request.url.path}")
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": error_dict})

    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]),
            "message": err.get("msg"),
            "type": err.get("type"),
        }
        for err in exc.errors()
    ]
    error_dict = {
        "code": "VALIDATION_ERROR",
        "message": "Validation failed",
        "details": jsonable_encoder(details),
    }
    logger.warning(f"Validation error on {request.method} {request.url.path}: {details}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"error": error_dict}
    )


def create_app(ApplicationConfig, database: Optional[Database] = None) -> FastAPI:
    if database is None:
        database = Database(ApplicationConfig.DB_URI)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.AUTO_CREATE_TABLES:
            await database.create_all()
            logger.info("Database tables ensured")
        yield
        # Let pending audit writes land before the engine goes away
        await app.state.audit_dispatcher.drain()
        await database.dispose()

    app = FastAPI(title="Historical Events Atlas API", version="0.1.0", lifespan=lifespan)
    app.state.database = database
    app.state.audit_dispatcher = AuditDispatcher(database.unit_of_work)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
            )
            return response

    from src.api.routes import (
        audit,
        auth,
        events,
        health_check,
        people,
        regions,
        sources,
        tags,
        users,
    )

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(events.router, tags=["Events"])
    app.include_router(regions.router, tags=["Regions"])
    app.include_router(sources.router, tags=["Sources"])
    app.include_router(people.router, tags=["People"])
    app.include_router(tags.router, tags=["Tags"])
    app.include_router(users.router, tags=["Users"])
    app.include_router(audit.router, tags=["Audit"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    return app
