import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import ExecutionTimeout, NetworkTimeout, PyMongoError, WTimeoutError

from location_service.api.endpoints import health, location
from location_service.core.config import Settings, get_settings
from location_service.core.logging import configure_logging
from location_service.core.middleware import RequestTimeoutMiddleware
from location_service.database.mongodb import (
    close_mongo_connection,
    connect_to_mongo,
    get_collection,
)
from location_service.models.location import LocationModel

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_GRACE_SECONDS = 1.0


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings or get_settings()
    configure_logging(settings.LOG_LEVEL)
    # The driver's timeoutMS fires first; the middleware deadline is the outer guard
    app.state.request_timeout_seconds = (
        settings.REQUEST_TIMEOUT_SECONDS + REQUEST_TIMEOUT_GRACE_SECONDS
    )

    client = await connect_to_mongo(settings)
    location_model = LocationModel(get_collection(client, settings))
    await location_model.create_indexes()
    app.state.location_model = location_model

    yield

    close_mongo_connection(client)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def database_timeout_handler(request: Request, exc: PyMongoError):
    logger.warning(
        "Database operation timed out on %s %s: %s", request.method, request.url.path, exc
    )
    return JSONResponse(
        status_code=status.HTTP_504_GATEWAY_TIMEOUT,
        content={"detail": "Request timed out"},
    )


async def database_exception_handler(request: Request, exc: PyMongoError):
    logger.error(
        "Database error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"Database error: {exc}"},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(title="Location Service", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(RequestTimeoutMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PyMongoError, database_exception_handler)
    for timeout_error in (ExecutionTimeout, NetworkTimeout, WTimeoutError):
        app.add_exception_handler(timeout_error, database_timeout_handler)

    app.include_router(health.router, prefix="", tags=["health"])

    app.include_router(location.router, prefix="/locations", tags=["locations"])

    return app


app = create_app()
