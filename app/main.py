import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from prometheus_client import make_asgi_app

from app.config import settings
from app.database import Database
from app.exceptions import ServiceError
from app.middleware.metrics import MetricsMiddleware
from app.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware
from app.routers import discounts, dishes, orders
from app.utils.logging import setup_logging
from app.utils.tracing import setup_tracing

setup_logging(settings.log_level, settings.service_name)
logger = logging.getLogger(__name__)

tracing_enabled = setup_tracing(settings.service_name, settings.otlp_endpoint)

INVALID_JSON_MESSAGE = "can not convert object to JSON"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up, creating database tables")
    database = Database(settings.database_url, echo=settings.database_echo)
    await database.create_all()

    if tracing_enabled:
        SQLAlchemyInstrumentor().instrument(engine=database.engine.sync_engine)

    app.state.database = database
    logger.info("Startup complete", extra={"dialect": database.engine.dialect.name})

    yield

    await database.dispose()
    logger.info("Shutting down")


app = FastAPI(
    title="Restaurant Discounts",
    description="Orders, dishes and per-dish discounts",
    version="1.0.0",
    lifespan=lifespan,
)

FastAPIInstrumentor.instrument_app(app)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)
app.include_router(orders.router, prefix="/orders", tags=["orders"])
app.include_router(dishes.router, prefix="/dishes", tags=["dishes"])
app.include_router(discounts.router, tags=["discounts"])

# Expose Prometheus metrics at /metrics
metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)


# ---------------------------------------------------------------------------
# Error handlers: every failure is rendered as {"Error": <message>}
# ---------------------------------------------------------------------------


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"Error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(
        "Rejected malformed request",
        extra={"path": request.url.path, "errors": str(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"Error": INVALID_JSON_MESSAGE},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Runs outside RequestIDMiddleware, so the header is set here
    request_id = getattr(request.state, "request_id", "unknown")
    logger.exception(
        "Unhandled exception",
        extra={"path": request.url.path, "request_id": request_id},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"Error": "Unknown error"},
        headers={REQUEST_ID_HEADER: request_id},
    )


@app.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}
