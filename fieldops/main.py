# fieldops/main.py
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from fieldops.core.logging_config import logger, setup_logging
from fieldops.core.responses import error_response
from fieldops.core.settings import settings
from fieldops.db import Base, engine
from fieldops import models  # noqa: F401  (registreert SQLAlchemy modellen)
from fieldops.observability.metrics import latency_hist
from fieldops.observability.metrics import router as metrics_router
from fieldops.routers import (
    clients,
    drop_cable,
    fleet,
    inventory,
    inventory_requests,
    link_build,
    mobile,
    service_costs,
)

# ----------------------------------------------------
# App init
# ----------------------------------------------------
app = FastAPI(title="FieldOps", version="0.1.0")

setup_logging()
logger.info("startup", service="fieldops-api", env=settings.app_env)


# ----------------------------------------------------
# Health
# ----------------------------------------------------
@app.get("/health", include_in_schema=True)
def health() -> dict:
    return {"status": "ok"}


# ----------------------------------------------------
# Logging middleware
# ----------------------------------------------------
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    start = time.time()

    request_id = request.headers.get("X-Request-ID", "unknown")
    client_ip = request.client.host if request.client else "unknown"

    bound_logger = logger.bind(
        request_id=request_id,
        ip=client_ip,
        endpoint=str(request.url.path),
        method=request.method,
    )

    bound_logger.info("request_started")
    response = await call_next(request)
    elapsed = time.time() - start
    latency_ms = round(elapsed * 1000, 2)

    route = request.scope.get("route")
    latency_hist.labels(route=getattr(route, "path", "unmatched")).observe(elapsed)

    bound_logger.bind(status_code=response.status_code, latency_ms=latency_ms).info(
        "request_finished"
    )
    return response


# ----------------------------------------------------
# Middleware
# ----------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ----------------------------------------------------
# Error envelope
# ----------------------------------------------------
@app.exception_handler(StarletteHTTPException)
def http_exception_handler(request: Request, exc: StarletteHTTPException):
    response = error_response(str(exc.detail), exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(RequestValidationError)
def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg")}
        for err in exc.errors()
    ]
    logger.info("request_invalid", endpoint=str(request.url.path), errors=errors)
    return error_response("Invalid input", 400, errors=errors)


@app.exception_handler(Exception)
def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("request_failed", endpoint=str(request.url.path), error=str(exc))
    return error_response("Unexpected error", 500)


# ----------------------------------------------------
# Routers
# ----------------------------------------------------
app.include_router(clients.router)
app.include_router(drop_cable.router)
app.include_router(link_build.router)
app.include_router(service_costs.router)
app.include_router(inventory.router)
app.include_router(inventory_requests.router)
app.include_router(fleet.router)
app.include_router(mobile.router)
if settings.metrics_enabled:
    app.include_router(metrics_router)  # /metrics


# ----------------------------------------------------
# Startup
# ----------------------------------------------------
@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
