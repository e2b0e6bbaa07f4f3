"""FastAPI application entry point.

Builds the key-value store once per process in the lifespan, configures
CORS and request logging, renders every error as the
``{success: false, error}`` envelope, and registers the inquiry,
knowledge and settings routers. Health check at GET /.
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import inquiry_routes, knowledge_routes, settings_routes
from .api.dependencies import require_bearer_token
from .core.config import get_settings
from .db.kv_store import create_kv_store

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the store handle at startup and release it at shutdown."""
    app.state.kv_store = create_kv_store(settings)
    yield
    app.state.kv_store.close()


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

origins = [o.strip() for o in settings.cors_origins.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s -> %d (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.warning("Invalid request to %s: %s", request.url.path, problems)
    return JSONResponse(status_code=422, content={"success": False, "error": problems})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})


_protected = [Depends(require_bearer_token)]
app.include_router(inquiry_routes.router, dependencies=_protected)
app.include_router(knowledge_routes.router, dependencies=_protected)
app.include_router(settings_routes.router, dependencies=_protected)


@app.get("/")
async def root():
    return {"success": True, "data": {"message": "Service is running"}}
