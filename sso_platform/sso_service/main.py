"""
SSO Service - user registration, password login and admin checks
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import asyncio
import logging

from .config import settings
from .db import init_db
from .routes import auth, health
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Configure logging and initialize database on startup"""
    setup_logging(settings.ENV, settings.LOG_DIR)
    logger.info(
        "starting application env=%s port=%s token_ttl=%s",
        settings.ENV, settings.RPC_PORT, settings.TOKEN_TTL,
    )
    init_db()
    yield
    logger.info("application stopped")


app = FastAPI(
    title="SSO Service",
    description="Single sign-on: registration, login with per-app tokens, admin checks",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def enforce_deadline(request: Request, call_next):
    """Fail requests that run longer than RPC_TIMEOUT"""
    try:
        return await asyncio.wait_for(call_next(request), timeout=settings.RPC_TIMEOUT.total_seconds())
    except asyncio.TimeoutError:
        logger.warning("deadline exceeded: %s %s", request.method, request.url.path)
        return JSONResponse(status_code=status.HTTP_504_GATEWAY_TIMEOUT, content={"detail": "deadline exceeded"})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_request: Request, exc: RequestValidationError):
    """Malformed request bodies are invalid arguments, same as empty fields"""
    errors = exc.errors()
    detail = errors[0]["msg"] if errors else "invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


app.include_router(auth.router)
app.include_router(health.router)
