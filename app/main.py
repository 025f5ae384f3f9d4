# app/main.py
import logging
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import config
from app.db.init_db import init_db
from app.errors import ErrorKind, InternalError, ShopError
from app.logging_config import setup_logging
from app.routers import auth, categories, profile, shopping_cart

logger = logging.getLogger(__name__)


async def lifespan(app: FastAPI) -> AsyncGenerator:
    setup_logging(config.LOG_LEVEL)
    await init_db()
    yield


app = FastAPI(title="Storefront service", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ShopError)
async def shop_error_handler(request: Request, exc: ShopError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.kind == ErrorKind.unauthorized else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.kind.value},
        headers=headers,
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    error = InternalError()
    return JSONResponse(
        status_code=error.status_code,
        content={"detail": error.message, "error": error.kind.value},
    )


app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(categories.router)
app.include_router(shopping_cart.router)


@app.get("/")
async def health_check():
    """Health check endpoint."""
    return {"status": "storefront running"}
