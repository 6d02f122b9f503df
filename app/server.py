import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.logic.auth import TokenCache
from app.routers.games import games

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    client = httpx.AsyncClient(timeout=settings.http_timeout)
    token_cache = TokenCache(client, settings.TWITCH_CLIENT_ID, settings.TWITCH_CLIENT_SECRET)
    yield {"http_client": client, "token_cache": token_cache}
    await client.aclose()

app = FastAPI(
    title="IGDB Proxy API",
    description="Simplified IGDB game data for the client app",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def allow_any_origin(request: Request, call_next):
    response = await call_next(request)
    response.headers.setdefault("Access-Control-Allow-Origin", "*")
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    # unmatched routes come through here with Starlette's default detail
    if exc.status_code == status.HTTP_404_NOT_FOUND and detail == "Not Found":
        detail = "Endpoint not found"
    return JSONResponse(status_code=exc.status_code, content={"error": detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request"},
    )


app.include_router(games.router)


@app.get("/")
async def root():
    return {
        "message": "IGDB API está funcionando!",
        "endpoints": {
            "game": "/game/:id",
            "popular": "/popular",
            "genre": "/genre/:id",
        },
    }
