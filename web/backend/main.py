import os
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from postgrest.exceptions import APIError

from bandroom.core.config import load_config
from bandroom.core.exceptions import (
    BandroomError,
    InvalidReference,
    Unauthenticated,
    UpstreamProtocolError,
    UpstreamUnavailable,
)
from bandroom.core.output import set_quiet_mode, setup_loguru
from bandroom.domain.bands import AlreadyMember, BandNotFound, NotBandLeader, UserNotFound
from bandroom.domain.profile import ProfileNotFound


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = load_config()
    log_file = Path(config.logging.log_file) if config.logging.log_file else None
    setup_loguru(log_file, level=config.logging.level, console_output=True)
    yield


app = FastAPI(title="Bandroom Web API", version="1.0.0", lifespan=lifespan)

# User-facing log() output goes to the log only, never the server's stdout
set_quiet_mode(True)

# CORS: Allow environment override for production
allowed_origins_env = os.getenv("ALLOWED_ORIGINS", "")
allowed_origins = (
    allowed_origins_env.split(",")
    if allowed_origins_env
    else ["http://localhost:5173"]  # Dev default
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_STATUS = {
    InvalidReference: 400,
    Unauthenticated: 401,
    NotBandLeader: 403,
    BandNotFound: 404,
    UserNotFound: 404,
    ProfileNotFound: 404,
    AlreadyMember: 409,
    UpstreamUnavailable: 502,
    UpstreamProtocolError: 502,
}


@app.exception_handler(BandroomError)
async def bandroom_error_handler(request: Request, exc: BandroomError):
    status_code = next(
        (code for cls, code in ERROR_STATUS.items() if isinstance(exc, cls)), 500
    )
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(APIError)
async def store_error_handler(request: Request, exc: APIError):
    logger.error(f"{request.method} {request.url.path} store error: {exc.message}")
    return JSONResponse(status_code=502, content={"detail": exc.message or "Data service error"})


@app.exception_handler(httpx.HTTPError)
async def transport_error_handler(request: Request, exc: httpx.HTTPError):
    logger.error(f"{request.method} {request.url.path} data service unreachable: {exc}")
    return JSONResponse(status_code=502, content={"detail": "Data service unavailable"})


# Include routers
from web.backend.routers import bands, events, profile, setlists, songs

app.include_router(songs.router, prefix="/api", tags=["songs"])
app.include_router(events.router, prefix="/api", tags=["events"])
app.include_router(setlists.router, prefix="/api", tags=["setlists"])
app.include_router(profile.router, prefix="/api", tags=["profile"])
app.include_router(bands.router, prefix="/api", tags=["bands"])


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
