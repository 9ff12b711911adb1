"""FastAPI application entrypoint for the registration service."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

import regflow.runtime as runtime
from regflow.api.routers.auth import router as auth_router
from regflow.auth.http import register_exception_handlers
from regflow.runtime import startup


@asynccontextmanager
async def lifespan(_: FastAPI):
    startup()
    yield


app = FastAPI(title="regflow", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=runtime.settings.cors_allow_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Authorization", "Content-Type"],
)
app.include_router(auth_router)
register_exception_handlers(app)


def run() -> None:
    """Serve the app with uvicorn on the configured host/port."""
    uvicorn.run(
        "regflow.main:app",
        host=runtime.settings.regflow_app_host,
        port=runtime.settings.regflow_app_port,
        log_level=runtime.settings.regflow_log_level.lower(),
    )


__all__ = [
    "app",
    "run",
    "startup",
]
