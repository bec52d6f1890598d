"""FastAPI application factory wiring routes, services, and shared state."""
from __future__ import annotations

import logging
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.api import routes_health, routes_mood
from app.core.config import Settings, get_settings
from app.services.insight_service import InsightService
from app.services.llm_provider import ChatProvider, build_provider


def create_app(settings: Optional[Settings] = None, provider: Optional[ChatProvider] = None) -> FastAPI:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    settings = settings or get_settings()
    app = FastAPI(title="Mood Insight Relay", version="0.1.0")

    # Provider client is built once and shared; it holds no per-request state
    provider = provider or build_provider(settings)
    app.state.settings = settings
    app.state.insight_service = InsightService(provider)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(routes_mood.router)
    app.include_router(routes_health.router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        logging.info("📥 %s %s START", request.method, request.url.path)
        response = await call_next(request)
        elapsed = (time.perf_counter() - start) * 1000
        logging.info("🚀 %s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed)
        return response

    return app


app = create_app()


if __name__ == "__main__":
    _settings = get_settings()
    logging.info("Server is running on http://%s:%s", _settings.RELAY_HOST, _settings.RELAY_PORT)
    uvicorn.run(app, host=_settings.RELAY_HOST, port=_settings.RELAY_PORT)
