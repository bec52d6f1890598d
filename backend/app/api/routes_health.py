"""Liveness endpoint for the relay."""
from __future__ import annotations

from fastapi import APIRouter, Request

from app.schemas.common import HealthStatus

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthStatus)
def health(request: Request) -> HealthStatus:
    settings = request.app.state.settings
    return HealthStatus(status="ok", model=settings.LLM_MODEL)
