"""Shared response schemas."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str = "ok"
    model: Optional[str] = None


class ErrorResponse(BaseModel):
    """Body of every relay failure; clients display ``error`` as-is."""

    error: str
