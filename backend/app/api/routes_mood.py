"""Mood submission route relaying to the LLM provider."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.schemas.common import ErrorResponse
from app.schemas.mood import InsightResponse, MoodRequest
from app.services.insight_service import InsightError, InsightService

router = APIRouter(prefix="/api", tags=["mood"])


def get_insight_service(request: Request) -> InsightService:
    return request.app.state.insight_service


@router.post(
    "/mood",
    response_model=InsightResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
def submit_mood(
    payload: MoodRequest,
    insight_service: InsightService = Depends(get_insight_service),
):
    try:
        return insight_service.generate_insights(payload)
    except InsightError as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=str(exc)).model_dump(),
        )
