"""
JobTracker - AI job description analysis endpoints.

Wraps the AI service and turns its error categories into HTTP
responses: missing key is 401, quota and rate limits are 429, a
disabled service is 503 and anything else is 502.
"""
from fastapi import APIRouter, Depends, HTTPException, Request
import logging

from ..schemas import AnalyzeRequest, JobAnalysis
from ..services.ai_service import (
    AIService, AIServiceError, AIConfigurationError, AIQuotaExceededError,
    AIRateLimitError, AIDisabledError, get_ai_service
)
from ..rate_limit import limiter, RATE_LIMIT_AI, RATE_LIMIT_READ

router = APIRouter()
logger = logging.getLogger("jobtracker.ai")


def error_status(error: AIServiceError) -> int:
    """HTTP status code for an AI service failure."""
    if isinstance(error, AIConfigurationError):
        return 401
    if isinstance(error, (AIQuotaExceededError, AIRateLimitError)):
        return 429
    if isinstance(error, AIDisabledError):
        return 503
    return 502


@router.post("/analyze", response_model=JobAnalysis)
@limiter.limit(RATE_LIMIT_AI)
async def analyze_job(
    request: Request,
    data: AnalyzeRequest,
    service: AIService = Depends(get_ai_service)
):
    """Summarize a job description and list its three key skills."""
    try:
        return await service.analyze_job_description(data.job_description)
    except AIServiceError as e:
        logger.warning(f"Analysis failed ({type(e).__name__}): {e.message}")
        raise HTTPException(status_code=error_status(e), detail=e.message)


@router.get("/ai/status")
@limiter.limit(RATE_LIMIT_READ)
def ai_status(
    request: Request,
    service: AIService = Depends(get_ai_service)
):
    """Report whether AI analysis is enabled and has a key."""
    return service.status()
