"""API router for assessment endpoints."""

from fastapi import APIRouter

from wheel_of_life.api import assessment, email_results

router = APIRouter()

# Scoring and insights for the questionnaire front-end
router.include_router(assessment.router, prefix="/assessment", tags=["assessment"])

# Results delivery by email
router.include_router(email_results.router, tags=["email"])
