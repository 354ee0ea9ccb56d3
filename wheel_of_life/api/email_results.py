"""API endpoint for emailing assessment results."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from wheel_of_life.core import mail_service
from wheel_of_life.core.config import MailConfig, Settings, get_settings
from wheel_of_life.core.logging import get_logger, log_with_context, recipient_domain
from wheel_of_life.core.schemas_assessment import EmailResultsRequest, EmailResultsResponse
from wheel_of_life.core.scoring import score_assessment

logger = get_logger(__name__)

router = APIRouter()

SENT_MESSAGE = "Results sent successfully!"
NOT_CONFIGURED_MESSAGE = "Email service is not configured. Please contact support."
DELIVERY_FAILED_MESSAGE = "Failed to send email. Please check your email address and try again."


def _failure(status_code: int, message: str) -> JSONResponse:
    body = EmailResultsResponse(success=False, message=message)
    return JSONResponse(content=body.model_dump(), status_code=status_code)


@router.post(
    "/email-results",
    response_model=EmailResultsResponse,
    responses={503: {"model": EmailResultsResponse}, 500: {"model": EmailResultsResponse}},
)
async def email_results(
    request: EmailResultsRequest,
    settings: Settings = Depends(get_settings),
):
    """
    Score the submitted assessment and email the results.

    The body is validated before this handler runs (422 on failure).
    Returns 503 when the mail transport is not configured and 500 when the
    single delivery attempt fails.
    """
    config = MailConfig.from_settings(settings)
    if not config.is_configured:
        return _failure(503, NOT_CONFIGURED_MESSAGE)

    results = score_assessment(request.assessment_data)

    log_with_context(
        logger,
        logging.INFO,
        "Emailing assessment results",
        recipient_domain=recipient_domain(request.email),
        personalized=bool(request.name),
        updates_opt_in=request.updates,
    )

    try:
        await mail_service.send_results_email(config, request.email, results, name=request.name)
    except mail_service.ConfigurationError:
        return _failure(503, NOT_CONFIGURED_MESSAGE)
    except mail_service.DeliveryError as e:
        logger.error(f"Email sending error: {e} ({e.__cause__!r})")
        return _failure(500, DELIVERY_FAILED_MESSAGE)

    return EmailResultsResponse(success=True, message=SENT_MESSAGE)
