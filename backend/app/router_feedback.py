import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from mentor.resolver import FeedbackRequest, FeedbackResolver, NoCredentialError

from .dependencies import get_resolver
from .schemas import (
    SmartFeedbackRequest,
    SmartFeedbackResponse,
    ValidateKeyRequest,
    ValidateKeyResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["feedback"])


@router.post(
    "/smart-feedback",
    response_model=SmartFeedbackResponse,
    response_model_exclude_none=True,
)
def smart_feedback(
    body: SmartFeedbackRequest,
    resolver: FeedbackResolver = Depends(get_resolver),
):
    # MissingInputError / NoCredentialError become 400s via the app's handlers.
    result = resolver.resolve(
        FeedbackRequest(
            goal_text=body.goal_text,
            api_key=body.api_key,
            user_id=body.user_id,
            context=body.context,
        )
    )
    if result.is_fallback:
        logger.info("Served rule-based feedback (note: %s)", result.error_note)
    return SmartFeedbackResponse(
        feedback=result.feedback_text,
        provider=result.provider,
        timestamp=result.generated_at,
        error=result.error_note,
    )


@router.post(
    "/validate-key",
    response_model=ValidateKeyResponse,
    response_model_exclude_none=True,
)
def validate_key(
    body: ValidateKeyRequest,
    resolver: FeedbackResolver = Depends(get_resolver),
):
    if not body.user_id and not body.api_key:
        return JSONResponse(status_code=400, content={"valid": False, "error": "Missing userId"})

    try:
        valid = resolver.validate_key(user_id=body.user_id, api_key=body.api_key)
    except NoCredentialError as exc:
        return JSONResponse(status_code=400, content={"valid": False, "error": str(exc)})

    if not valid:
        return JSONResponse(
            status_code=502, content={"valid": False, "error": "No response from model"}
        )
    return ValidateKeyResponse(valid=True)
