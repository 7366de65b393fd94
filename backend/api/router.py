import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_validator
from config import settings
from models.requests import ValidateMatchRequest
from models.responses import ValidationResult
from services.validation.errors import ValidationFailed
from services.validation.validator import ResumeMatchValidator

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health(validator: ResumeMatchValidator = Depends(get_validator)):
    return {
        "status": "ok",
        "cached_results": len(validator.cache),
    }


# Sync handler: FastAPI runs it in the threadpool
@router.post("/validate", response_model=ValidationResult)
@limiter.limit(settings.rate_limit)
def validate(
    request: Request,
    body: ValidateMatchRequest,
    validator: ResumeMatchValidator = Depends(get_validator),
):
    try:
        return validator.validate_match(body.resume_text, body.job_description, body.user_id)
    except ValidationFailed as e:
        logger.warning("Validation failed (%s): %s", e.code, e)
        raise HTTPException(
            status_code=503,
            detail="analysis temporarily unavailable, please retry",
        )
