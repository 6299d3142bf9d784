"""
Classification API endpoint.

Routes:
- POST /classify - Classify a message as profane or clean

The application also mounts this handler at POST / for existing clients.

Dependencies: profanity_backend.core.classification, profanity_backend.api.validators
System role: Profanity classification HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from profanity_backend.api.deps import get_classifier, get_settings_dependency
from profanity_backend.api.validators import (
    ensure_json_content_type,
    parse_json_object,
    validate_message,
)
from profanity_backend.configs import Settings
from profanity_backend.core.classification.classifier import ProfanityClassifier
from profanity_backend.models.classification import ClassifyResponse
from profanity_backend.models.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["classification"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid message"},
    406: {"model": ErrorResponse, "description": "Body is not JSON"},
    500: {"model": ErrorResponse, "description": "Similarity index failure"},
    504: {"model": ErrorResponse, "description": "Classification timed out"},
}


@router.post("/classify", response_model=ClassifyResponse, responses=ERROR_RESPONSES)
async def classify_message(
    request: Request,
    classifier: ProfanityClassifier = Depends(get_classifier),
    settings: Settings = Depends(get_settings_dependency),
) -> JSONResponse:
    """Classify a message by similarity to known profanity.

    Flow:
    1. Reject non-JSON content types before reading the body
    2. Validate the message field against word and character limits
    3. Run the classifier (whitelist, chunking, concurrent index queries)
    4. Return {isProfanity, score[, flaggedFor]}

    Args:
        request: Incoming request with a JSON body {"message": str}
        classifier: Injected ProfanityClassifier
        settings: Injected application settings

    Returns:
        JSONResponse: Classification payload

    Raises:
        MessageValidationError: Request rejected before any query (4xx)
        VectorStoreError: Similarity index failed (500)
        ClassificationTimeoutError: Queries exceeded the request timeout (504)
    """
    ensure_json_content_type(request.headers.get("content-type"))
    body = parse_json_object(await request.body())
    message = validate_message(body, settings.classifier)

    result = await classifier.classify(message)

    return JSONResponse(content=ClassifyResponse.from_result(result).to_payload())
