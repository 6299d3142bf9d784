"""
Classification request validation.

Checks applied to the raw request before any similarity query is issued.
Word and character limits are measured on the unmodified message.

Dependencies: profanity_backend.configs, profanity_backend.core.exceptions
System role: Request precondition checks
"""

import json
from typing import Any

from profanity_backend.configs.classifier import ClassifierSettings
from profanity_backend.core.classification.normalizer import count_words
from profanity_backend.core.exceptions import (
    InvalidJSONError,
    MessageTooLongError,
    MessageTooShortError,
    MissingMessageError,
    UnsupportedContentTypeError,
)

JSON_MEDIA_TYPE = "application/json"


def ensure_json_content_type(content_type: str | None) -> None:
    """
    Reject requests that do not declare a JSON body.

    Media type parameters such as charset are ignored.

    Raises:
        UnsupportedContentTypeError: If the media type is not application/json
    """
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        raise UnsupportedContentTypeError(content_type)


def parse_json_object(raw: bytes) -> dict[str, Any]:
    """
    Decode a request body into a JSON object.

    Raises:
        InvalidJSONError: If the body is not valid JSON or not an object
    """
    try:
        body = json.loads(raw or b"")
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidJSONError() from e
    if not isinstance(body, dict):
        raise InvalidJSONError()
    return body


def validate_message(body: dict[str, Any], settings: ClassifierSettings) -> str:
    """
    Extract and validate the message field.

    Args:
        body: Decoded JSON request body
        settings: Classifier limits

    Returns:
        str: The message, unmodified

    Raises:
        MissingMessageError: If message is absent, empty or not a string
        MessageTooShortError: If message has fewer than min_words tokens
        MessageTooLongError: If message exceeds max_words or max_characters
    """
    message = body.get("message")
    if not isinstance(message, str) or not message:
        raise MissingMessageError()

    word_count = count_words(message)
    if word_count < settings.min_words:
        raise MessageTooShortError(word_count, settings.min_words)

    if word_count > settings.max_words or len(message) > settings.max_characters:
        raise MessageTooLongError(
            word_count,
            len(message),
            settings.max_words,
            settings.max_characters,
        )

    return message
