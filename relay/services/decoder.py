"""Inbound webhook body decoding."""
import json
import logging

from pydantic import ValidationError

from ..models import WebhookPayload

logger = logging.getLogger(__name__)


def decode_payload(body: bytes) -> WebhookPayload | None:
    """Decode a raw Linear webhook body.

    Linear keeps adding entity kinds and fields to its webhook schema, so a body
    this relay cannot interpret is not an error: it is acknowledged and dropped.

    Args:
        body: Raw request body

    Returns:
        Parsed payload, or None if the body should be skipped
    """
    try:
        raw = json.loads(body)
    except ValueError as e:
        logger.warning(f"Skipping webhook with non-JSON body: {e}")
        return None

    try:
        return WebhookPayload.model_validate(raw)
    except ValidationError as e:
        kind = raw.get("type") if isinstance(raw, dict) else None
        logger.warning(
            f"Skipping unrecognized webhook payload (type={kind}): {e.error_count()} errors"
        )
        logger.debug(f"Validation errors: {e.errors()}")
        return None
