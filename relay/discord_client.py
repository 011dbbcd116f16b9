import logging

import httpx

from .exceptions import DeliveryError
from .models import OutboundNotification

logger = logging.getLogger(__name__)


async def send_message(webhook_url: str, notification: OutboundNotification) -> None:
    """Post a message to a Discord incoming webhook.

    Args:
        webhook_url: Discord webhook URL
        notification: Message content and the username to post as

    Raises:
        DeliveryError: On transport failure or a non-2xx response
    """
    headers = {"content-type": "application/json"}

    try:
        async with httpx.AsyncClient(timeout=10) as client:
            resp = await client.post(webhook_url, headers=headers, json=notification.model_dump())
    except httpx.HTTPError as e:
        logger.error(f"Discord webhook request failed: {e}")
        raise DeliveryError(f"Discord webhook request failed: {e}") from e

    if not resp.is_success:
        logger.error(
            f"Discord webhook request failed: status={resp.status_code}, content={resp.text!r}"
        )
        raise DeliveryError("Invalid response code", status_code=resp.status_code, body=resp.text)
