"""Linear → Discord relay pipeline."""
import enum
import logging

from ..linear_client import LINEAR_API
from ..models import ActionKind, CommentEvent, UnsupportedEvent
from .decoder import decode_payload
from .formatter import format_notification
from .protocols import CommentMetaFetcher, ConfigLookup, NotificationSender

logger = logging.getLogger(__name__)


class RelayOutcome(str, enum.Enum):
    IGNORED_PAYLOAD = "ignored_payload"
    IGNORED_ACTION = "ignored_action"
    UNSUPPORTED_EVENT = "unsupported_event"
    DELIVERED = "delivered"


class RelayService:
    """Relays newly created Linear comments to a Discord channel.

    Follows Single Responsibility Principle:
    - Only responsible for sequencing decode, filter, enrich, format and deliver
    - Doesn't know about HTTP routing or where configuration comes from
    """

    def __init__(
        self,
        linear_client: CommentMetaFetcher,
        discord_client: NotificationSender,
        get_config: ConfigLookup,
        linear_api_url: str = LINEAR_API,
    ):
        """Initialize relay service.

        Args:
            linear_client: Client used to fetch comment metadata
            discord_client: Client used to deliver the notification
            get_config: Resolves DISCORD_WEBHOOK_URL and LINEAR_API_KEY
            linear_api_url: Linear GraphQL endpoint
        """
        self.linear_client = linear_client
        self.discord_client = discord_client
        self.get_config = get_config
        self.linear_api_url = linear_api_url

    async def relay(self, body: bytes) -> RelayOutcome:
        """Process one inbound webhook body.

        Args:
            body: Raw request body

        Returns:
            What happened to the webhook

        Raises:
            ConfigError: If a required setting is missing
            EnrichmentError: If the Linear API call fails
            DeliveryError: If the Discord webhook call fails
        """
        payload = decode_payload(body)
        if payload is None:
            return RelayOutcome.IGNORED_PAYLOAD

        logger.info(f"Received Linear webhook: {payload.event.type}/{payload.action.value}")
        logger.debug(f"Linear data: {payload!r}")

        if payload.action != ActionKind.CREATE:
            logger.info(f"Ignoring Linear '{payload.action.value}' action")
            return RelayOutcome.IGNORED_ACTION

        if isinstance(payload.event, UnsupportedEvent):
            logger.info(f"Ignoring unsupported Linear event type: {payload.event.type}")
            return RelayOutcome.UNSUPPORTED_EVENT

        comment = _extract_comment(payload.event)
        webhook_url = self.get_config("DISCORD_WEBHOOK_URL")
        api_key = self.get_config("LINEAR_API_KEY")

        meta = await self.linear_client.fetch_comment_meta(
            comment.id, comment.user_id, api_key, api_url=self.linear_api_url
        )

        notification = format_notification(comment, meta)
        await self.discord_client.send_message(webhook_url, notification)

        logger.info(f"Relayed comment {comment.id} on {meta.issue_identifier} to Discord")
        return RelayOutcome.DELIVERED


def _extract_comment(event: object) -> CommentEvent:
    if isinstance(event, CommentEvent):
        return event
    raise TypeError(f"No comment extractor for event {type(event).__name__}")
