"""Protocols (interfaces) for dependency inversion."""

from typing import Protocol

from ..models import CommentMeta, OutboundNotification


class CommentMetaFetcher(Protocol):
    """Protocol for clients that enrich a comment with author/issue data."""

    async def fetch_comment_meta(
        self, comment_id: str, user_id: str, api_key: str, api_url: str = ...
    ) -> CommentMeta:
        """Fetch metadata for a comment.

        Raises:
            EnrichmentError: If the upstream call fails
        """
        ...


class NotificationSender(Protocol):
    """Protocol for clients that deliver a notification to a chat webhook."""

    async def send_message(self, webhook_url: str, notification: OutboundNotification) -> None:
        """Deliver a notification.

        Raises:
            DeliveryError: If the upstream call fails
        """
        ...


class ConfigLookup(Protocol):
    """Resolves a required configuration value by name."""

    def __call__(self, name: str) -> str:
        """Return the value or raise ConfigError."""
        ...
