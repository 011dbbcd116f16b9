"""Error taxonomy for the relay pipeline."""


class RelayError(Exception):
    """Base class for failures that must fail the inbound request."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ConfigError(RelayError):
    """Raised when a required configuration value is missing."""


class EnrichmentError(RelayError):
    """Raised when fetching comment metadata from Linear fails."""


class DeliveryError(RelayError):
    """Raised when posting the notification to Discord fails."""
