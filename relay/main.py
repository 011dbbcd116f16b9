import logging
from functools import partial

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse

from . import discord_client, linear_client
from .config import Settings, get_config, get_settings
from .exceptions import ConfigError, DeliveryError, EnrichmentError, RelayError
from .services.relay_service import RelayService

# Setup logging - will be configured on startup
logger = logging.getLogger(__name__)

app = FastAPI(title="Linear → Discord Relay", version="0.1.0")


@app.on_event("startup")
async def configure_logging() -> None:
    """Configure logging level from settings on startup."""
    try:
        settings = get_settings()
        log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            force=True,  # Override any existing config
        )
        logger.info(f"Logging configured with level: {settings.LOG_LEVEL.upper()}")
    except Exception as e:
        # Fallback to INFO if settings fail
        logging.basicConfig(level=logging.INFO)
        logger.warning(f"Failed to load LOG_LEVEL from settings, using INFO: {e}")


def get_relay_service(settings: Settings = Depends(get_settings)) -> RelayService:
    """Create RelayService wired to the Linear and Discord clients.

    Configuration values are resolved per request inside the service, so a
    missing credential fails the webhook instead of the whole app.
    """
    return RelayService(
        linear_client=linear_client,
        discord_client=discord_client,
        get_config=partial(get_config, settings),
        linear_api_url=settings.LINEAR_API_URL,
    )


def _status_for(error: RelayError) -> int:
    if isinstance(error, ConfigError):
        return 500
    if isinstance(error, (EnrichmentError, DeliveryError)):
        return 502
    return 500


@app.get("/", response_class=PlainTextResponse)
async def liveness() -> str:
    return "Yes, we're good."


@app.post("/linear_webhook", response_class=PlainTextResponse)
async def linear_webhook(
    request: Request,
    relay_service: RelayService = Depends(get_relay_service),
) -> PlainTextResponse:
    """
    Receives Linear webhook events and relays new comments to Discord.

    Every payload is acknowledged with 200 unless enrichment or delivery
    fails, so Linear only retries deliveries that actually failed.
    """
    body = await request.body()

    try:
        outcome = await relay_service.relay(body)
    except RelayError as e:
        logger.error(f"Failed to relay Linear webhook: {e}")
        return PlainTextResponse("Relay failed", status_code=_status_for(e))

    logger.info(f"Linear webhook handled: {outcome.value}")
    return PlainTextResponse("Okay")
