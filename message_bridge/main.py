import sys

import structlog

from .config import Settings
from .domain import DeliveryFailure
from .infrastructure.adapters import BridgeFactory
from .infrastructure.logging import configure_logging

logger = structlog.get_logger()


def run(settings: Settings) -> None:
    """Wire one message category to one channel and send the configured body."""
    # Composition root
    channel = BridgeFactory.create_channel(settings.medium, locale=settings.locale)
    message = BridgeFactory.create_message(settings.category, channel, locale=settings.locale)

    logger.info(
        "Message wired",
        category=settings.category.value,
        medium=settings.medium.value,
        locale=settings.locale.value,
    )
    message.send(settings.body)


def main() -> None:
    """Console entry point."""
    settings = Settings()
    configure_logging(settings.service_name, settings.log_level, settings.log_json)

    try:
        run(settings)
    except DeliveryFailure as e:
        logger.error("Delivery aborted", channel=e.channel.value, reason=e.reason)
        sys.exit(1)


if __name__ == "__main__":
    main()
