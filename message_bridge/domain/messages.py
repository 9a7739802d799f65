"""
Message abstraction.

A message knows how to format a body for its category and hands the result
to the delivery channel it was built with. The channel is fixed for the
lifetime of the message.
"""

from abc import ABC, abstractmethod
from enum import Enum

import structlog

from .locale import Locale, category_prefix
from .ports import DeliveryChannel

logger = structlog.get_logger()


class MessageCategory(str, Enum):
    """Supported message categories."""

    SIMPLE = "simple"
    URGENT = "urgent"


class Message(ABC):
    """Abstraction side of the bridge."""

    def __init__(self, channel: DeliveryChannel, locale: Locale = Locale.PT) -> None:
        if not isinstance(channel, DeliveryChannel):
            raise TypeError(
                f"Message requires a DeliveryChannel, got {type(channel).__name__}"
            )
        self._channel = channel
        self._locale = Locale(locale)

    @property
    @abstractmethod
    def category(self) -> MessageCategory:
        ...

    @property
    def channel(self) -> DeliveryChannel:
        return self._channel

    @property
    def locale(self) -> Locale:
        return self._locale

    def format(self, body: str) -> str:
        """Apply the category prefix to ``body``."""
        return category_prefix(self.category, self._locale) + body

    def send(self, body: str) -> None:
        """Format ``body`` and transmit it through the bound channel."""
        logger.debug(
            "Sending message",
            category=self.category.value,
            channel=self._channel.channel_type.value,
        )
        self._channel.transmit(self.format(body))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(channel={self._channel!r}, locale={self._locale.value!r})"


class SimpleMessage(Message):
    """Plain message, e.g. ``Mensagem Simples: Hello``."""

    @property
    def category(self) -> MessageCategory:
        return MessageCategory.SIMPLE


class UrgentMessage(Message):
    """Urgent message, e.g. ``*** URGENTE *** Alert!``."""

    @property
    def category(self) -> MessageCategory:
        return MessageCategory.URGENT
