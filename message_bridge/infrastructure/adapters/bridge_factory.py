"""
Factory for building channels and messages.

Maps the two axes of the bridge, ``ChannelType`` and ``MessageCategory``,
to concrete classes. Every call returns new instances; nothing is cached.
"""

from typing import TextIO

from ...channels import EmailChannel, SmsChannel
from ...domain import (
    ChannelType,
    DeliveryChannel,
    Locale,
    Message,
    MessageCategory,
    SimpleMessage,
    UrgentMessage,
)


def _coerce(enum_cls, value, kind: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        raise ValueError(f"Unsupported {kind}: {value}") from None


class BridgeFactory:
    """Creates channel and message instances from their enum values."""

    @classmethod
    def create_channel(
        cls,
        channel_type: ChannelType | str,
        locale: Locale = Locale.PT,
        stream: TextIO | None = None,
    ) -> DeliveryChannel:
        """
        Create a channel for the given medium.

        Raises:
            ValueError: If the medium is not supported
        """
        match _coerce(ChannelType, channel_type, "channel type"):
            case ChannelType.EMAIL:
                return EmailChannel(locale=locale, stream=stream)
            case ChannelType.SMS:
                return SmsChannel(locale=locale, stream=stream)
            case _:
                raise ValueError(f"Unsupported channel type: {channel_type}")

    @classmethod
    def create_message(
        cls,
        category: MessageCategory | str,
        channel: DeliveryChannel,
        locale: Locale = Locale.PT,
    ) -> Message:
        """
        Create a message of the given category bound to ``channel``.

        Raises:
            ValueError: If the category is not supported
        """
        match _coerce(MessageCategory, category, "message category"):
            case MessageCategory.SIMPLE:
                return SimpleMessage(channel, locale=locale)
            case MessageCategory.URGENT:
                return UrgentMessage(channel, locale=locale)
            case _:
                raise ValueError(f"Unsupported message category: {category}")

    @classmethod
    def create(
        cls,
        category: MessageCategory | str,
        channel_type: ChannelType | str,
        locale: Locale = Locale.PT,
        stream: TextIO | None = None,
    ) -> Message:
        """Create a message wired to a freshly built channel."""
        channel = cls.create_channel(channel_type, locale=locale, stream=stream)
        return cls.create_message(category, channel, locale=locale)
