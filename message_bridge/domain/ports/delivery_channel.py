"""
Outbound port for message delivery.

This is the implementation side of the bridge: messages depend on this
interface, concrete channels in ``message_bridge.channels`` implement it.
"""

from abc import ABC, abstractmethod
from enum import Enum


class ChannelType(str, Enum):
    """Supported delivery media."""

    EMAIL = "email"
    SMS = "sms"


class DeliveryChannel(ABC):
    """
    Outbound port for transmitting a finished message.

    New media are added by subclassing; message categories never need to
    change when a channel is added.
    """

    @property
    @abstractmethod
    def channel_type(self) -> ChannelType:
        """Return the medium this channel handles."""
        ...

    @abstractmethod
    def transmit(self, text: str) -> None:
        """
        Transmit already formatted text.

        Args:
            text: Final message text, passed through unmodified

        Raises:
            DeliveryFailure: If the underlying medium rejects the write
        """
        ...
