"""Domain errors."""

from .ports.delivery_channel import ChannelType


class DeliveryFailure(Exception):
    """Raised when a channel cannot hand the text to its output medium."""

    def __init__(self, channel: ChannelType, reason: str) -> None:
        self.channel = channel
        self.reason = reason
        super().__init__(f"{channel.value} delivery failed: {reason}")
