from ..domain.ports import ChannelType
from .base import ConsoleChannel


class SmsChannel(ConsoleChannel):
    """Simulated SMS delivery."""

    @property
    def channel_type(self) -> ChannelType:
        return ChannelType.SMS
