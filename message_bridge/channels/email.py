from ..domain.ports import ChannelType
from .base import ConsoleChannel


class EmailChannel(ConsoleChannel):
    """Simulated email delivery."""

    @property
    def channel_type(self) -> ChannelType:
        return ChannelType.EMAIL
