from .errors import DeliveryFailure
from .locale import Locale
from .messages import Message, MessageCategory, SimpleMessage, UrgentMessage
from .ports import ChannelType, DeliveryChannel

__all__ = [
    "ChannelType",
    "DeliveryChannel",
    "DeliveryFailure",
    "Locale",
    "Message",
    "MessageCategory",
    "SimpleMessage",
    "UrgentMessage",
]
