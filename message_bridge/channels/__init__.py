from .base import ConsoleChannel
from .email import EmailChannel
from .sms import SmsChannel

__all__ = [
    "ConsoleChannel",
    "EmailChannel",
    "SmsChannel",
]
