from .delivery_channel import ChannelType, DeliveryChannel

__all__ = [
    "ChannelType",
    "DeliveryChannel",
]
