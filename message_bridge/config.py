from pydantic import field_validator
from pydantic_settings import BaseSettings

from .domain import ChannelType, Locale, MessageCategory


class Settings(BaseSettings):
    """Settings loaded from environment (``MESSAGE_BRIDGE_*``)."""

    # Service
    service_name: str = "message-bridge"

    # Composition
    category: MessageCategory = MessageCategory.SIMPLE
    medium: ChannelType = ChannelType.EMAIL
    locale: Locale = Locale.PT
    body: str = "Olá, mundo!"

    # Logging
    log_level: str = "WARNING"
    log_json: bool = True

    @field_validator("category", "medium", "locale", mode="before")
    @classmethod
    def _lowercase(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    class Config:
        env_prefix = "MESSAGE_BRIDGE_"
        env_file = ".env"
        case_sensitive = False
