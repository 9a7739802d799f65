"""
Text catalog for message prefixes and channel labels.

Portuguese is the default locale and reproduces the canonical output
(``Enviando email: Mensagem Simples: ...``).
"""

from enum import Enum


class Locale(str, Enum):
    """Supported output languages."""

    PT = "pt"
    EN = "en"


CATEGORY_PREFIXES: dict[Locale, dict[str, str]] = {
    Locale.PT: {
        "simple": "Mensagem Simples: ",
        "urgent": "*** URGENTE *** ",
    },
    Locale.EN: {
        "simple": "Simple Message: ",
        "urgent": "*** URGENT *** ",
    },
}

CHANNEL_LABELS: dict[Locale, dict[str, str]] = {
    Locale.PT: {
        "email": "Enviando email",
        "sms": "Enviando SMS",
    },
    Locale.EN: {
        "email": "Sending email",
        "sms": "Sending SMS",
    },
}


def _key(value: str | Enum) -> str:
    return value.value if isinstance(value, Enum) else value


def category_prefix(category: str, locale: Locale = Locale.PT) -> str:
    """Return the prefix a message category puts in front of the body."""
    return CATEGORY_PREFIXES[Locale(locale)][_key(category)]


def channel_label(channel: str, locale: Locale = Locale.PT) -> str:
    """Return the label a channel writes before the transmitted text."""
    return CHANNEL_LABELS[Locale(locale)][_key(channel)]
