import sys
from typing import TextIO

import structlog

from ..domain.errors import DeliveryFailure
from ..domain.locale import Locale, channel_label
from ..domain.ports import ChannelType, DeliveryChannel

logger = structlog.get_logger()


class ConsoleChannel(DeliveryChannel):
    """
    Channel that writes to a text stream instead of a real transport.

    Each transmission produces exactly one line, ``"<label>: <text>"``.
    When no stream is given the line goes to whatever ``sys.stdout`` is at
    call time.
    """

    def __init__(self, locale: Locale = Locale.PT, stream: TextIO | None = None) -> None:
        self._locale = Locale(locale)
        self._stream = stream

    @property
    def label(self) -> str:
        return channel_label(self.channel_type, self._locale)

    @property
    def locale(self) -> Locale:
        return self._locale

    def transmit(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        try:
            stream.write(f"{self.label}: {text}\n")
            stream.flush()
        except (OSError, ValueError) as e:
            logger.error(
                "Message delivery failed",
                channel=self.channel_type.value,
                error=str(e),
            )
            raise DeliveryFailure(self.channel_type, str(e)) from e

        logger.debug("Message transmitted", channel=self.channel_type.value, length=len(text))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self._locale.value!r})"
