import io

import pytest

from message_bridge.channels import EmailChannel, SmsChannel
from message_bridge.infrastructure.logging import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    configure_logging("message-bridge-test", level="WARNING")


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def email_channel(stream) -> EmailChannel:
    return EmailChannel(stream=stream)


@pytest.fixture
def sms_channel(stream) -> SmsChannel:
    return SmsChannel(stream=stream)
