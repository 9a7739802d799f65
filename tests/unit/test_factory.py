import pytest

from message_bridge.channels import EmailChannel, SmsChannel
from message_bridge.domain import ChannelType, Locale, MessageCategory, SimpleMessage, UrgentMessage
from message_bridge.infrastructure.adapters import BridgeFactory


class TestCreateChannel:
    def test_email(self):
        assert isinstance(BridgeFactory.create_channel(ChannelType.EMAIL), EmailChannel)

    def test_sms(self):
        assert isinstance(BridgeFactory.create_channel(ChannelType.SMS), SmsChannel)

    def test_accepts_strings_case_insensitive(self):
        assert isinstance(BridgeFactory.create_channel("SMS"), SmsChannel)

    def test_returns_new_instance_each_call(self):
        first = BridgeFactory.create_channel(ChannelType.EMAIL)
        second = BridgeFactory.create_channel(ChannelType.EMAIL)

        assert first is not second

    def test_passes_locale(self):
        channel = BridgeFactory.create_channel(ChannelType.EMAIL, locale=Locale.EN)

        assert channel.label == "Sending email"

    def test_unsupported_channel(self):
        with pytest.raises(ValueError, match="Unsupported channel type: fax"):
            BridgeFactory.create_channel("fax")


class TestCreateMessage:
    def test_simple(self, email_channel):
        message = BridgeFactory.create_message(MessageCategory.SIMPLE, email_channel)

        assert isinstance(message, SimpleMessage)
        assert message.channel is email_channel

    def test_urgent_from_string(self, sms_channel):
        assert isinstance(BridgeFactory.create_message("urgent", sms_channel), UrgentMessage)

    def test_unsupported_category(self, email_channel):
        with pytest.raises(ValueError, match="Unsupported message category: spam"):
            BridgeFactory.create_message("spam", email_channel)


class TestCreate:
    def test_wires_both_axes(self, stream):
        message = BridgeFactory.create("urgent", "sms", stream=stream)

        message.send("Alert!")

        assert stream.getvalue() == "Enviando SMS: *** URGENTE *** Alert!\n"

    def test_english(self, stream):
        BridgeFactory.create("simple", "email", locale=Locale.EN, stream=stream).send("Hello")

        assert stream.getvalue() == "Sending email: Simple Message: Hello\n"
