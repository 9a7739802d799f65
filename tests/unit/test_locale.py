import pytest

from message_bridge.domain import ChannelType, Locale, MessageCategory
from message_bridge.domain.locale import category_prefix, channel_label


class TestCatalog:
    @pytest.mark.parametrize(
        "category, locale, expected",
        [
            (MessageCategory.SIMPLE, Locale.PT, "Mensagem Simples: "),
            (MessageCategory.URGENT, Locale.PT, "*** URGENTE *** "),
            (MessageCategory.SIMPLE, Locale.EN, "Simple Message: "),
            (MessageCategory.URGENT, Locale.EN, "*** URGENT *** "),
        ],
    )
    def test_category_prefix(self, category, locale, expected):
        assert category_prefix(category, locale) == expected

    @pytest.mark.parametrize(
        "channel, locale, expected",
        [
            (ChannelType.EMAIL, Locale.PT, "Enviando email"),
            (ChannelType.SMS, Locale.PT, "Enviando SMS"),
            (ChannelType.EMAIL, Locale.EN, "Sending email"),
            (ChannelType.SMS, Locale.EN, "Sending SMS"),
        ],
    )
    def test_channel_label(self, channel, locale, expected):
        assert channel_label(channel, locale) == expected

    def test_accepts_plain_strings(self):
        assert category_prefix("urgent", "en") == "*** URGENT *** "
        assert channel_label("sms") == "Enviando SMS"

    def test_unknown_locale(self):
        with pytest.raises(ValueError):
            channel_label(ChannelType.EMAIL, "fr")
