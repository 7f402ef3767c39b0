"""Tests for the bot catalogue."""

import pytest

from guise._bots import ALL_BOTS, BING, BOT_CATEGORIES, GOOGLE, YANDEX, eligible_bots
from guise._tls import GENERIC_CLIENT


class TestCatalogue:
    def test_every_category_has_bots(self):
        assert len(BOT_CATEGORIES) == 29
        for category, bots in BOT_CATEGORIES.items():
            assert bots, category

    def test_headers_lowercase_and_read_only(self):
        for bot in ALL_BOTS:
            assert all(name == name.lower() for name in bot.headers)
            with pytest.raises(TypeError):
                bot.headers["x-test"] = "1"

    def test_googlebot_from_header(self):
        assert all(
            bot.headers.get("from") == "googlebot@googlebot.com"
            for bot in BOT_CATEGORIES[GOOGLE][:8]
        )

    def test_plain_crawlers_use_generic_client(self):
        assert BOT_CATEGORIES[YANDEX][0].tls == GENERIC_CLIENT


class TestEligibleBots:
    def test_no_categories_means_all(self):
        assert eligible_bots(()) == ALL_BOTS

    def test_union(self):
        bots = eligible_bots([BING, YANDEX])
        assert bots == BOT_CATEGORIES[BING] + BOT_CATEGORIES[YANDEX]

    def test_unknown_contributes_nothing(self):
        assert eligible_bots(["NotABot"]) == ()
        assert eligible_bots(["NotABot", BING]) == BOT_CATEGORIES[BING]
