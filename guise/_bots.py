"""Crawler and link-preview bot profiles, grouped by category.

Bots are replayed verbatim: user-agent, TLS identity and headers are
copied as-is into the generated agent.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from guise._tls import GENERIC_CLIENT, TlsIdentity

# Category names
AHREFS = "AhrefsBot"
APPLE = "AppleBot"
BAIDU = "BaiduBot"
BING = "BingBot"
BYTESPIDER = "BytespiderBot"
CC = "CCBot"
CHATGPT = "ChatGPTUser"
CLAUDE = "ClaudeBot"
COHERE = "CohereBot"
DIFFBOT = "Diffbot"
DUCKDUCKGO = "DuckDuckGoBot"
FACEBOOK = "FacebookBot"
GPT = "GPTBot"
GOOGLE = "GoogleBot"
GOOGLE_EXTENDED = "GoogleExtended"
LINKEDIN = "LinkedInBot"
MAJESTIC = "MajesticBot"
MOZ = "MozBot"
PERPLEXITY = "PerplexityBot"
PETAL = "PetalBot"
PINTEREST = "PinterestBot"
SEMRUSH = "SemrushBot"
SOGOU = "SogouBot"
TWITTER = "TwitterBot"
UPTIME_ROBOT = "UptimeRobot"
WHATSAPP = "WhatsAppBot"
YAHOO = "YahooBot"
YANDEX = "YandexBot"
YOU = "YouBot"


@dataclass(frozen=True)
class BotProfile:
    user_agent: str
    tls: TlsIdentity
    headers: Mapping[str, str]


_HTML_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
_CHROME_ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,"
    "image/webp,image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.7"
)
_CHROME_120 = TlsIdentity("Chrome120")
_EDGE = TlsIdentity("Edge101")
_GOOGLEBOT_FROM = "googlebot@googlebot.com"


def _bot(user_agent: str, tls: TlsIdentity = GENERIC_CLIENT, **headers) -> BotProfile:
    """Header keywords use underscores for dashes (``accept_encoding``)."""
    if not headers:
        headers = {"accept": _HTML_ACCEPT, "accept_encoding": "gzip, deflate"}
    return BotProfile(
        user_agent,
        tls,
        MappingProxyType({k.replace("_", "-"): v for k, v in headers.items()}),
    )


def _browser_bot(user_agent, tls, sec_ch_ua, mobile, platform, accept=_CHROME_ACCEPT, **extra) -> BotProfile:
    return _bot(
        user_agent,
        tls,
        accept=accept,
        accept_encoding="gzip, deflate, br",
        accept_language="en-US,en;q=0.9",
        upgrade_insecure_requests="1",
        sec_fetch_site="none",
        sec_fetch_mode="navigate",
        sec_fetch_user="?1",
        sec_fetch_dest="document",
        sec_ch_ua=sec_ch_ua,
        sec_ch_ua_mobile=mobile,
        sec_ch_ua_platform=f'"{platform}"',
        **extra,
    )


_GOOGLE_SEC_CH_UA = '"Not_A Brand";v="8", "Chromium";v="120", "Google Chrome";v="120"'
_EDGE_SEC_CH_UA = '"Microsoft Edge";v="106", "Chromium";v="106", "Not;A=Brand";v="99"'


BOT_CATEGORIES: Mapping[str, tuple[BotProfile, ...]] = MappingProxyType({
    # Google
    GOOGLE: (
        _bot(
            "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)",
            accept=_HTML_ACCEPT, accept_encoding="gzip, deflate", **{"from": _GOOGLEBOT_FROM},
        ),
        _browser_bot(
            "Mozilla/5.0 AppleWebKit/537.36 (KHTML, like Gecko; compatible; "
            "Googlebot/2.1; +http://www.google.com/bot.html) "
            "Chrome/120.0.0.0 Safari/537.36",
            _CHROME_120, _GOOGLE_SEC_CH_UA, "?0", "Linux",
            **{"from": _GOOGLEBOT_FROM},
        ),
        _browser_bot(
            "Mozilla/5.0 (Linux; Android 6.0.1; Nexus 5X Build/MMB29P) "
            "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 "
            "Mobile Safari/537.36 (compatible; Googlebot/2.1; "
            "+http://www.google.com/bot.html)",
            _CHROME_120, _GOOGLE_SEC_CH_UA, "?1", "Android",
            **{"from": _GOOGLEBOT_FROM},
        ),
        _bot(
            "Googlebot-Image/1.0",
            accept="image/*", accept_encoding="gzip, deflate", **{"from": _GOOGLEBOT_FROM},
        ),
        _bot(
            "Googlebot-News",
            accept=_HTML_ACCEPT, accept_encoding="gzip, deflate", **{"from": _GOOGLEBOT_FROM},
        ),
        _bot(
            "Googlebot-Video/1.0",
            accept="video/*", accept_encoding="gzip, deflate", **{"from": _GOOGLEBOT_FROM},
        ),
        _bot(
            "Mediapartners-Google",
            accept=_HTML_ACCEPT, accept_encoding="gzip, deflate", **{"from": _GOOGLEBOT_FROM},
        ),
        _bot(
            "AdsBot-Google (+http://www.google.com/adsbot.html)",
            accept=_HTML_ACCEPT, accept_encoding="gzip, deflate", **{"from": _GOOGLEBOT_FROM},
        ),
        _bot(
            "FeedFetcher-Google; (+http://www.google.com/feedfetcher.html)",
            accept="application/atom+xml,application/rss+xml,application/xml;q=0.9,*/*;q=0.8",
            accept_encoding="gzip, deflate",
        ),
    ),
    GOOGLE_EXTENDED: (_bot("Google-Extended"),),

    # Microsoft
    BING: (
        _bot(
            "Mozilla/5.0 (compatible; Bingbot/2.0; +http://www.bing.com/bingbot.htm)",
            accept=_HTML_ACCEPT, accept_encoding="gzip, deflate",
            accept_language="en-US,en;q=0.9",
        ),
        _browser_bot(
            "Mozilla/5.0 (compatible; Bingbot/2.0; +http://www.bing.com/bingbot.htm)",
            _EDGE, _EDGE_SEC_CH_UA, "?0", "Linux",
        ),
        _browser_bot(
            "Mozilla/5.0 (Windows NT 6.1; WOW64) AppleWebKit/534+ "
            "(KHTML, like Gecko) BingPreview/1.0b",
            _EDGE, _EDGE_SEC_CH_UA, "?0", "Windows",
            accept=(
                "text/html,application/xhtml+xml,application/xml;q=0.9,"
                "image/avif,image/webp,image/apng,*/*;q=0.8"
            ),
        ),
    ),

    # Other search engines
    DUCKDUCKGO: (
        _bot("Mozilla/5.0 (compatible; DuckDuckBot/1.0; +http://duckduckgo.com/duckduckbot.html)"),
    ),
    BAIDU: (
        _bot(
            "Mozilla/5.0 (compatible; Baiduspider/2.0; +http://www.baidu.com/search/spider.html)",
            accept=_HTML_ACCEPT, accept_encoding="gzip, deflate",
            accept_language="zh-CN,zh;q=0.8,en;q=0.6",
        ),
    ),
    YANDEX: (
        _bot("Mozilla/5.0 (compatible; YandexBot/3.0; +http://yandex.com/bots)"),
        _bot(
            "Mozilla/5.0 (compatible; YandexImages/3.0; +http://yandex.com/bots)",
            accept="image/*,*/*;q=0.8", accept_encoding="gzip, deflate",
        ),
    ),
    YAHOO: (
        _bot("Mozilla/5.0 (compatible; Yahoo! Slurp; http://help.yahoo.com/help/us/ysearch/slurp)"),
    ),
    SOGOU: (
        _bot(
            "Sogou web spider/4.0(+http://www.sogou.com/docs/help/webmasters.htm#07)",
            accept=_HTML_ACCEPT, accept_encoding="gzip, deflate",
            accept_language="zh-CN,zh;q=0.8",
        ),
    ),

    # SEO / marketing
    AHREFS: (_bot("Mozilla/5.0 (compatible; AhrefsBot/7.0; +http://ahrefs.com/robot/)"),),
    SEMRUSH: (_bot("SemrushBot/7~bl; +http://www.semrush.com/bot.html"),),
    MAJESTIC: (_bot("Mozilla/5.0 (compatible; MJ12bot/v1.4.8; http://mj12bot.com/)"),),
    MOZ: (
        _bot("Mozilla/5.0 (compatible; DotBot/1.1; http://www.opensiteexplorer.org/dotbot, help@moz.com)"),
    ),

    # AI crawlers
    GPT: (_bot("GPTBot/1.0 (+http://openai.com/gptbot)"),),
    CHATGPT: (_bot("ChatGPT-User"),),
    CLAUDE: (_bot("ClaudeBot/1.0 (+claudebot@anthropic.com)"),),
    COHERE: (_bot("cohere-ai/1.0 (+https://cohere.com/bot)"),),
    PERPLEXITY: (_bot("PerplexityBot/1.0 (+https://about.perplexity.ai/docs/perplexitybot)"),),
    YOU: (_bot("Mozilla/5.0 (compatible; YouBot/1.0; +http://about.you.com/youbot)"),),
    DIFFBOT: (_bot("Diffbot/1.0 (+http://www.diffbot.com/our-bot/)"),),

    # Social / link previews
    FACEBOOK: (_bot("facebookexternalhit/1.1 (+http://www.facebook.com/externalhit_uatext.php)"),),
    TWITTER: (_bot("Twitterbot/1.0"),),
    PINTEREST: (
        _bot(
            "Pinterest/0.2 (+http://www.pinterest.com/bot.html)",
            accept="text/html,application/xhtml+xml,application/xml;q=0.9,image/*;q=0.8,*/*;q=0.7",
            accept_encoding="gzip, deflate",
        ),
    ),
    LINKEDIN: (
        _bot("LinkedInBot/1.0 (compatible; Mozilla/5.0; Apache-HttpClient +http://www.linkedin.com)"),
    ),
    WHATSAPP: (_bot("WhatsApp/2.21.18.17 A"),),

    # Miscellaneous
    APPLE: (_bot("Mozilla/5.0 (compatible; Applebot/1.0; +http://www.apple.com/go/applebot)"),),
    UPTIME_ROBOT: (_bot("Mozilla/5.0 (compatible; UptimeRobot/2.0; https://www.uptimerobot.com/)"),),
    PETAL: (_bot("Mozilla/5.0 (compatible; PetalBot; +http://aspiegel.com/petalbot)"),),
    BYTESPIDER: (_bot("Mozilla/5.0 (compatible; Bytespider; +http://www.bytespider.com/)"),),
    CC: (_bot("CCBot/2.0 (+https://commoncrawl.org/commoncrawl/projects/bots)"),),
})

ALL_BOTS = tuple(bot for bots in BOT_CATEGORIES.values() for bot in bots)


def eligible_bots(categories=()) -> tuple[BotProfile, ...]:
    """All bots when ``categories`` is empty, else the union of the named
    categories. Unknown names contribute nothing.
    """
    if not categories:
        return ALL_BOTS
    return tuple(
        bot
        for category in categories
        for bot in BOT_CATEGORIES.get(category, ())
    )
