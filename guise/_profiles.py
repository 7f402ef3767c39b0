"""Reference data: browser, version, OS and platform profiles.

Everything here is built once at import and never mutated. Tables are
exposed as MappingProxyType / tuples so accidental writes fail loudly.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from guise._h2 import H2Setting, chromium_settings, gecko_settings, webkit_settings
from guise._options import Browser, OperatingSystem, Platform
from guise._tls import (
    CHROME_EMULATIONS,
    EDGE_EMULATIONS,
    FIREFOX_EMULATIONS,
    SAFARI_EMULATIONS,
    TlsIdentity,
    emulation_for,
)
from guise._useragent import (
    browser_suffix,
    chrome_token,
    firefox_os_token,
    firefox_token,
    gecko_trail,
    khtml,
    mobile_safari_token,
    mozilla,
    os_token,
    safari_browser_token,
    safari_mobile_token,
    safari_token,
    safari_version_token,
    safari_webkit_token,
    webkit_token,
)


class Family(str, Enum):
    """Rendering family: selects the UA pipeline and the H2 SETTINGS table."""

    CHROMIUM = "chromium"
    GECKO = "gecko"
    WEBKIT = "webkit"


@dataclass(frozen=True)
class AcceptPart:
    """One comma-separated entry of an Accept / Accept-Language header.

    ``q`` of 0 means the entry carries no quality weight.
    """

    value: str
    q: float = 0.0
    extras: tuple[str, ...] = ()


@dataclass(frozen=True)
class VersionProfile:
    tls: TlsIdentity
    accept: tuple[tuple[AcceptPart, ...], ...]
    accept_xhr: tuple[tuple[AcceptPart, ...], ...]
    build: int = 0
    gecko_revision: str = ""
    webkit_version: str = ""
    safari_version: str = ""
    mobile_build: str = ""
    supports_h2: bool = True


@dataclass(frozen=True)
class BrowserProfile:
    brand: str
    family: Family
    chromium_based: bool
    versions: Mapping[int, VersionProfile]
    h2_settings: Callable[[], dict[H2Setting, int]]
    ua_suffix: str = ""


@dataclass(frozen=True)
class OSProfile:
    name: str
    platform_token: str
    version: str = ""
    arch: str = ""
    bitness: str = ""
    mobile: bool = False


@dataclass(frozen=True)
class PlatformProfile:
    mobile_hint: str
    steps: Mapping[Family, tuple[Callable[..., str], ...]] = field(
        default_factory=dict
    )


def parse_accept(header: str) -> tuple[AcceptPart, ...]:
    """Parse "en-US,en;q=0.9" style strings into AcceptPart templates.

    Entries whose quality value does not parse are skipped.
    """
    parts = []
    for raw in header.split(","):
        raw = raw.strip()
        if not raw:
            continue
        if ";q=" in raw:
            value, _, q = raw.partition(";q=")
            try:
                parts.append(AcceptPart(value.strip(), float(q)))
            except ValueError:
                continue
        else:
            parts.append(AcceptPart(raw))
    return tuple(parts)


# ---------------------------------------------------------------------------
# Accept templates
# ---------------------------------------------------------------------------

_ACCEPT_CHROME = (
    (
        AcceptPart("text/html"),
        AcceptPart("application/xhtml+xml"),
        AcceptPart("application/xml", 0.9),
        AcceptPart("image/avif"),
        AcceptPart("image/webp"),
        AcceptPart("image/apng"),
        AcceptPart("*/*", 0.8),
        AcceptPart("application/signed-exchange", 0.7, ("v=b3",)),
    ),
    (
        AcceptPart("text/html"),
        AcceptPart("application/xhtml+xml"),
        AcceptPart("application/xml", 0.9),
        AcceptPart("image/avif"),
        AcceptPart("image/webp"),
        AcceptPart("image/apng"),
        AcceptPart("*/*", 0.8),
    ),
)

_ACCEPT_FIREFOX = (
    (
        AcceptPart("text/html"),
        AcceptPart("application/xhtml+xml"),
        AcceptPart("application/xml", 0.9),
        AcceptPart("image/avif"),
        AcceptPart("image/webp"),
        AcceptPart("*/*", 0.8),
    ),
)

_ACCEPT_SAFARI = (
    (
        AcceptPart("text/html"),
        AcceptPart("application/xhtml+xml"),
        AcceptPart("application/xml", 0.9),
        AcceptPart("*/*", 0.8),
    ),
)

_ACCEPT_XHR = ((AcceptPart("*/*"),),)


# ---------------------------------------------------------------------------
# Browser versions
# ---------------------------------------------------------------------------

def _chromium_versions(builds: dict[int, int], emulations) -> Mapping[int, VersionProfile]:
    return MappingProxyType({
        major: VersionProfile(
            tls=emulation_for(emulations, major),
            accept=_ACCEPT_CHROME,
            accept_xhr=_ACCEPT_XHR,
            build=build,
        )
        for major, build in builds.items()
    })


CHROME_VERSIONS = _chromium_versions(
    {
        114: 5735, 116: 5845, 118: 5993, 120: 6099, 124: 6367, 128: 6613,
        130: 6723, 133: 6943, 136: 7103, 138: 7204, 140: 7339,
    },
    CHROME_EMULATIONS,
)

EDGE_VERSIONS = _chromium_versions(
    {
        114: 1823, 116: 1938, 118: 2088, 120: 2210, 124: 2478, 128: 2739,
        133: 3065, 136: 3240, 138: 3351, 140: 3485,
    },
    EDGE_EMULATIONS,
)

FIREFOX_VERSIONS = MappingProxyType({
    major: VersionProfile(
        tls=emulation_for(FIREFOX_EMULATIONS, major),
        accept=_ACCEPT_FIREFOX,
        accept_xhr=_ACCEPT_XHR,
        gecko_revision=f"{major}.0",
    )
    for major in (115, 120, 127, 128, 133, 136)
})

SAFARI_VERSIONS = MappingProxyType({
    major: VersionProfile(
        tls=emulation_for(SAFARI_EMULATIONS, major),
        accept=_ACCEPT_SAFARI,
        accept_xhr=_ACCEPT_XHR,
        webkit_version="605.1.15",
        safari_version=safari,
        mobile_build=mobile,
    )
    for major, safari, mobile in (
        (16, "16.5", "20F66"),
        (17, "17.5", "15E148"),
        (18, "18.3", "15E148"),
    )
})


BROWSERS: Mapping[Browser, BrowserProfile] = MappingProxyType({
    Browser.CHROME: BrowserProfile(
        "Google Chrome", Family.CHROMIUM, True, CHROME_VERSIONS,
        chromium_settings,
    ),
    Browser.OPERA: BrowserProfile(
        "Opera", Family.CHROMIUM, True, CHROME_VERSIONS,
        chromium_settings, ua_suffix="OPR/{major}",
    ),
    Browser.EDGE: BrowserProfile(
        "Microsoft Edge", Family.CHROMIUM, True, EDGE_VERSIONS,
        chromium_settings, ua_suffix="Edg/{major}",
    ),
    Browser.BRAVE: BrowserProfile(
        "Brave", Family.CHROMIUM, True, CHROME_VERSIONS, chromium_settings,
    ),
    Browser.FIREFOX: BrowserProfile(
        "Firefox", Family.GECKO, False, FIREFOX_VERSIONS, gecko_settings,
    ),
    Browser.SAFARI: BrowserProfile(
        "Safari", Family.WEBKIT, False, SAFARI_VERSIONS, webkit_settings,
    ),
})


# ---------------------------------------------------------------------------
# Operating systems
# ---------------------------------------------------------------------------

OSES: Mapping[OperatingSystem, OSProfile] = MappingProxyType({
    OperatingSystem.WINDOWS: OSProfile(
        "Windows", "Windows NT 10.0; Win64; x64", "10.0.0", "x86", "64",
    ),
    OperatingSystem.WINDOWS11: OSProfile(
        "Windows", "Windows NT 10.0; Win64; x64", "15.0.0", "x86", "64",
    ),
    OperatingSystem.MAC_INTEL: OSProfile(
        "macOS", "Macintosh; Intel Mac OS X 10_15_7", "14.5.0", "x86", "64",
    ),
    OperatingSystem.MAC_APPLE_SILICON: OSProfile(
        "macOS", "Macintosh; ARM Mac OS X 10_15_7", "14.5.0", "arm", "64",
    ),
    OperatingSystem.LINUX: OSProfile(
        "Linux", "X11; Linux x86_64", "", "x86", "64",
    ),
    OperatingSystem.UBUNTU: OSProfile(
        "Linux", "X11; Ubuntu; Linux x86_64", "", "x86", "64",
    ),
    OperatingSystem.FEDORA: OSProfile(
        "Linux", "X11; Fedora; Linux x86_64", "", "x86", "64",
    ),
    OperatingSystem.ANDROID: OSProfile(
        "Android", "Linux; Android 14; {device_model}", "14.0.0", "arm", "64",
        mobile=True,
    ),
    OperatingSystem.IOS: OSProfile(
        "iOS", "iPhone; CPU iPhone OS 17_5_1 like Mac OS X", "17.5.1",
        mobile=True,
    ),
    OperatingSystem.CHROMEOS: OSProfile(
        "Chrome OS", "X11; CrOS x86_64 14541.0.0", "14541.0.0", "x86", "64",
    ),
})


# ---------------------------------------------------------------------------
# Platforms: the UA step order is part of the identity and is never resorted
# ---------------------------------------------------------------------------

PLATFORMS: Mapping[Platform, PlatformProfile] = MappingProxyType({
    Platform.DESKTOP: PlatformProfile("?0", MappingProxyType({
        Family.CHROMIUM: (
            mozilla, os_token, webkit_token, khtml, chrome_token,
            safari_token, browser_suffix,
        ),
        Family.GECKO: (mozilla, firefox_os_token, gecko_trail, firefox_token),
        Family.WEBKIT: (
            mozilla, os_token, safari_webkit_token, khtml,
            safari_version_token, safari_browser_token,
        ),
    })),
    Platform.MOBILE: PlatformProfile("?1", MappingProxyType({
        Family.CHROMIUM: (
            mozilla, os_token, webkit_token, khtml, chrome_token,
            mobile_safari_token, browser_suffix,
        ),
        Family.GECKO: (mozilla, firefox_os_token, gecko_trail, firefox_token),
        Family.WEBKIT: (
            mozilla, os_token, safari_webkit_token, khtml,
            safari_version_token, safari_mobile_token, safari_browser_token,
        ),
    })),
})


# ---------------------------------------------------------------------------
# Header value pools
# ---------------------------------------------------------------------------

GREASE_BRANDS = (
    ("Not/A)Brand", "8"),
    ("Not;A Brand", "99"),
    ("Not(A:Brand", "24"),
    ("Not_A Brand", "8"),
    ("Not?A_Brand", "99"),
    ("Not:A-Brand", "24"),
)

SUBRESOURCE_DESTS = ("style", "script", "image", "font", "empty")

DEFAULT_LANGUAGES = (
    "en-US,en;q=0.9",
    "de-DE,de;q=0.9",
    "fa-IR,fa;q=0.9",
    "fr-FR,fr;q=0.9",
    "es-ES,es;q=0.9",
    "ja-JP,ja;q=0.9",
    "ko-KR,ko;q=0.9",
    "pt-BR,pt;q=0.9",
    "ru-RU,ru;q=0.9",
    "tr-TR,tr;q=0.9",
    "it-IT,it;q=0.9",
    "pl-PL,pl;q=0.9",
    "nl-NL,nl;q=0.9",
    "sv-SE,sv;q=0.9",
    "ar-EG,ar;q=0.9",
    "cs-CZ,cs;q=0.9",
)
