"""Rebuild a deterministic Agent from an observed user-agent string."""

import logging
import re
from types import MappingProxyType

from guise._agent import Agent
from guise._errors import UnsupportedBrowser, UnsupportedOS, UnsupportedVersion
from guise._h2 import chromium_settings
from guise._headers import build_static_headers
from guise._matcher import closest_version
from guise._options import Browser, OperatingSystem, Platform, RequestType
from guise._ordering import ordered_keys, priority_order
from guise._profiles import BROWSERS, OSES, PLATFORMS
from guise._resolver import Resolution
from guise._tls import TlsIdentity

logger = logging.getLogger("guise")

# First match wins: Chromium UAs also carry "Safari/", Edge and Opera
# also carry "Chrome/".
_BROWSER_PATTERNS = (
    (Browser.SAFARI, re.compile(r"Version/(\d+)\..*Safari/")),
    (Browser.EDGE, re.compile(r"Edg/(\d+)\.\d+")),
    (Browser.OPERA, re.compile(r"OPR/(\d+)\.\d+")),
    (Browser.BRAVE, re.compile(r"Brave/(\d+)\.\d+")),
    (Browser.CHROME, re.compile(r"Chrome/(\d+)\.\d+")),
    (Browser.FIREFOX, re.compile(r"Firefox/(\d+)\.\d+")),
)

_OS_TOKENS = (
    (("Windows NT 10.0",), OperatingSystem.WINDOWS11),
    (("iPhone", "iPad"), OperatingSystem.IOS),
    (("Macintosh",), OperatingSystem.MAC_INTEL),
    (("Linux",), OperatingSystem.LINUX),
    (("Android",), OperatingSystem.ANDROID),
    (("CrOS",), OperatingSystem.CHROMEOS),
)

_MOBILE_OSES = (OperatingSystem.ANDROID, OperatingSystem.IOS)

# Well-known, stable TLS identities used for parsed agents.
PARSER_EMULATIONS = MappingProxyType({
    120: TlsIdentity("Chrome120"),
    131: TlsIdentity("Chrome131"),
    133: TlsIdentity("Chrome133"),
})


def detect_browser(user_agent: str) -> tuple[Browser, int]:
    for browser, pattern in _BROWSER_PATTERNS:
        match = pattern.search(user_agent)
        if match:
            return browser, int(match.group(1))
    raise UnsupportedBrowser(user_agent)


def detect_os(user_agent: str) -> OperatingSystem:
    for tokens, os in _OS_TOKENS:
        if any(token in user_agent for token in tokens):
            return os
    raise UnsupportedOS(user_agent)


def from_user_agent(
    user_agent: str, request_type: RequestType | str = RequestType.NAVIGATE
) -> Agent:
    """Classify ``user_agent`` and rebuild a deterministic identity for it.

    Raises a UserAgentParseError subclass (UnsupportedBrowser,
    UnsupportedOS or UnsupportedVersion) when the string cannot be mapped
    to a known profile. The user-agent is kept verbatim.
    """
    request_type = RequestType(request_type)
    browser, major = detect_browser(user_agent)
    os = detect_os(user_agent)
    platform = Platform.MOBILE if os in _MOBILE_OSES else Platform.DESKTOP

    profile = BROWSERS[browser]
    try:
        _, version = closest_version(
            profile.versions, major, strict=True, browser=browser.value
        )
    except UnsupportedVersion:
        raise UnsupportedVersion(browser.value, major, user_agent) from None

    full_version = f"{major}.0.{version.build}.0" if profile.chromium_based else ""
    res = Resolution(
        browser=browser,
        browser_profile=profile,
        platform=platform,
        platform_profile=PLATFORMS[platform],
        os=os,
        os_profile=OSES[os],
        major=major,
        version=version,
        full_version=full_version,
    )
    logger.debug(
        "Parsed user-agent as %s %d on %s", browser.value, major, os.value
    )

    headers = build_static_headers(res, user_agent, request_type)
    _, tls = closest_version(PARSER_EMULATIONS, major)
    return Agent(
        user_agent=user_agent,
        headers=headers,
        header_order=ordered_keys(list(headers), priority_order),
        tls_identity=tls,
        h2_settings=chromium_settings(),
    )
