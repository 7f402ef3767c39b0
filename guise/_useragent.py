"""User-agent composition from per-family fragment pipelines.

Every step takes ``(browser, os, version, major, full_version)`` and returns
one fragment (possibly empty). The pipelines themselves live on the
platform profiles in ``guise._profiles``.
"""

import random

ANDROID_DEVICES = (
    "Pixel 7",
    "Pixel 8 Pro",
    "SM-S928B",
    "SM-G991U",
    "SM-F936U",
    "2201116SG",
    "V2109",
    "SM-A525F",
    "Pixel 6a",
    "SM-A536U",
    "Galaxy S23 Ultra",
)


def platform_token(os) -> str:
    """OS token with ``{device_model}`` filled from the Android device list."""
    token = os.platform_token
    if "{device_model}" in token:
        token = token.replace("{device_model}", random.choice(ANDROID_DEVICES))
    return token


# ---------------------------------------------------------------------------
# Shared steps
# ---------------------------------------------------------------------------

def mozilla(browser, os, version, major, full_version) -> str:
    return "Mozilla/5.0"


def os_token(browser, os, version, major, full_version) -> str:
    return f"({platform_token(os)})"


def khtml(browser, os, version, major, full_version) -> str:
    return "(KHTML, like Gecko)"


# ---------------------------------------------------------------------------
# Chromium
# ---------------------------------------------------------------------------

def webkit_token(browser, os, version, major, full_version) -> str:
    return "AppleWebKit/537.36"


def chrome_token(browser, os, version, major, full_version) -> str:
    return f"Chrome/{full_version}"


def safari_token(browser, os, version, major, full_version) -> str:
    return "Safari/537.36"


def mobile_safari_token(browser, os, version, major, full_version) -> str:
    return "Mobile Safari/537.36"


def browser_suffix(browser, os, version, major, full_version) -> str:
    if not browser.ua_suffix:
        return ""
    return browser.ua_suffix.format(major=major)


# ---------------------------------------------------------------------------
# Gecko
# ---------------------------------------------------------------------------

def firefox_os_token(browser, os, version, major, full_version) -> str:
    return f"({platform_token(os)}; rv:{version.gecko_revision})"


def gecko_trail(browser, os, version, major, full_version) -> str:
    return "Gecko/20100101"


def firefox_token(browser, os, version, major, full_version) -> str:
    return f"Firefox/{version.gecko_revision}"


# ---------------------------------------------------------------------------
# WebKit
# ---------------------------------------------------------------------------

def safari_webkit_token(browser, os, version, major, full_version) -> str:
    return f"AppleWebKit/{version.webkit_version}"


def safari_version_token(browser, os, version, major, full_version) -> str:
    return f"Version/{version.safari_version}"


def safari_mobile_token(browser, os, version, major, full_version) -> str:
    return f"Mobile/{version.mobile_build}"


def safari_browser_token(browser, os, version, major, full_version) -> str:
    if os.mobile:
        return "Safari/604.1"
    return f"Safari/{version.webkit_version}"


def compose_user_agent(
    browser, platform, os, version, major: int, full_version: str = ""
) -> str:
    """Run the platform's pipeline for the browser's family.

    Empty fragments are dropped; the rest are joined with single spaces.
    """
    steps = platform.steps[browser.family]
    fragments = (step(browser, os, version, major, full_version) for step in steps)
    return " ".join(f for f in fragments if f)
