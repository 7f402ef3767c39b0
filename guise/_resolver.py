"""Resolve configured constraints to one concrete browser / platform / OS / version."""

import random
from dataclasses import dataclass

from guise._errors import NoBrowserConfigured, NoCompatiblePlatform, NoEligibleVersion
from guise._options import (
    ALL_BROWSERS,
    ALL_OSES,
    ALL_PLATFORMS,
    MAC_ARCHITECTURES,
    Browser,
    OperatingSystem,
    Platform,
)
from guise._profiles import (
    BROWSERS,
    OSES,
    PLATFORMS,
    BrowserProfile,
    OSProfile,
    PlatformProfile,
    VersionProfile,
)


@dataclass(frozen=True)
class Resolution:
    """Everything the compositor and header assembler need for one identity."""

    browser: Browser
    browser_profile: BrowserProfile
    platform: Platform
    platform_profile: PlatformProfile
    os: OperatingSystem
    os_profile: OSProfile
    major: int
    version: VersionProfile
    full_version: str = ""


# ---------------------------------------------------------------------------
# Browser
# ---------------------------------------------------------------------------

def resolve_browser(browsers) -> Browser:
    if not browsers:
        raise NoBrowserConfigured()
    candidates = ALL_BROWSERS if Browser.ANY in browsers else tuple(browsers)
    return random.choice(candidates)


# ---------------------------------------------------------------------------
# Platform / OS
# ---------------------------------------------------------------------------

_APPLE = (OperatingSystem.IOS, *MAC_ARCHITECTURES)


def is_compatible(browser: Browser, platform: Platform, os: OperatingSystem) -> bool:
    """Browser / OS rules: Safari only on iOS mobile or macOS desktop,
    Firefox only on Android mobile or non-Apple desktop.
    """
    if browser is Browser.SAFARI:
        if platform is Platform.MOBILE:
            return os is OperatingSystem.IOS
        return os in MAC_ARCHITECTURES
    if browser is Browser.FIREFOX:
        if platform is Platform.MOBILE:
            return os is OperatingSystem.ANDROID
        return os not in _APPLE
    return True


def _expand_oses(oses) -> list[OperatingSystem]:
    if OperatingSystem.ANY in oses:
        oses = ALL_OSES
    expanded = []
    for os in oses:
        if os is OperatingSystem.MAC:
            expanded.extend(MAC_ARCHITECTURES)
        else:
            expanded.append(os)
    return expanded


def compatible_pairs(browser: Browser, platforms, oses) -> list[tuple[Platform, OperatingSystem]]:
    if Platform.ANY in platforms:
        platforms = ALL_PLATFORMS
    pairs = []
    for platform in platforms:
        for os in _expand_oses(oses):
            profile = OSES.get(os)
            if profile is None:
                continue
            if profile.mobile != (platform is Platform.MOBILE):
                continue
            if not is_compatible(browser, platform, os):
                continue
            pairs.append((platform, os))
    return pairs


def resolve_platform_and_os(browser: Browser, platforms, oses) -> tuple[Platform, OperatingSystem]:
    pairs = compatible_pairs(browser, platforms, oses)
    if not pairs:
        raise NoCompatiblePlatform(browser, tuple(platforms), tuple(oses))
    return random.choice(pairs)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

def eligible_versions(profile: BrowserProfile, min_version=None, max_version=None, h2_only=False) -> list[int]:
    versions = []
    for major, version in profile.versions.items():
        if min_version is not None and major < min_version:
            continue
        if max_version is not None and major > max_version:
            continue
        if h2_only and not version.supports_h2:
            continue
        versions.append(major)
    return versions


def resolve_version(browser: Browser, min_version=None, max_version=None, h2_only=False) -> tuple[int, VersionProfile]:
    profile = BROWSERS[browser]
    versions = eligible_versions(profile, min_version, max_version, h2_only)
    if not versions:
        raise NoEligibleVersion(browser, min_version, max_version, h2_only)
    major = random.choice(versions)
    return major, profile.versions[major]


def full_version(profile: BrowserProfile, major: int, version: VersionProfile, patch=None) -> str:
    """``major.0.build.patch`` for Chromium-derived browsers, else empty.

    ``patch`` defaults to a uniform draw from 0..998.
    """
    if not profile.chromium_based:
        return ""
    if patch is None:
        patch = random.randint(0, 998)
    return f"{major}.0.{version.build}.{patch}"


def resolve(config) -> Resolution:
    """Run every resolution step for ``config``."""
    browser = resolve_browser(config.browsers)
    platform, os = resolve_platform_and_os(browser, config.platforms, config.os)
    major, version = resolve_version(
        browser, config.min_version, config.max_version, config.h2_only
    )
    profile = BROWSERS[browser]
    return Resolution(
        browser=browser,
        browser_profile=profile,
        platform=platform,
        platform_profile=PLATFORMS[platform],
        os=os,
        os_profile=OSES[os],
        major=major,
        version=version,
        full_version=full_version(profile, major, version),
    )
