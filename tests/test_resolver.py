"""Tests for constraint resolution."""

import re

import pytest

from guise import NoBrowserConfigured, NoCompatiblePlatform, NoEligibleVersion
from guise._options import ALL_BROWSERS, Browser, OperatingSystem, Platform
from guise._profiles import BROWSERS
from guise._resolver import (
    compatible_pairs,
    full_version,
    is_compatible,
    resolve_browser,
    resolve_platform_and_os,
    resolve_version,
)

ANY_PLATFORM = (Platform.ANY,)
ANY_OS = (OperatingSystem.ANY,)


class TestResolveBrowser:
    def test_empty(self):
        with pytest.raises(NoBrowserConfigured):
            resolve_browser(())

    def test_any_expands(self):
        seen = {resolve_browser((Browser.ANY,)) for _ in range(200)}
        assert seen == set(ALL_BROWSERS)

    def test_explicit(self):
        for _ in range(20):
            assert resolve_browser((Browser.EDGE, Browser.OPERA)) in (
                Browser.EDGE, Browser.OPERA,
            )


class TestCompatibility:
    def test_safari(self):
        assert is_compatible(Browser.SAFARI, Platform.MOBILE, OperatingSystem.IOS)
        assert is_compatible(Browser.SAFARI, Platform.DESKTOP, OperatingSystem.MAC_INTEL)
        assert not is_compatible(Browser.SAFARI, Platform.DESKTOP, OperatingSystem.WINDOWS)
        assert not is_compatible(Browser.SAFARI, Platform.MOBILE, OperatingSystem.ANDROID)

    def test_firefox(self):
        assert is_compatible(Browser.FIREFOX, Platform.MOBILE, OperatingSystem.ANDROID)
        assert is_compatible(Browser.FIREFOX, Platform.DESKTOP, OperatingSystem.LINUX)
        assert not is_compatible(Browser.FIREFOX, Platform.MOBILE, OperatingSystem.IOS)
        assert not is_compatible(
            Browser.FIREFOX, Platform.DESKTOP, OperatingSystem.MAC_APPLE_SILICON
        )

    def test_chrome_unconstrained(self):
        assert is_compatible(Browser.CHROME, Platform.MOBILE, OperatingSystem.IOS)

    def test_safari_pairs(self):
        assert sorted(compatible_pairs(Browser.SAFARI, ANY_PLATFORM, ANY_OS)) == sorted([
            (Platform.DESKTOP, OperatingSystem.MAC_INTEL),
            (Platform.DESKTOP, OperatingSystem.MAC_APPLE_SILICON),
            (Platform.MOBILE, OperatingSystem.IOS),
        ])

    def test_firefox_pairs_exclude_apple(self):
        pairs = compatible_pairs(Browser.FIREFOX, ANY_PLATFORM, ANY_OS)
        oses = {os for _, os in pairs}
        assert OperatingSystem.IOS not in oses
        assert OperatingSystem.MAC_INTEL not in oses
        assert (Platform.MOBILE, OperatingSystem.ANDROID) in pairs

    def test_mobility_mismatch_dropped(self):
        pairs = compatible_pairs(
            Browser.CHROME, (Platform.MOBILE,), (OperatingSystem.WINDOWS,)
        )
        assert pairs == []

    def test_mac_expands_to_architectures(self):
        pairs = compatible_pairs(
            Browser.CHROME, (Platform.DESKTOP,), (OperatingSystem.MAC,)
        )
        assert pairs == [
            (Platform.DESKTOP, OperatingSystem.MAC_INTEL),
            (Platform.DESKTOP, OperatingSystem.MAC_APPLE_SILICON),
        ]

    def test_no_compatible_platform(self):
        with pytest.raises(NoCompatiblePlatform) as exc_info:
            resolve_platform_and_os(
                Browser.SAFARI, (Platform.DESKTOP,), (OperatingSystem.WINDOWS,)
            )
        assert exc_info.value.browser is Browser.SAFARI


class TestResolveVersion:
    def test_range_inclusive(self):
        seen = {resolve_version(Browser.CHROME, 120, 130)[0] for _ in range(100)}
        assert seen == {120, 124, 128, 130}

    def test_profile_matches_version(self):
        major, profile = resolve_version(Browser.FIREFOX)
        assert profile is BROWSERS[Browser.FIREFOX].versions[major]

    def test_empty_range(self):
        with pytest.raises(NoEligibleVersion) as exc_info:
            resolve_version(Browser.SAFARI, 200, 300)
        assert exc_info.value.min_version == 200
        assert exc_info.value.max_version == 300


class TestFullVersion:
    def test_chromium_format(self):
        profile = BROWSERS[Browser.CHROME]
        value = full_version(profile, 120, profile.versions[120])
        assert re.fullmatch(r"120\.0\.6099\.\d{1,3}", value)
        assert int(value.rsplit(".", 1)[1]) <= 998

    def test_explicit_patch(self):
        profile = BROWSERS[Browser.EDGE]
        assert full_version(profile, 128, profile.versions[128], patch=0) == "128.0.2739.0"

    def test_non_chromium_empty(self):
        profile = BROWSERS[Browser.FIREFOX]
        assert full_version(profile, 128, profile.versions[128]) == ""
