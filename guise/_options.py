"""Option enums: browsers, platforms, operating systems and randomization levels."""

from enum import Enum


class Browser(str, Enum):
    """Browsers a generator may impersonate. ANY expands to all of them."""

    ANY = "any"
    CHROME = "chrome"
    OPERA = "opera"
    EDGE = "edge"
    BRAVE = "brave"
    FIREFOX = "firefox"
    SAFARI = "safari"


class Platform(str, Enum):
    ANY = "any"
    DESKTOP = "desktop"
    MOBILE = "mobile"


class OperatingSystem(str, Enum):
    """Operating systems.

    MAC is a generic token that resolves to MAC_INTEL or MAC_APPLE_SILICON.
    """

    ANY = "any"
    WINDOWS = "windows"
    WINDOWS11 = "windows11"
    LINUX = "linux"
    MAC = "mac"
    ANDROID = "android"
    IOS = "ios"
    CHROMEOS = "chromeos"
    MAC_INTEL = "mac_intel"
    MAC_APPLE_SILICON = "mac_apple_silicon"
    UBUNTU = "ubuntu"
    FEDORA = "fedora"


class RequestType(str, Enum):
    """Kind of request the identity is used for (drives Accept and Sec-Fetch-*)."""

    NAVIGATE = "navigate"
    SUBRESOURCE = "subresource"
    XHR = "xhr"


class FingerprintProfile(str, Enum):
    """TLS / header randomization level.

    NORMAL uses the static TLS emulation of the chosen version. MAXIMUM
    synthesizes a shuffled ClientHello and shuffles header priority groups.
    EXTREME keeps the static emulation and the configured header order but
    drops client-hint headers at random.
    """

    NORMAL = "normal"
    MAXIMUM = "maximum"
    EXTREME = "extreme"


class H2Jitter(str, Enum):
    NONE = "none"
    MODERATE = "moderate"
    MAXIMUM = "maximum"


class HeaderOrder(str, Enum):
    PRIORITY = "priority"
    SHUFFLED_PRIORITY = "shuffled_priority"
    RANDOM = "random"


ALL_BROWSERS = (
    Browser.CHROME,
    Browser.OPERA,
    Browser.EDGE,
    Browser.BRAVE,
    Browser.FIREFOX,
    Browser.SAFARI,
)

ALL_PLATFORMS = (Platform.DESKTOP, Platform.MOBILE)

ALL_OSES = (
    OperatingSystem.WINDOWS,
    OperatingSystem.WINDOWS11,
    OperatingSystem.LINUX,
    OperatingSystem.MAC,
    OperatingSystem.ANDROID,
    OperatingSystem.IOS,
    OperatingSystem.CHROMEOS,
    OperatingSystem.UBUNTU,
    OperatingSystem.FEDORA,
)

MAC_ARCHITECTURES = (
    OperatingSystem.MAC_INTEL,
    OperatingSystem.MAC_APPLE_SILICON,
)
