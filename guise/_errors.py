"""Typed exceptions for guise."""


class GuiseError(Exception):
    """Base exception for all guise errors."""


class NoBrowserConfigured(GuiseError):
    """The configuration names no browser to generate."""

    def __init__(self):
        super().__init__("No browsers configured for generation")


class NoCompatiblePlatform(GuiseError):
    """No platform/OS combination is compatible with the chosen browser."""

    def __init__(self, browser: str, platforms=(), oses=()):
        self.browser = browser
        self.platforms = tuple(platforms)
        self.oses = tuple(oses)
        super().__init__(
            f"No compatible platform/OS combination for {browser} "
            f"(platforms={list(self.platforms)}, os={list(self.oses)})"
        )


class NoEligibleVersion(GuiseError):
    """No browser version satisfies the version range / HTTP/2 filters."""

    def __init__(
        self,
        browser: str,
        min_version: int | None = None,
        max_version: int | None = None,
        h2_only: bool = False,
    ):
        self.browser = browser
        self.min_version = min_version
        self.max_version = max_version
        self.h2_only = h2_only
        super().__init__(
            f"No available {browser} versions in range "
            f"[{min_version}, {max_version}] (h2_only={h2_only})"
        )


class NoBotProfile(GuiseError):
    """No bot profile matches the requested categories."""

    def __init__(self, categories=()):
        self.categories = tuple(categories)
        super().__init__(
            f"No bot profiles found for categories: {list(self.categories)}"
        )


class UserAgentParseError(GuiseError, ValueError):
    """A user-agent string could not be mapped to a known profile."""

    def __init__(self, user_agent: str, message: str):
        self.user_agent = user_agent
        super().__init__(message)


class UnsupportedBrowser(UserAgentParseError):
    """No known browser token found in the user-agent."""

    def __init__(self, user_agent: str):
        super().__init__(
            user_agent, f"Unsupported browser in user-agent: {user_agent!r}"
        )


class UnsupportedOS(UserAgentParseError):
    """No known operating-system token found in the user-agent."""

    def __init__(self, user_agent: str):
        super().__init__(
            user_agent, f"Unsupported OS in user-agent: {user_agent!r}"
        )


class UnsupportedVersion(UserAgentParseError):
    """The browser version is older than every known profile."""

    def __init__(self, browser: str, version: int, user_agent: str = ""):
        self.browser = browser
        self.version = version
        super().__init__(
            user_agent,
            f"No profile for {browser} {version}: older than all known versions",
        )
