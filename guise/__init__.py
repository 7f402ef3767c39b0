"""guise -- Self-consistent synthetic HTTP client identities for rnet."""

import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("guise-py")
except PackageNotFoundError:
    __version__ = "0.0.0"

from guise._agent import Agent, AgentPool
from guise._bots import BOT_CATEGORIES, BotProfile
from guise._config import GeneratorConfig
from guise._errors import (
    GuiseError,
    NoBotProfile,
    NoBrowserConfigured,
    NoCompatiblePlatform,
    NoEligibleVersion,
    UnsupportedBrowser,
    UnsupportedOS,
    UnsupportedVersion,
    UserAgentParseError,
)
from guise._generator import Generator
from guise._h2 import H2Setting
from guise._options import (
    Browser,
    FingerprintProfile,
    H2Jitter,
    HeaderOrder,
    OperatingSystem,
    Platform,
    RequestType,
)
from guise._parser import from_user_agent
from guise._tls import ClientHelloSpec, TlsIdentity

__all__ = [
    "__version__",
    "Generator",
    "GeneratorConfig",
    "Agent",
    "AgentPool",
    "from_user_agent",
    "Browser",
    "Platform",
    "OperatingSystem",
    "RequestType",
    "FingerprintProfile",
    "H2Jitter",
    "HeaderOrder",
    "H2Setting",
    "TlsIdentity",
    "ClientHelloSpec",
    "BotProfile",
    "BOT_CATEGORIES",
    "GuiseError",
    "NoBrowserConfigured",
    "NoCompatiblePlatform",
    "NoEligibleVersion",
    "NoBotProfile",
    "UserAgentParseError",
    "UnsupportedBrowser",
    "UnsupportedOS",
    "UnsupportedVersion",
]

# Silent by default; callers opt in via logging.getLogger("guise").setLevel(...)
logging.getLogger("guise").addHandler(logging.NullHandler())
