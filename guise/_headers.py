"""Header assembly: Accept negotiation, client hints and fetch metadata.

Two flavours share the same building blocks:

- ``build_headers``: randomized, for forward generation.
- ``build_static_headers``: deterministic, for agents rebuilt from an
  observed user-agent string.
"""

import random

from guise._options import Browser, FingerprintProfile, RequestType
from guise._profiles import GREASE_BRANDS, SUBRESOURCE_DESTS, parse_accept

# ---------------------------------------------------------------------------
# Accept / Accept-Language
# ---------------------------------------------------------------------------

def _entry(part) -> str:
    return part.value + "".join(f";{extra}" for extra in part.extras)


def build_accept(parts) -> str:
    """Join parts, giving weighted parts a randomly descending q value.

    Starts at 1.0 and drops by 0.1 or 0.2 per weighted part, never below 0.1.
    """
    q = 1.0
    entries = []
    for part in parts:
        entry = _entry(part)
        if part.q:
            q = max(round(q - random.randint(1, 2) / 10, 1), 0.1)
            entry += f";q={q:.1f}"
        entries.append(entry)
    return ",".join(entries)


def static_accept(parts) -> str:
    """Join parts using the q values of the template as-is."""
    entries = []
    for part in parts:
        entry = _entry(part)
        if part.q:
            entry += f";q={part.q:.1f}"
        entries.append(entry)
    return ",".join(entries)


def accept_language(language: str) -> str:
    return build_accept(parse_accept(language))


def accept_encoding() -> str:
    encodings = ["gzip", "deflate", "br"]
    random.shuffle(encodings)
    if random.random() < 0.5:
        encodings.append("zstd")
    return ", ".join(encodings)


# ---------------------------------------------------------------------------
# Client hints
# ---------------------------------------------------------------------------

_GREASY_CHARS = [" ", "(", ":", "-", ".", "/", ")", ";", "=", "?", "_"]
_GREASED_VERSIONS = ["8", "99", "24"]
_BRAND_ORDER = [
    [0, 1, 2],
    [0, 2, 1],
    [1, 0, 2],
    [1, 2, 0],
    [2, 0, 1],
    [2, 1, 0],
]


def render_brands(brands) -> str:
    return ", ".join(f'"{b}";v="{v}"' for b, v in brands)


def random_brands(brand: str, major: int) -> list[tuple[str, str]]:
    """Chromium, the real brand and one GREASE decoy from the pool, shuffled."""
    brands = [
        ("Chromium", str(major)),
        (brand, str(major)),
        random.choice(GREASE_BRANDS),
    ]
    random.shuffle(brands)
    return brands


def seeded_brands(brand: str, major: int) -> list[tuple[str, str]]:
    """Brand list as Chrome derives it: GREASE name, version and order all
    follow from the major version.
    """
    seed = major
    char1 = _GREASY_CHARS[seed % 11]
    char2 = _GREASY_CHARS[(seed + 1) % 11]

    brands = [
        (f"Not{char1}A{char2}Brand", _GREASED_VERSIONS[seed % 3]),
        ("Chromium", str(major)),
        (brand, str(major)),
    ]

    order = _BRAND_ORDER[seed % 6]
    shuffled: list[tuple[str, str]] = [("", "")] * 3
    for i in range(3):
        shuffled[order[i]] = brands[i]
    return shuffled


def full_version_list(brands, full_version: str) -> list[tuple[str, str]]:
    """Same order as ``brands``; real brands get the full version and the
    GREASE decoy gets ``<v>.0.0.0``.
    """
    return [
        (name, f"{version}.0.0.0" if name.startswith("Not") else full_version)
        for name, version in brands
    ]


def client_hints(res, brands, full_fingerprint: bool) -> dict[str, str]:
    os = res.os_profile
    hints = {
        "sec-ch-ua": render_brands(brands),
        "sec-ch-ua-mobile": res.platform_profile.mobile_hint,
        "sec-ch-ua-platform": f'"{os.name}"',
    }
    if full_fingerprint:
        hints["sec-ch-ua-full-version-list"] = render_brands(
            full_version_list(brands, res.full_version)
        )
        if os.version:
            hints["sec-ch-ua-platform-version"] = f'"{os.version}"'
        if os.arch:
            hints["sec-ch-ua-arch"] = f'"{os.arch}"'
        if os.bitness:
            hints["sec-ch-ua-bitness"] = f'"{os.bitness}"'
    return hints


# ---------------------------------------------------------------------------
# Fetch metadata
# ---------------------------------------------------------------------------

def fetch_metadata(request_type: RequestType) -> dict[str, str]:
    if request_type is RequestType.NAVIGATE:
        return {
            "sec-fetch-dest": "document",
            "sec-fetch-mode": "navigate",
            "sec-fetch-site": "none",
            "sec-fetch-user": "?1",
            "upgrade-insecure-requests": "1",
        }
    if request_type is RequestType.SUBRESOURCE:
        return {
            "sec-fetch-dest": random.choice(SUBRESOURCE_DESTS),
            "sec-fetch-mode": "no-cors",
            "sec-fetch-site": "same-origin",
        }
    return {
        "sec-fetch-dest": "empty",
        "sec-fetch-mode": "cors",
        "sec-fetch-site": "same-origin",
    }


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------

def _accept_templates(version, request_type: RequestType):
    if request_type is RequestType.XHR:
        return version.accept_xhr
    return version.accept


def build_headers(res, user_agent: str, config, language: str) -> dict[str, str]:
    """Randomized header map for a resolved identity.

    ``config`` supplies the request type, the accept / accept-encoding
    toggles, the full-fingerprint flag and the fingerprint profile.
    """
    headers = {"user-agent": user_agent}

    if config.accept:
        templates = _accept_templates(res.version, config.request_type)
        headers["accept"] = build_accept(random.choice(templates))
    headers["accept-language"] = accept_language(language)
    if config.accept_encoding:
        headers["accept-encoding"] = accept_encoding()

    if res.browser_profile.chromium_based:
        brands = random_brands(res.browser_profile.brand, res.major)
        hints = client_hints(res, brands, config.full_fingerprint)
        if config.fingerprint is FingerprintProfile.EXTREME:
            hints = {k: v for k, v in hints.items() if random.random() >= 0.5}
        headers.update(hints)

    if res.browser is Browser.BRAVE and config.request_type is RequestType.NAVIGATE:
        headers["sec-gpc"] = "1"

    headers.update(fetch_metadata(config.request_type))
    return headers


def build_static_headers(res, user_agent: str, request_type: RequestType) -> dict[str, str]:
    """Deterministic header map: first template, fixed q values, seeded brands."""
    templates = _accept_templates(res.version, request_type)
    headers = {
        "user-agent": user_agent,
        "accept": static_accept(templates[0]),
        "accept-encoding": "gzip, deflate, br",
        "accept-language": "en-US,en;q=0.9",
    }

    if res.browser_profile.chromium_based:
        brands = seeded_brands(res.browser_profile.brand, res.major)
        headers.update(client_hints(res, brands, full_fingerprint=True))

    if request_type is not RequestType.SUBRESOURCE:
        headers.update(fetch_metadata(request_type))
    return headers
