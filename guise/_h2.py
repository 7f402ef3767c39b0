"""HTTP/2 SETTINGS tables per rendering family, with optional jitter."""

import random
from enum import IntEnum

import rnet

from guise._options import H2Jitter

_UINT32_MAX = 2**32 - 1


class H2Setting(IntEnum):
    """SETTINGS identifiers (RFC 9113 section 6.5.2)."""

    HEADER_TABLE_SIZE = 0x1
    ENABLE_PUSH = 0x2
    MAX_CONCURRENT_STREAMS = 0x3
    INITIAL_WINDOW_SIZE = 0x4
    MAX_FRAME_SIZE = 0x5
    MAX_HEADER_LIST_SIZE = 0x6


def chromium_settings() -> dict[H2Setting, int]:
    return {
        H2Setting.HEADER_TABLE_SIZE: 65536,
        H2Setting.MAX_CONCURRENT_STREAMS: 1000,
        H2Setting.INITIAL_WINDOW_SIZE: 6291456,
        H2Setting.MAX_HEADER_LIST_SIZE: 262144,
    }


def gecko_settings() -> dict[H2Setting, int]:
    return {
        H2Setting.HEADER_TABLE_SIZE: 65536,
        H2Setting.MAX_CONCURRENT_STREAMS: 1000,
        H2Setting.INITIAL_WINDOW_SIZE: 131072,
        H2Setting.MAX_HEADER_LIST_SIZE: 262144,
    }


def webkit_settings() -> dict[H2Setting, int]:
    return {
        H2Setting.HEADER_TABLE_SIZE: 4096,
        H2Setting.MAX_CONCURRENT_STREAMS: 100,
        H2Setting.INITIAL_WINDOW_SIZE: 2097152,
        H2Setting.MAX_HEADER_LIST_SIZE: 16384,
    }


def jitter_value(base: int, fraction: float) -> int:
    """Draw uniformly from [base - base*fraction, base + base*fraction].

    Zero stays zero. The lower bound never drops below 1.
    """
    if base == 0:
        return 0
    delta = int(base * fraction)
    low = base - delta if base > delta else 1
    return random.randint(low, base + delta)


def jitter_settings(
    settings: dict[H2Setting, int], level: H2Jitter
) -> dict[H2Setting, int]:
    """Return a perturbed copy of ``settings``. The input is not modified."""
    if level is H2Jitter.NONE:
        return dict(settings)

    if level is H2Jitter.MODERATE:
        result = dict(settings)
        for setting, fraction in (
            (H2Setting.HEADER_TABLE_SIZE, 0.10),
            (H2Setting.INITIAL_WINDOW_SIZE, 0.15),
            (H2Setting.MAX_HEADER_LIST_SIZE, 0.10),
        ):
            if setting in result:
                result[setting] = jitter_value(result[setting], fraction)
        return result

    if level is H2Jitter.MAXIMUM:
        return {
            H2Setting.HEADER_TABLE_SIZE: jitter_value(4096, 0.20),
            H2Setting.ENABLE_PUSH: 0,
            H2Setting.INITIAL_WINDOW_SIZE: jitter_value(65535, 0.20),
            H2Setting.MAX_FRAME_SIZE: jitter_value(16384, 0.20),
            H2Setting.MAX_CONCURRENT_STREAMS: (
                _UINT32_MAX - random.randint(0, 1023)
            ),
        }

    raise ValueError(f"Unknown H2 jitter level: {level!r}")


# ---------------------------------------------------------------------------
# rnet conversion
# ---------------------------------------------------------------------------

_RNET_KWARGS = {
    H2Setting.HEADER_TABLE_SIZE: "header_table_size",
    H2Setting.ENABLE_PUSH: "enable_push",
    H2Setting.MAX_CONCURRENT_STREAMS: "max_concurrent_streams",
    H2Setting.INITIAL_WINDOW_SIZE: "initial_window_size",
    H2Setting.MAX_FRAME_SIZE: "max_frame_size",
    H2Setting.MAX_HEADER_LIST_SIZE: "max_header_list_size",
}


def http2_options(settings: dict[H2Setting, int]) -> rnet.Http2Options:
    """Convert a SETTINGS table to rnet Http2Options.

    SETTINGS are emitted in ascending identifier order.
    """
    kwargs = {}
    order = []
    for setting in sorted(settings):
        value = settings[setting]
        if setting is H2Setting.ENABLE_PUSH:
            value = bool(value)
        kwargs[_RNET_KWARGS[setting]] = value
        order.append(getattr(rnet.SettingId, setting.name))
    return rnet.Http2Options(
        settings_order=rnet.SettingsOrder(*order),
        **kwargs,
    )
