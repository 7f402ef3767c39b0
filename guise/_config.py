"""Generator configuration."""

from collections.abc import Callable
from dataclasses import dataclass, field, fields, replace
from enum import Enum

from guise._options import (
    Browser,
    FingerprintProfile,
    H2Jitter,
    HeaderOrder,
    OperatingSystem,
    Platform,
    RequestType,
)
from guise._profiles import DEFAULT_LANGUAGES


def _coerce_many(enum_cls: type[Enum], values, name: str) -> tuple:
    if isinstance(values, str):
        values = (values,)
    try:
        return tuple(enum_cls(v) for v in values)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValueError(
            f"Invalid {name}: {list(values)!r} (allowed: {allowed})"
        ) from None


def _set(config, name, value):
    object.__setattr__(config, name, value)


def _coerce_one(enum_cls: type[Enum], value, name: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValueError(f"Invalid {name}: {value!r} (allowed: {allowed})") from None


@dataclass(frozen=True)
class GeneratorConfig:
    """Immutable, validated generator options.

    String values are coerced to the option enums. Invalid values raise
    ValueError on construction.

    Attributes:
        browsers: Browsers to impersonate; "any" means all of them.
        platforms: "desktop" / "mobile" / "any".
        os: Operating systems; "mac" covers both Mac architectures.
        min_version: Inclusive lower bound on the browser major version.
        max_version: Inclusive upper bound on the browser major version.
        languages: Accept-Language profiles, e.g. "en-US,en;q=0.9".
        request_type: "navigate", "subresource" or "xhr".
        header_order: A HeaderOrder strategy or a ``list[str] -> list[str]``
            callable.
        full_fingerprint: Also emit high-entropy client hints.
        h2_only: Only HTTP/2-capable versions; attach an H2 SETTINGS table.
        fingerprint: "normal", "maximum" or "extreme".
        h2_jitter: "none", "moderate" or "maximum".
        bot_mode: Replay crawler profiles instead of browsers.
        bot_categories: Restrict bot mode to these categories (empty = all).
        accept: Emit an Accept header.
        accept_encoding: Emit an Accept-Encoding header.
        pool_size: Maximum number of released agents kept for reuse.
    """

    browsers: tuple[Browser, ...] = (Browser.ANY,)
    platforms: tuple[Platform, ...] = (Platform.ANY,)
    os: tuple[OperatingSystem, ...] = (OperatingSystem.ANY,)
    min_version: int | None = None
    max_version: int | None = None
    languages: tuple[str, ...] = DEFAULT_LANGUAGES
    request_type: RequestType = RequestType.NAVIGATE
    header_order: HeaderOrder | Callable[[list[str]], list[str]] = HeaderOrder.PRIORITY
    full_fingerprint: bool = False
    h2_only: bool = True
    fingerprint: FingerprintProfile = FingerprintProfile.NORMAL
    h2_jitter: H2Jitter = H2Jitter.NONE
    bot_mode: bool = False
    bot_categories: tuple[str, ...] = field(default=())
    accept: bool = True
    accept_encoding: bool = False
    pool_size: int = 64

    def __post_init__(self) -> None:
        """Coerce and validate configuration values."""
        _set(self, "browsers", _coerce_many(Browser, self.browsers, "browsers"))
        _set(self, "platforms", _coerce_many(Platform, self.platforms, "platforms"))
        _set(self, "os", _coerce_many(OperatingSystem, self.os, "os"))
        _set(self, "request_type", _coerce_one(RequestType, self.request_type, "request_type"))
        _set(self, "fingerprint", _coerce_one(FingerprintProfile, self.fingerprint, "fingerprint"))
        _set(self, "h2_jitter", _coerce_one(H2Jitter, self.h2_jitter, "h2_jitter"))
        if not callable(self.header_order):
            _set(self, "header_order", _coerce_one(HeaderOrder, self.header_order, "header_order"))

        if isinstance(self.languages, str):
            _set(self, "languages", (self.languages,))
        else:
            _set(self, "languages", tuple(self.languages))
        if not self.languages:
            raise ValueError("languages must not be empty")

        if isinstance(self.bot_categories, str):
            _set(self, "bot_categories", (self.bot_categories,))
        else:
            _set(self, "bot_categories", tuple(self.bot_categories))

        for name in ("min_version", "max_version"):
            value = getattr(self, name)
            if value is not None and (not isinstance(value, int) or value < 0):
                raise ValueError(f"{name} must be a non-negative int or None")
        if (
            self.min_version is not None
            and self.max_version is not None
            and self.min_version > self.max_version
        ):
            raise ValueError(
                f"min_version ({self.min_version}) must be <= "
                f"max_version ({self.max_version})"
            )
        if self.pool_size < 0:
            raise ValueError("pool_size must be >= 0")

    def with_options(self, **overrides) -> "GeneratorConfig":
        """Copy with ``overrides`` applied (re-validated)."""
        unknown = set(overrides) - {f.name for f in fields(self)}
        if unknown:
            raise TypeError(f"Unknown generator options: {sorted(unknown)}")
        return replace(self, **overrides)
