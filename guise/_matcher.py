"""Closest-version-not-exceeding lookup over versioned profile tables."""

from collections.abc import Mapping
from typing import TypeVar

from guise._errors import UnsupportedVersion

T = TypeVar("T")


def closest_version(
    table: Mapping[int, T],
    target: int,
    strict: bool = False,
    browser: str = "",
) -> tuple[int, T]:
    """Return ``(version, profile)`` for the largest key <= target.

    When every key is newer than ``target`` the oldest entry is returned,
    unless ``strict`` is set, in which case UnsupportedVersion is raised.
    Generation is lenient; user-agent parsing is strict.
    """
    if not table:
        raise ValueError("closest_version() needs a non-empty table")

    best = None
    for version in table:
        if version <= target and (best is None or version > best):
            best = version

    if best is None:
        if strict:
            raise UnsupportedVersion(browser, target)
        best = min(table)

    return best, table[best]
