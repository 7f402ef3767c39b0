"""Shared fixtures and helpers for guise tests."""

import random
import re

import pytest

from guise import Generator
from guise._ordering import PSEUDO_HEADERS

Q_VALUE = re.compile(r";q=(\d\.\d)")


@pytest.fixture(autouse=True)
def seeded_random():
    """Deterministic randomness per test; global state restored afterwards."""
    state = random.getstate()
    random.seed(20240607)
    yield
    random.setstate(state)


def sample(n: int = 40, **options):
    """Generate ``n`` agents from a fresh Generator built with ``options``."""
    gen = Generator(**options)
    return [gen.generate() for _ in range(n)]


def q_values(header: str) -> list[float]:
    return [float(q) for q in Q_VALUE.findall(header)]


def assert_well_formed(agent):
    """Structural properties every generated agent has."""
    assert agent.user_agent
    assert agent.headers["user-agent"] == agent.user_agent
    assert tuple(agent.header_order[:4]) == PSEUDO_HEADERS
    assert sorted(agent.header_order[4:]) == sorted(agent.headers)
    assert (agent.tls_identity is None) != (agent.tls_spec is None)
