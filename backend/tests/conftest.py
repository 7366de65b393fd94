"""Shared test configuration, pytest markers and fixtures."""

import pytest

from services.validation.cache import ValidationCache
from services.validation.validator import ResumeMatchValidator


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "concurrency: spawns threads (cache locking, audit worker)"
    )


class FakeClock:
    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def validator(clock):
    return ResumeMatchValidator(cache=ValidationCache(ttl_seconds=3600, clock=clock))


SCENARIO_A_JD = "Requirements: React, Node.js, TypeScript, AWS, PostgreSQL"
SCENARIO_A_RESUME = "React, Node.js, PostgreSQL"


@pytest.fixture
def scenario_a():
    return SCENARIO_A_RESUME, SCENARIO_A_JD
