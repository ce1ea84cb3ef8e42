#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Pytest configuration and shared fixtures for the mdtree test suite."""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from mdtree import events as ev

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def paragraph_events():
    """Factory wrapping leaf events in a paragraph."""

    def make(*inner: ev.Event) -> list[ev.Event]:
        return ev.wrap(ev.ParagraphTag(), inner)

    return make
