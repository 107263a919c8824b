"""
Pytest configuration and fixtures for process_plant testing.

This file sets up common fixtures, test configuration, and hooks for pytest.
"""

import pytest
from pathlib import Path

from process_plant.core.stream import StreamFactory
from process_plant.core.flowsheet import Flowsheet


def pytest_configure(config):
    """Configure pytest settings."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def stream_factory():
    """Fresh stream naming counter for each test."""
    return StreamFactory()


@pytest.fixture
def flowsheet():
    """Empty flowsheet."""
    return Flowsheet(name="test")


@pytest.fixture
def sample_config_path():
    """Path to the bundled mixer/reactor flowsheet configuration."""
    return Path(__file__).resolve().parent.parent / "configs" / "mixer_reactor.yaml"
