"""
Pytest configuration and shared fixtures for the map semantics probe tests.

Registers markers, tags tests by directory, and provides probes and
sample data for unit, property, and integration tests.
"""

import logging

import pytest

from map_probe.config import GO_PROFILE, PYTHON_PROFILE, ProbeSettings
from map_probe.config.environment import ENV_LOG_LEVEL, ENV_PASSES, ENV_PROFILE, ENV_SEED
from map_probe.services.probe_service import MapSemanticsProbe, create_probe
from map_probe.utilities.constants import DEFAULT_DUPLICATE_PAIRS, DEFAULT_ROSTER


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line("markers", "integration: mark test as end-to-end test through the CLI")
    config.addinivalue_line("markers", "property: mark test as Hypothesis property test")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test location."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "integration" in path:
            item.add_marker(pytest.mark.integration)
        elif "property" in path:
            item.add_marker(pytest.mark.property)


# Environment isolation
@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove MAP_PROBE_* variables so tests see default settings."""
    for name in (ENV_PROFILE, ENV_PASSES, ENV_SEED, ENV_LOG_LEVEL):
        monkeypatch.delenv(name, raising=False)
    yield
    # main() installs a stderr handler bound to this test's captured stream
    package_logger = logging.getLogger("map_probe")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


# Settings and probe fixtures
@pytest.fixture
def python_settings() -> ProbeSettings:
    """Settings for the insertion-ordered, explicit-signal profile."""
    return ProbeSettings(profile=PYTHON_PROFILE, seed=7)


@pytest.fixture
def go_settings() -> ProbeSettings:
    """Settings for the zero-value, randomized-order profile."""
    return ProbeSettings(profile=GO_PROFILE, seed=7)


@pytest.fixture
def python_probe(python_settings) -> MapSemanticsProbe:
    return create_probe(python_settings)


@pytest.fixture
def go_probe(go_settings) -> MapSemanticsProbe:
    return create_probe(go_settings)


# Sample data fixtures
@pytest.fixture
def roster_pairs() -> list[tuple[str, str]]:
    """Distinct-key sample pairs."""
    return list(DEFAULT_ROSTER)


@pytest.fixture
def green_lantern_pairs() -> list[tuple[str, str]]:
    """Two pairs sharing the key 'Green Lantern'."""
    return list(DEFAULT_DUPLICATE_PAIRS)
