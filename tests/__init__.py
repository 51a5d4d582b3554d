"""
Test package for the map semantics probe.

Provides unit, property-based, and end-to-end CLI tests.
"""

__all__ = [
    "conftest",  # Pytest configuration and fixtures
    "integration",  # End-to-end CLI tests
    "property",  # Hypothesis property tests
    "unit",  # Unit test suite
]
