"""
Input validation utilities.

This module provides validation and parsing helpers for probe inputs,
raising the probe's own error types so callers can report stable codes.
"""

import argparse

from .constants import MIN_PASSES, InvalidPassCount


def validate_pass_count(passes: int) -> None:
    """Validate that enough traversals are requested to compare."""
    if isinstance(passes, bool) or not isinstance(passes, int):
        raise InvalidPassCount(f"passes must be an integer, got {passes!r}")
    if passes < MIN_PASSES:
        raise InvalidPassCount(f"passes must be at least {MIN_PASSES}, got {passes}")


def parse_pair(text: str) -> tuple[str, str]:
    """
    Parse a ``KEY=VALUE`` command-line argument.

    Only the first ``=`` separates key from value, so values may contain
    further ``=`` characters.
    """
    key, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError(f"key cannot be empty in {text!r}")
    return key, value.strip()
