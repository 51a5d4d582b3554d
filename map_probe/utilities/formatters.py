"""
Formatting utilities for displaying probe outcomes.

This module provides consistent formatting functions used across the CLI
so every command prints the same stable tokens.
"""

from typing import Any

from .constants import (
    EMOJI_ERROR,
    EMOJI_SUCCESS,
    TOKEN_ACCEPTED,
    TOKEN_REJECTED,
    TOKEN_STABLE,
    TOKEN_UNSTABLE,
    RejectionReason,
)


def format_value(value: Any) -> str:
    """Format a looked-up value for display."""
    if isinstance(value, str):
        return value if value else '""'
    return repr(value)


def format_eligibility(accepted: bool, reason: RejectionReason | None = None) -> str:
    """Format an eligibility verdict as ``accepted`` or ``rejected:<reason>``."""
    if accepted:
        return TOKEN_ACCEPTED
    return f"{TOKEN_REJECTED}:{reason.value}"


def format_stability(stable: bool) -> str:
    """Format an iteration-stability verdict."""
    return TOKEN_STABLE if stable else TOKEN_UNSTABLE


def format_verdict(passed: bool) -> str:
    """Format a pass/fail verdict with emoji."""
    return f"{EMOJI_SUCCESS} pass" if passed else f"{EMOJI_ERROR} fail"
