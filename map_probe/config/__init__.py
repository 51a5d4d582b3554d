"""
Configuration management for the map semantics probe.

This package provides the language profiles and the environment-driven
settings, replacing scattered defaults with proper configuration objects.
"""

from .environment import ProbeSettings, get_environment_config
from .profiles import GO_PROFILE, PROFILES, PYTHON_PROFILE, LanguageProfile, get_profile

__all__ = [
    "GO_PROFILE",
    "PROFILES",
    "PYTHON_PROFILE",
    "LanguageProfile",
    "ProbeSettings",
    "get_environment_config",
    "get_profile",
]
