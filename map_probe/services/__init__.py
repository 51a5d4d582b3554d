"""
Service layer for the map semantics probe.
"""

from .probe_service import MapSemanticsProbe, create_probe

__all__ = ["MapSemanticsProbe", "create_probe"]
