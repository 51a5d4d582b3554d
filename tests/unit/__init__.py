"""
Unit tests for the map semantics probe.
"""
