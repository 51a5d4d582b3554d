"""
Property-based testing suite for the map semantics probe.

Uses Hypothesis to generate pair sequences, keys, and values and verify
container and key-eligibility invariants.
"""
