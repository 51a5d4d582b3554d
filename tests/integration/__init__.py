"""
End-to-end tests driving the probe command line.
"""
