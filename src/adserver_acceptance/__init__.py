"""
Statistical acceptance testing for an ad-serving pipeline.

Creatives are requested repeatedly from a live ad server and the observed
distribution of banner ids is checked against a target distribution.
"""

__all__ = ["cli", "client", "config", "convergence", "errors", "runner", "utils"]
