"""Convergence tracking exports."""

from .tracker import SampleConvergenceTracker

__all__ = ["SampleConvergenceTracker"]
