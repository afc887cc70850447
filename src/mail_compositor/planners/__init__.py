"""Split planning."""

from .split_planner import SplitPlanner

__all__ = ["SplitPlanner"]
