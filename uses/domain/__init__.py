"""Domain model: dependency graph, cycle detection and policies."""

from .cycles import NO_CYCLE, Cycle, CycleResult, DependencyGraphView, NoCycle, detect
from .graph import DependencyGraph
from .policy import DEFAULT_POLICY, CircularDependencyPolicy

__all__ = [
    "CircularDependencyPolicy",
    "Cycle",
    "CycleResult",
    "DEFAULT_POLICY",
    "DependencyGraph",
    "DependencyGraphView",
    "NO_CYCLE",
    "NoCycle",
    "detect",
]
