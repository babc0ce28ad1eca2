"""Declare dependencies between service classes and detect circular ones."""

from .application.reporting import ReportOutcome, report
from .config import UsesConfig
from .domain.cycles import Cycle, NoCycle, detect
from .domain.graph import DependencyGraph
from .domain.policy import CircularDependencyPolicy
from .errors import (
    CircularDependencyError,
    InitializerError,
    InjectionError,
    InvalidMethodName,
    InvalidPolicyValue,
    UnknownInitializerStrategy,
    UsesError,
)
from .platform.wiring import configure, get_dependency_graph, initializers
from .service import Service, uses

__all__ = [
    "CircularDependencyError",
    "CircularDependencyPolicy",
    "Cycle",
    "DependencyGraph",
    "InitializerError",
    "InjectionError",
    "InvalidMethodName",
    "InvalidPolicyValue",
    "NoCycle",
    "ReportOutcome",
    "Service",
    "UnknownInitializerStrategy",
    "UsesConfig",
    "UsesError",
    "configure",
    "detect",
    "get_dependency_graph",
    "initializers",
    "report",
    "uses",
]
