"""Process-wide wiring for the ``uses`` package."""

from .wiring import (
    configure,
    get_config,
    get_dependency_graph,
    initializers,
    provide_declare_dependency_use_case,
)

__all__ = [
    "configure",
    "get_config",
    "get_dependency_graph",
    "initializers",
    "provide_declare_dependency_use_case",
]
