"""Providers for the process-wide graph, configuration and use cases."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict

from ..application.declaration import DeclareDependencyUseCase
from ..application.ports import DiagnosticSink
from ..config import Initializer, UsesConfig
from ..domain.graph import DependencyGraph
from ..settings import get_settings


@lru_cache()
def get_dependency_graph() -> DependencyGraph:
    return DependencyGraph()


@lru_cache()
def get_config() -> UsesConfig:
    return UsesConfig(get_settings())


def configure() -> UsesConfig:
    """Return the process-wide configuration, typically mutated at start-up::

        uses.configure().on_circular_dependency = "fail-fast"
    """

    return get_config()


def initializers() -> Dict[type, Initializer]:
    """Return the registry used by ``initialize="config_initializers"``::

        uses.initializers()[S3Client] = lambda: S3Client(region="eu-west-1")
    """

    return get_config().initializers


def provide_declare_dependency_use_case(
    graph: DependencyGraph | None = None,
    config: UsesConfig | None = None,
    sink: DiagnosticSink | None = None,
) -> DeclareDependencyUseCase:
    return DeclareDependencyUseCase(
        graph=graph if graph is not None else get_dependency_graph(),
        config=config if config is not None else get_config(),
        sink=sink,
    )


__all__ = [
    "configure",
    "get_config",
    "get_dependency_graph",
    "initializers",
    "provide_declare_dependency_use_case",
]
