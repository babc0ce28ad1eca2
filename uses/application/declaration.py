"""Declare that one class depends on another."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from ..config import UsesConfig
from ..domain.cycles import Cycle, detect
from ..domain.graph import DependencyGraph
from ..domain.naming import derive_accessor_name, is_valid_accessor_name
from ..errors import CircularDependencyError, InvalidMethodName
from .initializers import NEW_NO_ARGS, Factory, InitializerRequest, build_initializer
from .ports import DiagnosticSink
from .reporting import report

logger = logging.getLogger(__name__)

INSTANCES_ATTRIBUTE = "_uses_dependent_instances"


def dependent_instances(owner_instance: object) -> Dict[str, Any]:
    """Return the per-instance memo of constructed dependencies, keyed by accessor name."""

    store = vars(owner_instance)
    if INSTANCES_ATTRIBUTE not in store:
        store[INSTANCES_ATTRIBUTE] = {}
    return store[INSTANCES_ATTRIBUTE]


class DependencyAccessor:
    """Descriptor returning one memoized dependency instance per owner instance."""

    def __init__(self, name: str, dependency: type, factory: Factory) -> None:
        self.name = name
        self.dependency = dependency
        self.factory = factory

    def __get__(self, instance: object, owner: type | None = None) -> Any:
        if instance is None:
            return self
        instances = dependent_instances(instance)
        if self.name not in instances:
            instances[self.name] = self.factory()
        return instances[self.name]

    def __repr__(self) -> str:
        return f"<DependencyAccessor {self.name} -> {self.dependency.__name__}>"


@dataclass
class DeclareDependencyUseCase:
    """Check, report and commit a single ``owner -> dependency`` declaration."""

    graph: DependencyGraph
    config: UsesConfig
    sink: DiagnosticSink | None = None

    def __call__(
        self,
        owner: type,
        dependency: type,
        *,
        name: str | None = None,
        initialize: object = NEW_NO_ARGS,
    ) -> DependencyAccessor:
        if not isinstance(dependency, type):
            raise TypeError(
                f"{owner.__name__}.uses() expects a class, not a {type(dependency).__name__}"
            )

        accessor_name = self._accessor_name(owner, dependency, name)
        factory = build_initializer(
            InitializerRequest(
                owner=owner,
                dependency=dependency,
                strategy=initialize,
                config=self.config,
            )
        )

        # Check and commit atomically so a concurrent declaration cannot slip a
        # cycle past this one.
        with self.graph.lock:
            previous_name = self.graph.accessor_name(owner, dependency)
            result = detect(owner, dependency, self.graph)
            if isinstance(result, Cycle):
                self._report(owner, dependency, result.path)
            self.graph.add_edge(owner, dependency, accessor_name)

        if previous_name is not None and previous_name != accessor_name:
            if isinstance(owner.__dict__.get(previous_name), DependencyAccessor):
                delattr(owner, previous_name)

        accessor = DependencyAccessor(accessor_name, dependency, factory)
        setattr(owner, accessor_name, accessor)
        logger.debug(
            "%s uses %s as %s", owner.__name__, dependency.__name__, accessor_name
        )
        return accessor

    def _report(self, owner: type, dependency: type, path: tuple) -> None:
        """Report a cycle; only ``fail-fast`` may stop the edge from being committed."""

        try:
            report(owner, dependency, path, self.config.on_circular_dependency, self.sink)
        except CircularDependencyError:
            raise
        except Exception:
            logger.exception(
                "Diagnostic sink failed while reporting %s uses %s",
                owner.__name__,
                dependency.__name__,
            )

    @staticmethod
    def _accessor_name(owner: type, dependency: type, name: str | None) -> str:
        accessor_name = derive_accessor_name(dependency) if name is None else str(name)
        if not is_valid_accessor_name(accessor_name):
            raise InvalidMethodName(
                f"Cannot determine a default name for {dependency!r} used by "
                f"{owner.__name__}. Use name= to specify the name"
            )
        return accessor_name


__all__ = [
    "DeclareDependencyUseCase",
    "DependencyAccessor",
    "INSTANCES_ATTRIBUTE",
    "dependent_instances",
]
