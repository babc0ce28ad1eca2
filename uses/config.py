"""Runtime configuration governing dependency declarations."""

from __future__ import annotations

from typing import Any, Callable, Dict

from .domain.policy import CircularDependencyPolicy
from .errors import InvalidPolicyValue
from .settings import Settings, get_settings

Initializer = Callable[[], Any]


class UsesConfig:
    """Mutable, process-wide settings for ``uses`` declarations.

    ``on_circular_dependency`` controls what happens when a declaration closes
    a dependency cycle:

    ``warn``
        log a warning and keep the declaration (default)
    ``ignore``
        log at DEBUG level and keep the declaration
    ``fail-fast``
        raise :class:`~uses.errors.CircularDependencyError` and drop the declaration

    ``initializers`` maps a class to a zero-argument callable building it, used by
    declarations made with ``initialize="config_initializers"``.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._on_circular_dependency = CircularDependencyPolicy.WARN
        self.initializers: Dict[type, Initializer] = {}
        self.reset()

    @property
    def on_circular_dependency(self) -> CircularDependencyPolicy:
        return self._on_circular_dependency

    @on_circular_dependency.setter
    def on_circular_dependency(self, value: CircularDependencyPolicy | str) -> None:
        self._on_circular_dependency = _coerce_policy(value)

    def reset(self) -> None:
        """Restore the load-time policy and forget every registered initializer."""

        settings = self._settings if self._settings is not None else get_settings()
        self.on_circular_dependency = settings.on_circular_dependency
        self.initializers.clear()

    def __repr__(self) -> str:
        return (
            f"UsesConfig(on_circular_dependency={self._on_circular_dependency.value!r}, "
            f"initializers={len(self.initializers)})"
        )


def _coerce_policy(value: object) -> CircularDependencyPolicy:
    if isinstance(value, CircularDependencyPolicy):
        return value
    if isinstance(value, str):
        try:
            return CircularDependencyPolicy(value)
        except ValueError:
            pass
    raise InvalidPolicyValue(value, CircularDependencyPolicy.values())


__all__ = ["Initializer", "UsesConfig"]
