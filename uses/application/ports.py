"""Ports the application layer depends on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.cycles import DependencyGraphView


@runtime_checkable
class DiagnosticSink(Protocol):
    """Severity-tagged destination for circular dependency messages.

    :class:`logging.Logger` satisfies this interface.
    """

    def warning(self, msg: str) -> None:
        """Emit ``msg`` at warning severity."""

    def debug(self, msg: str) -> None:
        """Emit ``msg`` at debug severity."""


__all__ = ["DependencyGraphView", "DiagnosticSink"]
