"""Render detected cycles and route them according to the configured policy."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Hashable, Sequence

from ..domain.policy import CircularDependencyPolicy
from ..errors import CircularDependencyError
from .ports import DiagnosticSink

logger = logging.getLogger("uses.circular_dependency")


class ReportOutcome(str, Enum):
    """How a reported cycle was handled when processing continues."""

    WARNED = "warned"
    IGNORED = "ignored"


def display_name(node: Hashable) -> str:
    """Human readable name of a graph node."""

    if isinstance(node, type):
        return node.__name__
    return str(node)


def render_message(
    source: Hashable, destination: Hashable, path: Sequence[Hashable]
) -> str:
    message = (
        f"{display_name(destination)} and {display_name(source)} "
        "have a circular dependency"
    )
    if path:
        message += " via " + ",".join(display_name(node) for node in path)
    return message + ". This may cause unforseen issues, or just be generally confusing"


def report(
    source: Hashable,
    destination: Hashable,
    path: Sequence[Hashable],
    policy: CircularDependencyPolicy,
    sink: DiagnosticSink | None = None,
) -> ReportOutcome:
    """Act on a cycle closed by ``source -> destination``.

    ``warn`` and ``ignore`` emit the rendered message to ``sink`` at warning and
    debug severity respectively. ``fail-fast`` raises
    :class:`~uses.errors.CircularDependencyError` without touching the sink, and
    the caller must not commit the edge.
    """

    sink = sink if sink is not None else logger
    message = render_message(source, destination, path)

    match policy:
        case CircularDependencyPolicy.WARN:
            sink.warning(message)
            return ReportOutcome.WARNED
        case CircularDependencyPolicy.IGNORE:
            sink.debug(message)
            return ReportOutcome.IGNORED
        case CircularDependencyPolicy.FAIL_FAST:
            raise CircularDependencyError(message)

    raise AssertionError(f"Unhandled circular dependency policy: {policy!r}")


__all__ = ["ReportOutcome", "display_name", "render_message", "report"]
