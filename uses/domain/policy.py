"""Policies governing what happens when a circular dependency is found."""

from __future__ import annotations

from enum import Enum


class CircularDependencyPolicy(str, Enum):
    """Closed set of reactions to a detected dependency cycle."""

    WARN = "warn"
    IGNORE = "ignore"
    FAIL_FAST = "fail-fast"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


DEFAULT_POLICY = CircularDependencyPolicy.WARN
