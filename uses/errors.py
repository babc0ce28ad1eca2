"""Exception hierarchy raised by the ``uses`` package."""

from __future__ import annotations


class UsesError(Exception):
    """Base class for every error raised by this package."""


class InvalidPolicyValue(UsesError, ValueError):
    """Raised when the circular dependency policy is set to an unknown value."""

    def __init__(self, value: object, legal_values: list[str]) -> None:
        self.value = value
        self.legal_values = legal_values
        super().__init__(
            f"{value!r} is not a valid value for on_circular_dependency. "
            f"Use one of {legal_values}"
        )


class CircularDependencyError(UsesError):
    """Raised under the ``fail-fast`` policy when a declaration closes a cycle."""


class InvalidMethodName(UsesError):
    """Raised when no usable accessor name can be derived for a dependency."""


class InitializerError(UsesError):
    """Raised when a dependency cannot be constructed the requested way."""


class UnknownInitializerStrategy(InitializerError):
    """Raised when ``initialize=`` is neither a known strategy nor a callable."""

    def __init__(self, strategy: object) -> None:
        self.strategy = strategy
        if isinstance(strategy, str):
            received = strategy
        else:
            received = f"a {type(strategy).__name__}"
        super().__init__(
            f"initialize= received {received}, which is not supported. Should be "
            "either 'config_initializers', a callable, or simply omitted"
        )


class InjectionError(UsesError):
    """Raised by the test helpers when a double cannot be injected."""


__all__ = [
    "CircularDependencyError",
    "InitializerError",
    "InjectionError",
    "InvalidMethodName",
    "InvalidPolicyValue",
    "UnknownInitializerStrategy",
    "UsesError",
]
