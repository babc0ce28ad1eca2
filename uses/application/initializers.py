"""Strategies building the dependency instance behind an accessor."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable

from ..config import UsesConfig
from ..errors import InitializerError, UnknownInitializerStrategy

NEW_NO_ARGS = "new_no_args"
CONFIG_INITIALIZERS = "config_initializers"

Factory = Callable[[], Any]


@dataclass(frozen=True, slots=True)
class InitializerRequest:
    """Everything needed to pick and validate a construction strategy."""

    owner: type
    dependency: type
    strategy: object
    config: UsesConfig


def build_initializer(request: InitializerRequest) -> Factory:
    """Return a zero-argument factory for ``request.dependency``.

    Misconfiguration is reported here, at declaration time, rather than on first
    access of the accessor.
    """

    strategy = request.strategy
    if isinstance(strategy, str):
        if strategy == NEW_NO_ARGS:
            return _new_no_args(request)
        if strategy == CONFIG_INITIALIZERS:
            return _from_config_initializers(request)
    elif callable(strategy):
        return strategy
    raise UnknownInitializerStrategy(strategy)


def _new_no_args(request: InitializerRequest) -> Factory:
    dependency = request.dependency
    if _has_required_parameters(dependency):
        raise InitializerError(
            f"{dependency.__name__}'s initializer has required arguments, but has been "
            f"used in {request.owner.__name__} to be constructed with no arguments. "
            "Use initialize= with a callable or 'config_initializers' to control how "
            "the instance is created"
        )
    return dependency


def _from_config_initializers(request: InitializerRequest) -> Factory:
    try:
        return request.config.initializers[request.dependency]
    except KeyError:
        raise InitializerError(
            f"An initializer for {request.dependency.__name__} has not been defined. "
            f"{request.owner.__name__} has set initialize= to 'config_initializers', "
            "which means it's assuming some other module has registered one via "
            "uses.initializers()"
        ) from None


def _has_required_parameters(klass: type) -> bool:
    try:
        signature = inspect.signature(klass)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures.
        return False
    return any(
        parameter.default is inspect.Parameter.empty
        and parameter.kind
        not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        for parameter in signature.parameters.values()
    )


__all__ = [
    "CONFIG_INITIALIZERS",
    "Factory",
    "InitializerRequest",
    "NEW_NO_ARGS",
    "build_initializer",
]
