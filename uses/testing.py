"""Helpers for injecting test doubles into services under test.

Because dependencies are declared explicitly, a test can replace the
instance a service would build with a double of its own::

    gateway = FakeGateway()
    inject_double(order_service, {PaymentGateway: gateway})

:func:`inject_mock` is the shorthand for an autospecced ``unittest.mock`` double.
"""

from __future__ import annotations

from typing import Any, Mapping
from unittest import mock

from .application.declaration import dependent_instances
from .errors import InjectionError
from .service import Service


def inject_double(subject: Service, injections: Mapping[type, Any]) -> Any:
    """Make ``subject`` use the given double and return that double.

    ``injections`` must hold exactly one entry: the class passed to ``uses``
    mapped to the object to inject.
    """

    if len(injections) != 1:
        raise InjectionError(
            f"expected a single key/value to inject_double, but got {len(injections)}"
        )
    ((klass, instance),) = injections.items()

    if not isinstance(subject, Service):
        raise InjectionError(
            f"{type(subject).__name__} is not a uses.Service, so you cannot inject a double into it"
        )
    if not isinstance(klass, type):
        raise InjectionError(f"Pass the actual class, not a {type(klass).__name__}.")

    name = _accessor_name(subject, klass)
    dependent_instances(subject)[name] = instance
    return instance


def inject_mock(subject: Service, klass: type) -> mock.NonCallableMagicMock:
    """Inject an autospecced instance mock of ``klass`` into ``subject``."""

    return inject_double(subject, {klass: mock.create_autospec(klass, instance=True)})


def _accessor_name(subject: Service, klass: type) -> str:
    for owner in type(subject).__mro__:
        if isinstance(owner, type) and issubclass(owner, Service):
            name = owner.dependency_graph().accessor_name(owner, klass)
            if name:
                return name
    raise InjectionError(
        f"{type(subject).__name__} does not depend on a {klass.__name__}, "
        "so there is no reason to inject a double"
    )


__all__ = ["inject_double", "inject_mock"]
