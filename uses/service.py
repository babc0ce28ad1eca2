"""Base class and decorator for declaring service-layer dependencies.

Subclass :class:`Service` and declare what each service uses::

    class PaymentGateway(Service):
        ...

    class OrderService(Service):
        ...

    OrderService.uses(PaymentGateway)

    OrderService().payment_gateway  # memoized per OrderService instance

or, equivalently, with the class decorator::

    @uses(PaymentGateway, name="gateway")
    class OrderService(Service):
        ...
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, TypeVar

from .application.declaration import DependencyAccessor
from .application.initializers import NEW_NO_ARGS
from .domain.graph import DependencyGraph
from .platform.wiring import get_dependency_graph, provide_declare_dependency_use_case

T = TypeVar("T", bound=type)


class Service:
    """Base class for services taking part in the dependency graph.

    Pass ``dependency_graph=`` as a class keyword to bind a hierarchy to an
    explicit graph instead of the process-wide one.
    """

    _uses_graph: ClassVar[DependencyGraph | None] = None

    def __init_subclass__(
        cls, *, dependency_graph: DependencyGraph | None = None, **kwargs: Any
    ) -> None:
        super().__init_subclass__(**kwargs)
        if dependency_graph is not None:
            cls._uses_graph = dependency_graph
        cls.dependency_graph().register(cls)

    @classmethod
    def dependency_graph(cls) -> DependencyGraph:
        if cls._uses_graph is not None:
            return cls._uses_graph
        return get_dependency_graph()

    @classmethod
    def uses(
        cls,
        klass: type,
        *,
        name: str | None = None,
        initialize: object = NEW_NO_ARGS,
    ) -> DependencyAccessor:
        """Declare that this class depends on ``klass``.

        Adds an attribute to the class returning an instance of ``klass``, created
        on first access and memoized per instance.

        name
            overrides the attribute name. By default it is derived from the class
            name, so ``Billing.InvoiceClient`` becomes ``billing_invoice_client``.
        initialize
            ``"new_no_args"`` (default) calls ``klass()``;
            ``"config_initializers"`` uses the callable registered with
            :func:`uses.initializers`; any other callable is invoked with no
            arguments to build the instance.
        """

        declare = provide_declare_dependency_use_case(graph=cls.dependency_graph())
        return declare(cls, klass, name=name, initialize=initialize)

    @classmethod
    def dependencies(cls) -> Dict[type, str]:
        """Declared dependencies of this class mapped to their attribute names."""

        return cls.dependency_graph().dependencies_of(cls)


def uses(
    klass: type, *, name: str | None = None, initialize: object = NEW_NO_ARGS
) -> Callable[[T], T]:
    """Class decorator form of :meth:`Service.uses`.

    Stacked decorators are applied bottom-up, which is the order the
    declarations are recorded in.
    """

    def decorator(owner: T) -> T:
        if isinstance(owner, type) and issubclass(owner, Service):
            owner.uses(klass, name=name, initialize=initialize)
        else:
            declare = provide_declare_dependency_use_case()
            declare(owner, klass, name=name, initialize=initialize)
        return owner

    return decorator


__all__ = ["Service", "uses"]
