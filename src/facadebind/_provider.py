from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Protocol, Union, runtime_checkable

from ._container import Container
from ._facade import Facade


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Iterable

    ProviderLike = Union["ServiceProvider", type["ServiceProvider"]]


@runtime_checkable
class ServiceProvider(Protocol):
    """A unit of configuration that binds one or more names on a container."""

    def register(self, container: Container) -> None: ...


def register_providers(container: Container, providers: Iterable[ProviderLike]) -> Container:
    """Call `register` on every provider, in the given order.

    Provider classes are instantiated without arguments first. Ordering is not
    validated: a factory making a name that no provider bound fails only when
    it runs.
    """
    for item in providers:
        provider = item() if inspect.isclass(item) else item

        register = getattr(provider, "register", None)
        if not callable(register):
            msg = f"{type(provider).__name__} is not a service provider: missing callable 'register'"
            raise TypeError(msg)

        register(container)

    return container


def bootstrap(providers: Iterable[ProviderLike], *, container: Container | None = None) -> Container:
    """Build a container from `providers` and publish it to the facades.

    Example:
      container = bootstrap([LogServiceProvider, GoodByeServiceProvider])
      LogFacade.log("ready")

    """
    if container is None:
        container = Container()

    providers = list(providers)
    register_providers(container, providers)
    logger.debug(
        "Bootstrapped container with %d provider(s): %s",
        len(providers),
        ", ".join(getattr(p, "__name__", type(p).__name__) for p in providers),
    )
    Facade.set_container(container)
    return container
