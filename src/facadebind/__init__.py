"""Minimal service container with delegating facades.

This package maps names to lazy factories and lets callers reach the
resulting instances either directly, through the container, or indirectly,
through a facade class that resolves a fixed name and forwards the call.

Exports:
- `Container`: name to factory registry; `bind` registers, `make` resolves (no caching).
- `Key`: typed binding key, so `make(Key("log", Logger))` is known to return a `Logger`.
- `ServiceProvider`: protocol for a bundle of `bind` calls run at bootstrap.
- `register_providers` / `bootstrap`: run providers in order; `bootstrap` also
  publishes the container to the facades.
- `Facade` / `TypedFacade`: delegating proxies over one process-wide container.
- Errors: `BindingNotFoundError`, `CircularResolutionError`,
  `ContainerNotInitializedError`, `UnsupportedOperationError`.
"""

from ._container import Container, Key
from ._exceptions import (
    BindingNotFoundError,
    CircularResolutionError,
    ContainerNotInitializedError,
    FacadeBindError,
    ResolutionError,
    UnsupportedOperationError,
)
from ._facade import Facade, TypedFacade
from ._provider import ServiceProvider, bootstrap, register_providers


__all__ = [
    "BindingNotFoundError",
    "CircularResolutionError",
    "Container",
    "ContainerNotInitializedError",
    "Facade",
    "FacadeBindError",
    "Key",
    "ResolutionError",
    "ServiceProvider",
    "TypedFacade",
    "UnsupportedOperationError",
    "bootstrap",
    "register_providers",
]
