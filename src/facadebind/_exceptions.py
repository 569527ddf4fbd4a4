from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Hashable, Sequence


class FacadeBindError(Exception):
    """Base class for every error raised by facadebind."""


class ResolutionError(FacadeBindError, LookupError):
    """A name could not be turned into an instance."""


class BindingNotFoundError(ResolutionError):
    """Raised by ``Container.make`` for a name that has no binding.

    Typical fix: make sure the provider that binds ``name`` was registered
    before the first ``make`` call that needs it.
    """

    def __init__(self, name: Hashable) -> None:
        self.name = name
        msg = f"No binding found for name: {name!r}"
        super().__init__(msg)


class CircularResolutionError(ResolutionError):
    """Raised when a factory (directly or indirectly) makes its own name."""

    def __init__(self, chain: Sequence[Hashable]) -> None:
        self.chain = tuple(chain)
        msg = "Circular resolution detected: " + " -> ".join(repr(name) for name in self.chain)
        super().__init__(msg)


class ContainerNotInitializedError(FacadeBindError, RuntimeError):
    """A facade was used before ``Facade.set_container`` was called."""


class UnsupportedOperationError(FacadeBindError, AttributeError):
    """The instance behind a facade has no callable with the requested name."""

    def __init__(self, accessor: Hashable, operation: str, instance: object) -> None:
        self.accessor = accessor
        self.operation = operation
        msg = (
            f"Instance {type(instance).__name__} resolved for {accessor!r} "
            f"does not support operation '{operation}'"
        )
        super().__init__(msg)
