from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    TypeVar,
    overload,
)

from ._exceptions import BindingNotFoundError, CircularResolutionError


T = TypeVar("T")

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable


@dataclass(frozen=True)
class Key(Generic[T]):
    """Binding key tied to the type its factory produces.

    Example:
      LOG = Key("log", Logger)
      container.bind(LOG, lambda _: Logger())
      container.make(LOG)  # typed as Logger

    """

    name: str
    provides: type[T]

    def __repr__(self) -> str:
        return f"Key({self.name!r}, {self.provides.__name__})"


class Container:
    """Name to factory registry.

    - bind factories under a name, a type or a `Key`
    - make a fresh instance per call (nothing is cached)
    - factories receive the container and may make their own dependencies.
    """

    def __init__(self) -> None:
        self._factories: dict[Any, Callable[[Container], Any]] = {}
        self._lock = threading.RLock()
        self._local = threading.local()

    @overload
    def bind(self, name: Key[T], factory: Callable[[Container], T]) -> None: ...

    @overload
    def bind(self, name: type[T], factory: Callable[[Container], T]) -> None: ...

    @overload
    def bind(self, name: Hashable, factory: Callable[[Container], Any]) -> None: ...

    def bind(self, name: Hashable, factory: Callable[[Container], Any]) -> None:
        """Register `factory` under `name`, replacing any previous binding.

        Example:
          container.bind("log", lambda c: Logger("log.txt"))

        """
        if not callable(factory):
            msg = f"Factory for {name!r} must be callable, got {type(factory).__name__}"
            raise TypeError(msg)

        with self._lock:
            self._factories[name] = factory

    def unbind(self, name: Hashable) -> None:
        """Remove the binding for `name`."""
        with self._lock:
            if name not in self._factories:
                raise BindingNotFoundError(name)
            del self._factories[name]

    def bound(self, name: Hashable) -> bool:
        with self._lock:
            return name in self._factories

    def __contains__(self, name: object) -> bool:
        return self.bound(name)  # type: ignore[arg-type]

    def names(self) -> tuple[Hashable, ...]:
        with self._lock:
            return tuple(self._factories)

    @overload
    def make(self, name: Key[T]) -> T: ...

    @overload
    def make(self, name: type[T]) -> T: ...

    @overload
    def make(self, name: Hashable) -> Any: ...

    def make(self, name: Hashable) -> Any:
        """Resolve `name` by calling its factory with this container.

        The factory runs on every call. Errors raised by the factory propagate
        unchanged. A factory that ends up making its own name raises
        `CircularResolutionError` rather than recursing forever.
        """
        with self._lock:
            factory = self._factories.get(name)

        if factory is None:
            raise BindingNotFoundError(name)

        stack = self._resolution_stack()
        if name in stack:
            raise CircularResolutionError([*stack, name])

        # Factories run outside the lock so they can re-enter `make`.
        stack.append(name)
        try:
            return factory(self)
        finally:
            stack.pop()

    def _resolution_stack(self) -> list[Hashable]:
        stack: list[Hashable] | None = getattr(self._local, "stack", None)
        if stack is None:
            stack = []
            self._local.stack = stack
        return stack
