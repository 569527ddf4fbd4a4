from __future__ import annotations

import inspect
import threading
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from ._exceptions import ContainerNotInitializedError, UnsupportedOperationError


if TYPE_CHECKING:
    from collections.abc import Callable, Hashable

    from ._container import Container, Key

T = TypeVar("T")

_MISSING = object()


class _FacadeMeta(type):
    def __getattr__(cls, operation: str) -> Callable[..., Any]:
        # Only reached when normal class attribute lookup fails.
        if operation.startswith("_"):
            msg = f"type object {cls.__name__!r} has no attribute {operation!r}"
            raise AttributeError(msg)

        def forward(*args: Any, **kwargs: Any) -> Any:
            return cls._forward_call(operation, *args, **kwargs)

        forward.__name__ = operation
        forward.__qualname__ = f"{cls.__qualname__}.{operation}"
        return forward


class Facade(metaclass=_FacadeMeta):
    """Forward class-level calls to the instance bound under `accessor`.

    Example:
      class LogFacade(Facade):
          accessor = "log"

      Facade.set_container(container)
      LogFacade.log("hello")  # container.make("log").log("hello")

    All facades share one process-wide container reference. It must be set
    once at startup with `set_container`, before the first forwarded call, and
    is only ever replaced explicitly (`set_container` again, or
    `clear_container` in tests).

    Only names missing from the facade class are forwarded. These are always
    answered by the facade itself and never reach the target: `accessor`,
    `resolve_instance`, `set_container`, `get_container`, `clear_container`,
    anything defined on `type` (such as `mro`), and names starting with `_`.
    Every other public name resolves to a forwarder, so `hasattr(facade, name)`
    is always true for them; whether the target supports the operation is only
    known when the forwarder is called.
    """

    accessor: ClassVar[Hashable | None] = None

    _container: ClassVar[Container | None] = None
    _container_lock: ClassVar[threading.Lock] = threading.Lock()

    @staticmethod
    def set_container(container: Container) -> None:
        with Facade._container_lock:
            Facade._container = container

    @staticmethod
    def clear_container() -> None:
        with Facade._container_lock:
            Facade._container = None

    @staticmethod
    def get_container() -> Container:
        container = Facade._container
        if container is None:
            msg = "Facade container is not set. Call Facade.set_container(container) during startup."
            raise ContainerNotInitializedError(msg)
        return container

    @classmethod
    def resolve_instance(cls) -> Any:
        """Make a fresh instance of whatever is bound under `accessor`."""
        container = Facade.get_container()
        return container.make(cls._get_accessor())

    @classmethod
    def _forward_call(cls, operation: str, *args: Any, **kwargs: Any) -> Any:
        instance = cls.resolve_instance()

        try:
            method = getattr(instance, operation)
        except AttributeError as exc:
            if _is_lookup_miss(instance, operation, exc):
                raise UnsupportedOperationError(cls.accessor, operation, instance) from exc
            raise

        if not callable(method):
            raise UnsupportedOperationError(cls.accessor, operation, instance)

        return method(*args, **kwargs)

    @classmethod
    def _get_accessor(cls) -> Hashable:
        if cls.accessor is None:
            msg = f"{cls.__name__} must define a class attribute 'accessor'"
            raise NotImplementedError(msg)
        return cls.accessor


class TypedFacade(Facade, Generic[T]):
    """Facade whose accessor is a `Key`, so the resolved instance is typed.

    Subclasses expose explicit methods instead of relying on dynamic forwarding:

      class Log(TypedFacade[Logger]):
          accessor = Key("log", Logger)

          @classmethod
          def log(cls, message: str) -> None:
              cls.resolve_instance().log(message)

    """

    accessor: ClassVar[Key[Any] | None] = None  # type: ignore[assignment]

    @classmethod
    def resolve_instance(cls) -> T:
        return super().resolve_instance()  # type: ignore[no-any-return]


def _is_lookup_miss(instance: object, operation: str, exc: AttributeError) -> bool:
    """Tell a missing operation apart from an AttributeError raised while getting it.

    A name found statically (method, property, instance attribute) exists, so
    the error came from inside it. Otherwise the error must name the instance
    itself; one raised by a nested lookup inside `__getattr__` does not.
    """
    if inspect.getattr_static(instance, operation, _MISSING) is not _MISSING:
        return False
    return exc.obj is instance and exc.name == operation
