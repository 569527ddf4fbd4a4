from typing import Protocol

import pytest

from facadebind import Container, ContainerNotInitializedError, Facade, Key, TypedFacade


class LoggerInterface(Protocol):
    def log(self, message: str) -> str: ...


class EchoLogger:
    def log(self, message: str) -> str:
        return f"logged: {message}"

    def flush(self) -> str:
        return "flushed"


LOG = Key("log", EchoLogger)


class Log(TypedFacade[LoggerInterface]):
    accessor = LOG

    @classmethod
    def log(cls, message: str) -> str:
        return cls.resolve_instance().log(message)


@pytest.fixture
def container():
    c = Container()
    c.bind(LOG, lambda _: EchoLogger())
    Facade.set_container(c)
    return c


def test_explicit_method_calls_resolved_instance(container):
    assert Log.log("hello") == "logged: hello"
    assert Log.log("hello") == container.make(LOG).log("hello")


def test_resolve_instance_is_keyed_by_typed_key(container):
    assert isinstance(Log.resolve_instance(), EchoLogger)


def test_unlisted_operations_still_forward(container):
    assert Log.flush() == "flushed"


def test_typed_facade_requires_container():
    with pytest.raises(ContainerNotInitializedError):
        Log.log("hello")


def test_typed_facade_is_a_facade():
    assert issubclass(Log, Facade)
