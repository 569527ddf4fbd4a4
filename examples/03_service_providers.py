"""Bootstrap from service providers and inject a logger into a service."""

from __future__ import annotations

from typing import Protocol

from facadebind import Container, Facade, bootstrap


class LoggerInterface(Protocol):
    def log(self, message: str) -> None: ...


class Logger:
    def log(self, message: str) -> None:
        print(message)


class GoodBye:
    def __init__(self, logger: LoggerInterface) -> None:
        self._logger = logger

    def to(self, name: str) -> None:
        self._logger.log(f"Good Bye {name}!")


class LogServiceProvider:
    def register(self, container: Container) -> None:
        container.bind(LoggerInterface, lambda _: Logger())


class GoodByeServiceProvider:
    def register(self, container: Container) -> None:
        container.bind(GoodBye, lambda c: GoodBye(c.make(LoggerInterface)))


class LogFacade(Facade):
    accessor = LoggerInterface


def main() -> None:
    container = bootstrap([LogServiceProvider, GoodByeServiceProvider])

    LogFacade.log("Hello Service Provider!")  # => Hello Service Provider!
    container.make(GoodBye).to("Facade")  # => Good Bye Facade!


if __name__ == "__main__":
    main()
