"""Narrow a facade to explicit, typed methods over a `Key`."""

from __future__ import annotations

from facadebind import Container, Facade, Key, TypedFacade


class Logger:
    def log(self, message: str) -> None:
        print(message)


LOG = Key("log", Logger)


class Log(TypedFacade[Logger]):
    accessor = LOG

    @classmethod
    def log(cls, message: str) -> None:
        cls.resolve_instance().log(message)


def main() -> None:
    container = Container()
    container.bind(LOG, lambda _: Logger())
    Facade.set_container(container)

    Log.log("Hello typed facade!")  # => Hello typed facade!


if __name__ == "__main__":
    main()
