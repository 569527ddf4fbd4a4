"""Resolve an instance directly through the container."""

from __future__ import annotations

from facadebind import Container


class Logger:
    def log(self, message: str) -> None:
        print(f"instance method {type(self).__name__}.log() is called.")
        print(message)


def main() -> None:
    container = Container()
    container.bind("log", lambda _: Logger())

    container.make("log").log("Hello Service Container!")


if __name__ == "__main__":
    main()
