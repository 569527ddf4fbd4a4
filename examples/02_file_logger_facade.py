"""Forward class-level calls to a file-backed logger through a facade."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

from facadebind import Container, Facade


class FileLogger:
    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def log(self, message: str) -> None:
        line = f"{datetime.now():%Y/%m/%d %H:%M:%S}: {message}\n"
        with self._file_path.open("a", encoding="utf-8") as fh:
            fh.write(line)


class Log(Facade):
    accessor = "log"


def main(argv: list[str]) -> None:
    log_path = Path(argv[1]) if len(argv) > 1 else Path(__file__).with_name("log.txt")

    container = Container()
    container.bind("log", lambda _: FileLogger(log_path))
    Facade.set_container(container)

    Log.log("Hello facades!")
    print(log_path.read_text(encoding="utf-8"), end="")


if __name__ == "__main__":
    main(sys.argv)
