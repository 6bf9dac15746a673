"""Infrastructure: Logger writing to stderr."""

from __future__ import annotations

import sys
from typing import Any, Callable

from clock_toolkit.application.ports import Logger as LoggerPort


class ConsoleLogger(LoggerPort):
    """Simple stderr logger; debug lines only when verbose.

    ``verbose`` may be a callable, asked on every ``debug()`` call, for
    loggers built before the configuration is loaded.
    """

    def __init__(self, verbose: bool | Callable[[], bool] = False) -> None:
        self._verbose = verbose

    @property
    def verbose(self) -> bool:
        if callable(self._verbose):
            return bool(self._verbose())
        return self._verbose

    def _emit(self, level: str, msg: str, **kw: Any) -> None:
        extras = " ".join(f"{k}={v}" for k, v in kw.items())
        line = f"[{level}] {msg}"
        if extras:
            line += f" ({extras})"
        print(line, file=sys.stderr)

    def info(self, msg: str, **kw: Any) -> None:
        self._emit("INFO", msg, **kw)

    def warn(self, msg: str, **kw: Any) -> None:
        self._emit("WARN", msg, **kw)

    def error(self, msg: str, **kw: Any) -> None:
        self._emit("ERROR", msg, **kw)

    def debug(self, msg: str, **kw: Any) -> None:
        if self.verbose:
            self._emit("DEBUG", msg, **kw)
