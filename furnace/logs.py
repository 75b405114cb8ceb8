"""Console logging with coloured level tags."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from furnace.colors import Color, colorize
from furnace.jsontext import json_to_string

_SEPARATOR = "\n"


class LogManager:
    """Writes tagged log lines to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.latest_log = ""

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, line: str) -> None:
        self.latest_log = line
        self.stream.write(line + "\n")
        self.stream.flush()

    def info(self, text: str) -> None:
        self._emit(f"[Info] {text}")

    def warn(self, text: str) -> None:
        self._emit(f"{colorize('[Warning]', Color.FG_YELLOW)} {text}")

    def error(self, text: str) -> None:
        self._emit(f"{colorize('[Error]', Color.FG_RED)} {text}")

    def success(self, text: str) -> None:
        self._emit(f"{colorize('[Success]', Color.FG_GREEN)} {text}")

    def separator(self) -> None:
        """Print a blank line, unless the previous output already was one."""
        if self.latest_log == _SEPARATOR:
            return
        self.latest_log = _SEPARATOR
        self.stream.write("\n")
        self.stream.flush()

    @staticmethod
    def _address(obj: Any) -> str:
        return hex(id(obj))

    def object_created(self, obj: Any) -> None:
        self.success(
            f"Create object: {type(obj).__name__}, "
            f"with memory address: {self._address(obj)}"
        )

    def object_destroyed(self, obj: Any) -> None:
        self.success(
            f"Destruct object: {type(obj).__name__}, "
            f"with memory address: {self._address(obj)}"
        )

    def value_changed(self, data: Any, obj: Any) -> None:
        self.info(
            f"Value of object: {self._address(obj)}, changed to: {json_to_string(data)}"
        )


_shared: LogManager | None = None


def get_log_manager() -> LogManager:
    """Return the process-wide log manager, creating it on first use."""
    global _shared
    if _shared is None:
        _shared = LogManager()
    return _shared