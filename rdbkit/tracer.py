"""Bit-masked trace logging to a file and/or a console stream."""

from __future__ import annotations

import enum
import inspect
import itertools
import sys
import threading
from typing import Any, Optional, TextIO

HDR_SIZE = 32
LOG_BUFFER_SIZE = 256
FLUSH_MAX = 10


class _Flag(enum.IntFlag):
    NONE = 0
    FILE_LOG = 1
    CONSOLE_LOG = 2
    NO_HEADER = 4


_registry: list["Tracer"] = []
_registry_lock = threading.Lock()
_write_counter = itertools.count(1)


def active_tracers() -> list["Tracer"]:
    """Return the tracers that are still open, most recently created first."""
    with _registry_lock:
        return list(_registry)


class Tracer:
    """A named tracer that emits messages whose bit is enabled.

    Nothing is emitted until file or console logging is switched on.  Each
    message carries the optional header, the calling function and line,
    and is cut to ``LOG_BUFFER_SIZE - 1`` characters.
    """

    def __init__(self, name: str, file_name: Optional[str] = None,
                 header: Optional[str] = None, out: Optional[TextIO] = None,
                 bits: int = 0) -> None:
        if not name:
            raise ValueError("a tracer needs a name")
        self.name = name
        self._file: Optional[TextIO] = None
        if file_name is not None:
            self._file = open(file_name, "w+", encoding="utf-8")
        self._header = f"{header} : "[:HDR_SIZE - 1] if header is not None else ""
        self._out = out
        self._bits = bits
        self._flags = _Flag.NONE
        self._lock = threading.Lock()
        self._closed = False
        with _registry_lock:
            _registry.insert(0, self)

    def __repr__(self) -> str:
        return f"Tracer({self.name!r})"

    def close(self) -> None:
        """Close the log file and drop the tracer from the active list."""
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None
        with _registry_lock:
            if self in _registry:
                _registry.remove(self)
        self._closed = True

    def __enter__(self) -> "Tracer":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def trace(self, bit: int, fmt: str, *args: Any) -> Optional[str]:
        """Emit ``fmt % args`` if ``bit`` is enabled and some output is on.

        Returns the text that was written, or None if nothing was.
        """
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        if caller is not None:
            function, lineno = caller.f_code.co_name, caller.f_lineno
        else:
            function, lineno = "?", 0
        del frame, caller

        with self._lock:
            if not self._bits & bit:
                return None
            if not self._flags:
                return None
            body = fmt % args if args else fmt
            line = (self._header + f"{function}({lineno}): " + body)
            line = line[:LOG_BUFFER_SIZE - 1]
            if self._flags & _Flag.NO_HEADER:
                line = line[len(self._header):]

            written = False
            if self._file is not None and self._flags & _Flag.FILE_LOG:
                self._file.write(line)
                written = True
                if next(_write_counter) % FLUSH_MAX == 0:
                    self._file.flush()

            if self._flags & _Flag.CONSOLE_LOG:
                stream = self._out if self._out is not None else sys.stdout
                stream.write(line)
                written = True

            self._flags &= ~_Flag.NO_HEADER
            return line if written else None

    def enable_file_logging(self, enable: bool) -> None:
        with self._lock:
            if enable:
                self._flags |= _Flag.FILE_LOG
            else:
                self._flags &= ~_Flag.FILE_LOG

    def enable_console_logging(self, enable: bool) -> None:
        with self._lock:
            if enable:
                self._flags |= _Flag.CONSOLE_LOG
            else:
                self._flags &= ~_Flag.CONSOLE_LOG

    def disable_header_print(self) -> None:
        """Leave the header off the next message only."""
        with self._lock:
            self._flags |= _Flag.NO_HEADER

    def set_bit(self, bit: int) -> None:
        with self._lock:
            self._bits |= bit

    def unset_bit(self, bit: int) -> None:
        with self._lock:
            self._bits &= ~bit

    def is_bit_set(self, bit: int) -> bool:
        return bool(self._bits & bit)

    def clear_log_file(self) -> None:
        """Discard everything written to the log file so far."""
        with self._lock:
            if self._file is not None:
                self._file.seek(0)
                self._file.truncate()

    def console_logging_enabled(self) -> bool:
        return bool(self._flags & _Flag.CONSOLE_LOG)

    def file_logging_enabled(self) -> bool:
        return bool(self._flags & _Flag.FILE_LOG)