"""Line-oriented logging with once, every-n and rate-limited variants."""

from __future__ import annotations

import enum
import inspect
import os
import threading
import time
from datetime import datetime
from typing import TextIO

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"


class Level(str, enum.Enum):
    """Severity tags written into each log line."""

    TRACE = "T"
    DEBUG = "D"
    INFO = "I"
    WARN = "W"
    ERROR = "E"
    FATAL = "F"


def format_prefix(level: Level | str, filename: str, line: int, when: datetime) -> str:
    """Build the ``[date time][level][file(line)] `` prefix of a log line."""
    tag = Level(level).value
    stamp = f"{when.strftime(DATE_FORMAT)} {when.strftime(TIME_FORMAT)}.{when.microsecond // 1000:03d}"
    return f"[{stamp}][{tag}][{filename}({line})] "


def _call_site() -> tuple[str, int]:
    """Return file name and line of the code that called a public Logger method."""
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        if caller is None:
            return "<unknown>", 0
        return os.path.basename(caller.f_code.co_filename), caller.f_lineno
    finally:
        del frame


class Logger:
    """Writes prefixed messages to a text stream.

    The ``once``, ``every`` and ``periodic`` variants keep their state per
    call site, so each place in the code that logs is throttled on its own.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._lock = threading.Lock()
        self._seen: set[tuple[str, int]] = set()
        self._counters: dict[tuple[str, int], int] = {}
        self._last_ms: dict[tuple[str, int], int] = {}

    def _write(self, level: Level | str, message: object, site: tuple[str, int]) -> None:
        filename, line = site
        self.stream.write(f"{format_prefix(level, filename, line, datetime.now())}{message}\n")

    def log(self, level: Level | str, message: object) -> None:
        """Write one message."""
        self._write(level, message, _call_site())

    def once(self, level: Level | str, message: object) -> bool:
        """Write the message only the first time this call site is reached."""
        site = _call_site()
        with self._lock:
            if site in self._seen:
                return False
            self._seen.add(site)
        self._write(level, message, site)
        return True

    def every(self, count: int, level: Level | str, message: object) -> bool:
        """Write the message on every ``count``-th call from this call site."""
        site = _call_site()
        with self._lock:
            current = self._counters.get(site, 1)
            if count <= 0:
                return False
            current += 1
            hit = current > count
            self._counters[site] = 1 if hit else current
        if hit:
            self._write(level, message, site)
        return hit

    def periodic(self, period: float, level: Level | str, message: object) -> bool:
        """Write the message at most once per ``period`` seconds from this call site."""
        site = _call_site()
        now = int(time.time() * 1000)
        with self._lock:
            last = self._last_ms.get(site, 0)
            hit = last + period * 1000 <= now or now < last
            if hit:
                self._last_ms[site] = now
        if hit:
            self._write(level, message, site)
        return hit