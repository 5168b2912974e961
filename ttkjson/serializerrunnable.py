"""Serialization as a unit of work that reports its result through a callback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .serializer import SerializeError, Serializer


@dataclass(frozen=True)
class SerializationResult:
    """Outcome of one serialization run."""

    serialized: bytes
    ok: bool
    error_message: str = ""


class SerializerRunnable:
    """Serializes a value when run, e.g. on a worker thread or executor.

    ``run`` returns the result and also hands it to ``on_finished`` when one
    was given, so it fits both callback-style and future-style use.
    """

    def __init__(
        self,
        value: Any = None,
        on_finished: Optional[Callable[[SerializationResult], Any]] = None,
    ) -> None:
        self.value = value
        self.on_finished = on_finished

    def run(self) -> SerializationResult:
        """Serialize the current value and report the result."""
        serializer = Serializer()
        try:
            result = SerializationResult(serializer.serialize(self.value), True, "")
        except SerializeError as exc:
            result = SerializationResult(b"", False, str(exc))
        if self.on_finished is not None:
            self.on_finished(result)
        return result

    __call__ = run