"""Conversion of Python values into JSON text with selectable layouts."""

from __future__ import annotations

import datetime
import enum
import math
from collections.abc import Mapping
from typing import Any, BinaryIO


class IndentMode(enum.IntEnum):
    """How much whitespace the serializer puts into its output.

    NONE:    ``{ "a" : 1, "b" : [ 1, 2 ] }``
    COMPACT: ``{"a":1,"b":[1,2]}``
    MINIMUM: objects stay on one line, array items go on their own lines.
    MEDIUM:  objects open and close on their own lines, members share a line.
    FULL:    every object member and array item on its own line.
    """

    NONE = 0
    COMPACT = 1
    MINIMUM = 2
    MEDIUM = 3
    FULL = 4


class SerializeError(ValueError):
    """Raised when a value cannot be written as JSON."""


_INDENTED = (IndentMode.FULL, IndentMode.MEDIUM, IndentMode.MINIMUM)
_BLOCK = (IndentMode.FULL, IndentMode.MEDIUM)

_SHORT_ESCAPES = {
    0x22: b'\\"',
    0x5C: b"\\\\",
    0x08: b"\\b",
    0x0C: b"\\f",
    0x0A: b"\\n",
    0x0D: b"\\r",
    0x09: b"\\t",
}


def build_indent(spaces: int) -> bytes:
    """Return ``spaces`` blanks; negative counts give no indentation."""
    return b" " * max(0, spaces)


def escape_string(text: str) -> bytes:
    """Quote ``text`` as a JSON string, escaping everything outside printable ASCII.

    Characters beyond the basic plane are written as UTF-16 surrogate pairs.
    """
    encoded = text.encode("utf-16-le", "surrogatepass")
    units = (int.from_bytes(encoded[i : i + 2], "little") for i in range(0, len(encoded), 2))
    parts = [b'"']
    for unit in units:
        short = _SHORT_ESCAPES.get(unit)
        if short is not None:
            parts.append(short)
        elif 0x1F < unit < 128:
            parts.append(bytes((unit,)))
        else:
            parts.append(f"\\u{unit:04x}".encode("ascii"))
    parts.append(b'"')
    return b"".join(parts)


class Serializer:
    """Turns nested lists, dicts and scalars into JSON bytes.

    Mappings are written with their keys in sorted order.
    """

    def __init__(
        self,
        indent_mode: IndentMode = IndentMode.NONE,
        double_precision: int = 6,
        special_numbers_allowed: bool = False,
    ) -> None:
        self.indent_mode = IndentMode(indent_mode)
        self.double_precision = double_precision
        self.special_numbers_allowed = special_numbers_allowed

    def serialize(self, value: Any) -> bytes:
        """Return the JSON text for ``value``; raise SerializeError if it cannot be written."""
        return self._serialize(value, 0)

    def serialize_to(self, value: Any, stream: BinaryIO) -> None:
        """Write the JSON text for ``value`` to a binary stream."""
        if getattr(stream, "closed", False):
            raise SerializeError("Error opening device")
        writable = getattr(stream, "writable", None)
        if writable is not None and not writable():
            raise SerializeError("Device is not writable")
        data = self.serialize(value)
        written = stream.write(data)
        if isinstance(written, int) and written != len(data):
            raise SerializeError("Something went wrong while writing to IO device")

    def _serialize(self, value: Any, level: int) -> bytes:
        if value is None:
            return b"null"
        if isinstance(value, (list, tuple)):
            return self._array(value, level)
        if isinstance(value, Mapping):
            return self._object(value, level)
        return self._scalar(value, level)

    def _array(self, items: list | tuple, level: int) -> bytes:
        mode = self.indent_mode
        values = []
        for item in items:
            text = self._serialize(item, level + 1)
            values.append(text if mode in _INDENTED else text.strip())
        if mode in _INDENTED:
            indent = build_indent(level)
            return indent + b"[\n" + b",\n".join(values) + b"\n" + indent + b"]"
        if mode is IndentMode.COMPACT:
            return b"[" + b",".join(values) + b"]"
        return b"[ " + b", ".join(values) + b" ]"

    def _object(self, mapping: Mapping, level: int) -> bytes:
        mode = self.indent_mode
        if mode is IndentMode.MINIMUM:
            head = build_indent(level) + b"{ "
        elif mode in _BLOCK:
            head = build_indent(level) + b"{\n" + build_indent(level + 1)
        elif mode is IndentMode.COMPACT:
            head = b"{"
        else:
            head = b"{ "

        separator = b":" if mode is IndentMode.COMPACT else b" : "
        pairs = []
        for key in sorted(mapping, key=str):
            text = self._serialize(mapping[key], level + 1).strip()
            pairs.append(escape_string(str(key)) + separator + text)

        if mode is IndentMode.FULL:
            body = (b",\n" + build_indent(level + 1)).join(pairs)
        elif mode is IndentMode.COMPACT:
            body = b",".join(pairs)
        else:
            body = b", ".join(pairs)

        if mode in _BLOCK:
            tail = b"\n" + build_indent(level) + b"}"
        elif mode is IndentMode.COMPACT:
            tail = b"}"
        else:
            tail = b" }"
        return head + body + tail

    def _scalar(self, value: Any, level: int) -> bytes:
        prefix = build_indent(level) if self.indent_mode in _INDENTED else b""
        if isinstance(value, str):
            return prefix + escape_string(value)
        if isinstance(value, (bytes, bytearray)):
            return prefix + escape_string(bytes(value).decode("utf-8", "replace"))
        if isinstance(value, bool):
            return prefix + (b"true" if value else b"false")
        if isinstance(value, float):
            return self._double(value, prefix)
        if isinstance(value, int):
            return prefix + str(value).encode("ascii")
        if isinstance(value, (datetime.date, datetime.time)):
            return prefix + escape_string(value.isoformat())
        raise SerializeError(
            f"Cannot serialize {value!r} because type {type(value).__name__} is not supported"
        )

    def _double(self, value: float, prefix: bytes) -> bytes:
        if math.isnan(value) or math.isinf(value):
            if not self.special_numbers_allowed:
                raise SerializeError(
                    "Attempt to write NaN or infinity, which is not supported by json"
                )
            if math.isnan(value):
                return prefix + b"NaN"
            return prefix + (b"-Infinity" if value < 0 else b"Infinity")
        precision = self.double_precision if self.double_precision >= 0 else 6
        # Finite doubles are written without the indentation prefix.
        text = f"{value:.{precision}g}"
        if "." not in text and "e" not in text:
            text += ".0"
        return text.encode("ascii")


def dumps(value: Any, indent_mode: IndentMode = IndentMode.NONE) -> bytes:
    """Serialize ``value`` with default settings and the given layout."""
    return Serializer(indent_mode=indent_mode).serialize(value)