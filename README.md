# ttkjson

A small JSON toolkit built around a serializer that turns Python values
into JSON bytes. It offers five indentation layouts, a configurable
precision for floating-point numbers, and optional output of `NaN` and
`Infinity`.

It also includes:

- `SerializerRunnable`, which serializes a value as a unit of work and
  reports the outcome through a callback;
- a `Logger` with one-shot, every-N-calls and rate-limited output;
- `Position` / `Location` helpers for tracking line and column ranges in text.

## Installation

```
pip install ttkjson
```

## Serializing

```python
from ttkjson.serializer import IndentMode, Serializer, SerializeError, dumps

data = {"foo": 0, "foo1": 1, "foo3": [1, 2, 3]}

dumps(data, IndentMode.NONE)
# b'{ "foo" : 0, "foo1" : 1, "foo3" : [ 1, 2, 3 ] }'

dumps(data, IndentMode.COMPACT)
# b'{"foo":0,"foo1":1,"foo3":[1,2,3]}'
```

`IndentMode` has five layouts:

- `NONE` – everything on one line, with spaces around separators;
- `COMPACT` – no whitespace at all;
- `MINIMUM` – objects stay on one line, array items go on their own lines;
- `MEDIUM` – objects open and close on their own lines, members share a line;
- `FULL` – every object member and array item on its own line.

Supported values:

- `None` becomes `null`; `True` / `False` become `true` / `false`;
- lists and tuples become arrays;
- mappings become objects, written with their keys in sorted order
  (keys are converted with `str`);
- `str` is written as a JSON string; every character outside printable
  ASCII is written as a `\uXXXX` escape (surrogate pairs beyond the
  basic plane); `bytes` are decoded as UTF-8 first;
- `int` is written as is; `float` uses `%g`-style formatting with the
  chosen precision (6 by default) and gets `.0` appended when the result
  has neither a point nor an exponent;
- `datetime.date`, `datetime.datetime` and `datetime.time` are written as
  ISO 8601 strings.

Anything else raises `SerializeError`.

Use `Serializer` to choose the precision for floats or to allow special
numbers:

```python
serializer = Serializer(IndentMode.FULL, double_precision=10,
                        special_numbers_allowed=True)
serializer.serialize([1.5, float("nan"), float("-inf")])
```

When special numbers are not allowed, `NaN` and infinities raise
`SerializeError`.

`Serializer.serialize_to(value, stream)` writes the result to a binary
stream. It raises `SerializeError` if the stream is closed, not writable,
or accepts fewer bytes than were produced.

The helpers `build_indent(spaces)` and `escape_string(text)` are also
available from `ttkjson.serializer`.

## Running serialization as a task

```python
from ttkjson.serializerrunnable import SerializerRunnable

def finished(result):
    print(result.ok, result.serialized, result.error_message)

task = SerializerRunnable({"a": 1}, finished)
result = task.run()
```

`run()` (also available by calling the object) serializes with default
settings, passes a `SerializationResult` to the callback when one was
given, and returns it. On failure `ok` is `False`, `serialized` is empty
and `error_message` holds the reason. The object can be handed directly
to a thread or an executor.

## Logging

```python
import sys
from ttkjson.logger import Level, Logger

log = Logger(sys.stderr)
log.log(Level.INFO, "started")
log.once(Level.WARN, "printed a single time")
log.every(10, Level.DEBUG, "printed every tenth call")
log.periodic(5, Level.ERROR, "printed at most once every five seconds")
```

Each line starts with a prefix of the form
`[YYYY-MM-DD HH:MM:SS.mmm][I][file.py(12)] `, built by `format_prefix`.
The `once`, `every` and `periodic` variants keep their state per call
site and return whether the message was written.

## Positions and locations

```python
from ttkjson.location import Location, Position

loc = Location(Position("input.json"))
loc.columns(4)
str(loc)        # 'input.json:1.1-4'
loc.step()      # begin moves to end
```

`Position` supports `lines`, `columns`, and `+` / `-` with a column
width; `Location` supports `step`, `columns`, `lines`, and `+` with
another location or a width.

## What it does not do

The package only writes JSON. It has no parser for reading JSON text
back into Python values, and no command-line tool.