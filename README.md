# kl

A small collection of general-purpose building blocks, with no dependencies
beyond the standard library.

- **`kl.base64`**: `base64_encode`, `base64url_encode`, `base64_decode` and
  `base64url_decode`. Standard encoding pads with `=`. URL-safe encoding
  leaves the padding out. Standard decoding requires the input length to be a
  multiple of 4. URL-safe decoding accepts up to two trailing `=` but does not
  need them. Both decoders raise `ValueError` on malformed input: more than
  two `=`, a truncated quadruple, or a character outside the alphabet.
- **`kl.file_view`**: `FileView(path)` maps a whole file read-only.
  - `contents()` returns the mapped bytes. An empty file gives `b""`.
  - `len()` and `bytes()` work on the view.
  - `close()` unmaps the file. It also runs when a `with` block exits.
  - After closing, `contents()` raises `ValueError`.
  - Errors opening the file propagate as `OSError`.
- **`kl.zip`**:
  - `zipped(*seqs)` iterates sequences in lock step and stops at the shortest. It raises `TypeError` if given none.
  - `enumerated(seq)` yields `(index, item)` pairs.
  - `iota_range(begin, end)` gives the integers from `begin` up to, but not including, `end`.
  - `unbounded_iota_range(begin=0)` counts up from `begin` without end.
- **`kl.enums`**: helpers for `enum.Enum` types with integer values.
  - `for_each_enum(first, last, func)` calls `func` for each value in `[first, last)`.
  - `enum_range(cls, first, last, open_closed=True)` returns an `EnumRangeTraits`. It offers `min_value()`, `max_value()`, `min()`, `max()`, `count()` and `in_range()`, and is iterable. With `open_closed=False` the range includes `last`.
  - `reflect_enum(cls, *members)` registers an `EnumReflector` for `cls` and returns it. Each member entry is a member, a member name, or a `(member, string_form)` pair. With no entries, every member is reflected under its own name.
  - `EnumReflector` provides:
    - `count()`
    - `to_string(value, default=None)`, which falls back to `"unknown <ClassName>"` for an unknown value
    - `from_string(text)`, which returns `None` if no member matches
    - `values()`
    - `is_ordinary_enum()`
  - `is_enum_reflectable(cls)`, `reflect(cls)`, `to_string(member)` and `from_string(cls, text)` use the registered reflector. `reflect` raises `TypeError` for an enum that was never registered.
- **`kl.signal`**: thread-safe signals and slots.
  - `Signal.connect(slot, at=ConnectPosition.AT_BACK)` returns a `Connection`. `None` gives an empty connection. A `weakref.ref` or `weakref.WeakMethod` slot is called only while its referent is alive.
  - Calling the signal calls each connected, unblocked slot in order.
  - `Signal` also has `disconnect_all_slots()`, `num_slots()`, `empty()` and `swap(other)`.
  - `Connection` has `disconnect()`, `connected()` and `blocker()`. Connections are hashable and compare equal when they refer to the same slot.
  - `Blocker` keeps a slot from being called until `release()`, or until its `with` block ends.
  - `ScopedConnection` disconnects when its `with` block ends, unless `release()` was called first.
  - Inside a slot, `stop_emission()` ends the current emission after that slot. `current_connection()` returns the running slot's connection.

This is a library only; it provides no command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from kl.base64 import base64_encode, base64_decode, base64url_encode

assert base64_encode(b"Hello") == "SGVsbG8="
assert base64url_encode(b"Hello") == "SGVsbG8"
assert base64_decode("SGVsbG8=") == b"Hello"

try:
    base64_decode("SGVsbG8==")
except ValueError:
    pass
```

```python
import enum
from kl.enums import enum_range, reflect_enum, to_string, from_string

class AccessMode(enum.Enum):
    READ_WRITE = 0
    WRITE_ONLY = 1
    READ_ONLY = 2
    MAX = 3

reflect_enum(
    AccessMode,
    (AccessMode.READ_WRITE, "read_write"),
    (AccessMode.WRITE_ONLY, "write_only"),
    (AccessMode.READ_ONLY, "read_only"),
    (AccessMode.MAX, "max"),
)
assert to_string(AccessMode.WRITE_ONLY) == "write_only"
assert from_string(AccessMode, "read_write") is AccessMode.READ_WRITE
assert list(enum_range(AccessMode, AccessMode.READ_WRITE, AccessMode.MAX)) == [
    AccessMode.READ_WRITE,
    AccessMode.WRITE_ONLY,
    AccessMode.READ_ONLY,
]
```

```python
from kl.signal import Signal

sig = Signal()
received = []
conn = sig.connect(received.append)
sig(42)
with conn.blocker():
    sig(0)
conn.disconnect()
sig(43)
assert received == [42]
```

```python
from kl.zip import zipped, enumerated

assert list(zipped(["a", "b"], [1, 2, 3])) == [("a", 1), ("b", 2)]
assert list(enumerated("xy")) == [(0, "x"), (1, "y")]
```

```python
from kl.file_view import FileView

with FileView("data.bin") as view:
    header = bytes(view.contents()[:4])
```