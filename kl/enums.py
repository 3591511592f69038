"""Enum helpers: contiguous ranges and name reflection."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from enum import Enum
from typing import Any, Generic, TypeVar

__all__ = [
    "for_each_enum",
    "EnumRangeTraits",
    "enum_range",
    "EnumReflector",
    "reflect_enum",
    "is_enum_reflectable",
    "reflect",
    "to_string",
    "from_string",
]

E = TypeVar("E", bound=Enum)

_registry: dict[type[Enum], EnumReflector[Any]] = {}


def _underlying(value: Any) -> int:
    return value.value if isinstance(value, Enum) else int(value)


def for_each_enum(first: E, last: E, func: Callable[[E], Any]) -> None:
    """Call func for every value in the half-open range [first, last)."""
    enum_cls = type(first)
    for index in range(_underlying(first), _underlying(last)):
        func(enum_cls(index))


class EnumRangeTraits(Generic[E]):
    """Describes a contiguous range of an enum's underlying values.

    With ``open_closed`` true the range is [first, last); otherwise it is
    [first, last] and the upper bound is ``last + 1``.
    """

    def __init__(
        self,
        enum_cls: type[E],
        first: E,
        last: E,
        open_closed: bool = True,
    ) -> None:
        self.enum_cls = enum_cls
        self._min = _underlying(first)
        self._max = _underlying(last) if open_closed else _underlying(last) + 1
        if self._max - self._min <= 0:
            raise ValueError("enum range must contain at least one value")

    def min_value(self) -> int:
        return self._min

    def max_value(self) -> int:
        return self._max

    def min(self) -> E:
        return self.enum_cls(self._min)

    def max(self) -> E:
        """The member at the upper bound; ValueError if no member has that value."""
        return self.enum_cls(self._max)

    def count(self) -> int:
        return self._max - self._min

    def in_range(self, value: E | int) -> bool:
        return self._min <= _underlying(value) < self._max

    def __iter__(self) -> Iterator[E]:
        for index in range(self._min, self._max):
            yield self.enum_cls(index)


def enum_range(
    enum_cls: type[E], first: E, last: E, open_closed: bool = True
) -> EnumRangeTraits[E]:
    """Return an iterable over the members in the given range."""
    return EnumRangeTraits(enum_cls, first, last, open_closed)


class EnumReflector(Generic[E]):
    """String conversions for an enum over an explicit list of members.

    Each entry of ``names`` is a member, a member name, or a pair of
    (member or member name, string form).
    """

    def __init__(self, enum_cls: type[E], names: Iterable[Any]) -> None:
        self.enum_cls = enum_cls
        pairs = []
        for item in names:
            if isinstance(item, tuple):
                if len(item) != 2:
                    raise ValueError(f"expected (member, name) pair, got {item!r}")
                member, name = self._resolve(item[0]), str(item[1])
            else:
                member = self._resolve(item)
                name = member.name
            pairs.append((member, name))
        if not pairs:
            raise ValueError("an enum reflection needs at least one value")
        self._pairs: tuple[tuple[E, str], ...] = tuple(pairs)
        self.unknown_name = f"unknown <{enum_cls.__name__}>"

    def _resolve(self, item: Any) -> E:
        if isinstance(item, self.enum_cls):
            return item
        if isinstance(item, str):
            try:
                return self.enum_cls[item]
            except KeyError:
                raise ValueError(
                    f"{self.enum_cls.__name__} has no member {item!r}"
                ) from None
        raise TypeError(f"cannot reflect {item!r} as {self.enum_cls.__name__}")

    def count(self) -> int:
        return len(self._pairs)

    def from_string(self, text: str) -> E | None:
        """Return the member whose string form is text, or None."""
        for member, name in self._pairs:
            if name == text:
                return member
        return None

    def to_string(self, value: E | int, default: str | None = None) -> str:
        """Return the string form of value, or default when it is unknown."""
        key = value.value if isinstance(value, self.enum_cls) else value
        for member, name in self._pairs:
            if member.value == key:
                return name
        return self.unknown_name if default is None else default

    def values(self) -> tuple[E, ...]:
        return tuple(member for member, _ in self._pairs)

    def is_ordinary_enum(self) -> bool:
        """True if the values run 0, 1, ..., count-1 in declaration order."""
        values = [member.value for member, _ in self._pairs]
        if values[0] != 0 or values[-1] != len(values) - 1:
            return False
        return all(a < b for a, b in zip(values, values[1:]))


def reflect_enum(enum_cls: type[E], *args: Any) -> EnumReflector[E]:
    """Register reflection data for enum_cls and return its reflector.

    Without arguments every member is reflected under its own name.
    """
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
        raise TypeError(f"{enum_cls!r} is not an enum type")
    reflector = EnumReflector(enum_cls, args or list(enum_cls))
    _registry[enum_cls] = reflector
    return reflector


def is_enum_reflectable(obj: Any) -> bool:
    return isinstance(obj, type) and issubclass(obj, Enum) and obj in _registry


def reflect(enum_cls: type[E]) -> EnumReflector[E]:
    """Return the registered reflector; TypeError if there is none."""
    if not is_enum_reflectable(enum_cls):
        raise TypeError(f"{enum_cls!r} is not a reflectable enum")
    return _registry[enum_cls]


def to_string(value: Enum) -> str:
    return reflect(type(value)).to_string(value)


def from_string(enum_cls: type[E], text: str) -> E | None:
    return reflect(enum_cls).from_string(text)