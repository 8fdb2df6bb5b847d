"""Topic filters for event logs."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Iterable, TypeVar

from .util import InvalidData

__all__ = ["Topic", "TopicFilter", "RawTopicFilter"]

T = TypeVar("T")
O = TypeVar("O")

_HASH_LENGTH = 32


class _Kind(Enum):
    ANY = "any"
    ONE_OF = "one_of"
    THIS = "this"


@dataclass(frozen=True)
class Topic(Generic[T]):
    """Acceptable values for one topic: any value, one of several, or exactly one."""

    kind: _Kind = _Kind.ANY
    values: tuple = ()

    @classmethod
    def any(cls) -> Topic[T]:
        """Match any value."""
        return cls(_Kind.ANY, ())

    @classmethod
    def one_of(cls, values: Iterable[T]) -> Topic[T]:
        """Match any of ``values``."""
        return cls(_Kind.ONE_OF, tuple(values))

    @classmethod
    def this(cls, value: T) -> Topic[T]:
        """Match only ``value``."""
        return cls(_Kind.THIS, (value,))

    @classmethod
    def from_value(cls, value: Any) -> Topic[Any]:
        """``None`` matches anything, a list matches any member, anything else itself."""
        if isinstance(value, Topic):
            return value
        if value is None:
            return cls.any()
        if isinstance(value, list):
            return cls.one_of(value)
        return cls.this(value)

    def map(self, func: Callable[[T], O]) -> Topic[O]:
        """Apply ``func`` to every value."""
        if self.kind is _Kind.ANY:
            return Topic.any()
        if self.kind is _Kind.THIS:
            return Topic.this(func(self.values[0]))
        return Topic.one_of(func(v) for v in self.values)

    def is_any(self) -> bool:
        """Whether this topic matches any value."""
        return self.kind is _Kind.ANY

    def to_list(self) -> list[T]:
        """The accepted values; empty when any value matches."""
        return list(self.values)

    def __getitem__(self, index: int) -> T:
        if self.kind is _Kind.ANY:
            raise IndexError("Topic unavailable")
        if self.kind is _Kind.THIS and index != 0:
            raise IndexError("Topic unavailable")
        return self.values[index]

    def to_json_value(self) -> Any:
        """JSON form of a topic of 32-byte hashes: null, a string or a list of strings."""
        if self.kind is _Kind.ANY:
            return None
        if self.kind is _Kind.THIS:
            return _hash_hex(self.values[0])
        return [_hash_hex(v) for v in self.values]


def _hash_hex(value: Any) -> str:
    if not isinstance(value, (bytes, bytearray)) or len(value) != _HASH_LENGTH:
        raise InvalidData(f"a topic hash holds {_HASH_LENGTH} bytes")
    return "0x" + bytes(value).hex()


@dataclass(frozen=True)
class TopicFilter:
    """Filter over the four topics of a log; the first is usually the event signature."""

    topic0: Topic = field(default_factory=Topic.any)
    topic1: Topic = field(default_factory=Topic.any)
    topic2: Topic = field(default_factory=Topic.any)
    topic3: Topic = field(default_factory=Topic.any)

    def to_json_value(self) -> list[Any]:
        """JSON form: a list of four topic values."""
        return [
            t.to_json_value() for t in (self.topic0, self.topic1, self.topic2, self.topic3)
        ]

    def to_json(self) -> str:
        """Compact JSON text of this filter."""
        return json.dumps(self.to_json_value(), separators=(",", ":"))


@dataclass(frozen=True)
class RawTopicFilter:
    """Filter over the indexed parameters of an event, given as tokens."""

    topic0: Topic = field(default_factory=Topic.any)
    topic1: Topic = field(default_factory=Topic.any)
    topic2: Topic = field(default_factory=Topic.any)