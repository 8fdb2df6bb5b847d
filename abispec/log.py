"""Raw and decoded event logs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .token import Token

__all__ = ["RawLog", "LogParam", "Log"]


@dataclass(frozen=True)
class RawLog:
    """A log as stored: indexed parameters as topics, the rest as plain data."""

    topics: tuple[bytes, ...]
    data: bytes

    def __init__(self, topics: Iterable[bytes], data: bytes) -> None:
        object.__setattr__(self, "topics", tuple(bytes(t) for t in topics))
        object.__setattr__(self, "data", bytes(data))

    @classmethod
    def from_tuple(cls, raw: tuple[Iterable[bytes], bytes]) -> RawLog:
        """Build a log from a ``(topics, data)`` pair."""
        topics, data = raw
        return cls(topics, data)


@dataclass(frozen=True)
class LogParam:
    """A decoded log parameter."""

    name: str
    value: Token


@dataclass(frozen=True)
class Log:
    """A decoded log."""

    params: tuple[LogParam, ...] = ()

    def __init__(self, params: Iterable[LogParam] = ()) -> None:
        object.__setattr__(self, "params", tuple(params))