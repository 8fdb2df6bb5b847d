"""Function and event parameter types, with their textual form."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from .util import InvalidName

__all__ = [
    "ParamType",
    "Address",
    "Bytes",
    "Int",
    "Uint",
    "Bool",
    "String",
    "Array",
    "FixedBytes",
    "FixedArray",
    "Tuple",
    "read",
    "write",
    "write_for_abi",
]

_NUMBER = re.compile(r"\+?[0-9]+")


class ParamType:
    """Base class of all parameter types."""

    __slots__ = ()

    def is_dynamic(self) -> bool:
        """Whether values of this type are encoded behind an offset."""
        return False

    def is_empty_bytes_valid_encoding(self) -> bool:
        """Whether an empty byte string is a valid encoding of this type."""
        return False

    def __str__(self) -> str:
        return write(self)


@dataclass(frozen=True)
class Address(ParamType):
    """Address."""


@dataclass(frozen=True)
class Bytes(ParamType):
    """Bytes of unknown length."""

    def is_dynamic(self) -> bool:
        return True


@dataclass(frozen=True)
class Int(ParamType):
    """Signed integer of ``size`` bits."""

    size: int


@dataclass(frozen=True)
class Uint(ParamType):
    """Unsigned integer of ``size`` bits."""

    size: int


@dataclass(frozen=True)
class Bool(ParamType):
    """Boolean."""


@dataclass(frozen=True)
class String(ParamType):
    """UTF-8 string."""

    def is_dynamic(self) -> bool:
        return True


@dataclass(frozen=True)
class Array(ParamType):
    """Array of unknown length."""

    inner: ParamType

    def is_dynamic(self) -> bool:
        return True


@dataclass(frozen=True)
class FixedBytes(ParamType):
    """Bytes of a fixed length."""

    size: int

    def is_empty_bytes_valid_encoding(self) -> bool:
        return self.size == 0


@dataclass(frozen=True)
class FixedArray(ParamType):
    """Array of a fixed length."""

    inner: ParamType
    size: int

    def is_dynamic(self) -> bool:
        return self.inner.is_dynamic()

    def is_empty_bytes_valid_encoding(self) -> bool:
        return self.size == 0


@dataclass(frozen=True)
class Tuple(ParamType):
    """Tuple of possibly different types."""

    params: tuple[ParamType, ...] = ()

    def __init__(self, params: Iterable[ParamType] = ()) -> None:
        object.__setattr__(self, "params", tuple(params))

    def is_dynamic(self) -> bool:
        return any(p.is_dynamic() for p in self.params)


def write(param: ParamType) -> str:
    """Return the canonical textual form of ``param``, tuples spelled out."""
    return write_for_abi(param, True)


def write_for_abi(param: ParamType, serialize_tuple_contents: bool) -> str:
    """Return the textual form of ``param``.

    Tuples are written as ``(t1,t2,...)`` when ``serialize_tuple_contents``
    is true and as the keyword ``tuple`` otherwise.
    """
    match param:
        case Address():
            return "address"
        case Bytes():
            return "bytes"
        case FixedBytes(size):
            return f"bytes{size}"
        case Int(size):
            return f"int{size}"
        case Uint(size):
            return f"uint{size}"
        case Bool():
            return "bool"
        case String():
            return "string"
        case FixedArray(inner, size):
            return f"{write_for_abi(inner, serialize_tuple_contents)}[{size}]"
        case Array(inner):
            return f"{write_for_abi(inner, serialize_tuple_contents)}[]"
        case Tuple(params):
            if not serialize_tuple_contents:
                return "tuple"
            inner = ",".join(write_for_abi(p, serialize_tuple_contents) for p in params)
            return f"({inner})"
    raise TypeError(f"not a parameter type: {param!r}")


def _parse_size(text: str, name: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise InvalidName(name)
    return int(text)


def _read_tuple(name: str) -> Tuple:
    if not name.startswith("("):
        raise InvalidName(name)

    subtypes: list[ParamType] = []
    subtuples: list[list[ParamType]] = []
    nested = 0
    top_level_paren_open = 0
    last_item = 1
    length = len(name)
    pos = 0

    while pos < length:
        c = name[pos]
        if c == "(":
            top_level_paren_open = pos
            nested += 1
            if nested > 1:
                subtuples.append([])
                last_item = pos + 1
        elif c == ")":
            nested -= 1
            if nested < 0:
                raise InvalidName(name)
            if not name[last_item:pos]:
                last_item = pos + 1
            elif nested == 0:
                subtypes.append(read(name[last_item:pos]))
                last_item = pos + 1
            else:
                # keep any trailing array brackets with the nested tuple
                while pos + 1 < length and name[pos + 1] not in ",)":
                    pos += 1
                subtype = read(name[top_level_paren_open : pos + 1])
                if nested > 1:
                    subtuple = subtuples[nested - 2]
                    subtuples[nested - 2] = []
                    subtuple.append(subtype)
                    subtypes.append(Tuple(subtuple))
                else:
                    subtypes.append(subtype)
                last_item = pos + 1
        elif c == ",":
            if not name[last_item:pos]:
                last_item = pos + 1
            elif nested == 1:
                subtypes.append(read(name[last_item:pos]))
                last_item = pos + 1
            elif nested > 1:
                subtuples[nested - 2].append(read(name[last_item:pos]))
                last_item = pos + 1
        pos += 1

    return Tuple(subtypes)


def _read_array(name: str) -> ParamType:
    body = name[:-1]
    bracket = body.rfind("[")
    num = body[bracket + 1 :]
    prefix_len = len(name) - len(num) - 2
    if prefix_len < 0:
        raise InvalidName(name)
    if not num:
        return Array(read(name[:prefix_len]))
    size = _parse_size(num, name)
    return FixedArray(read(name[:prefix_len]), size)


def read(name: str) -> ParamType:
    """Parse a textual type name such as ``uint256[]`` or ``(address,bool)``."""
    if name.endswith(")"):
        return _read_tuple(name)
    if name.endswith("]"):
        return _read_array(name)

    simple = {
        "address": Address(),
        "bytes": Bytes(),
        "bool": Bool(),
        "string": String(),
        "int": Int(256),
        "tuple": Tuple(),
        "uint": Uint(256),
    }
    if name in simple:
        return simple[name]
    if name.startswith("int"):
        return Int(_parse_size(name[3:], name))
    if name.startswith("uint"):
        return Uint(_parse_size(name[4:], name))
    if name.startswith("bytes"):
        return FixedBytes(_parse_size(name[5:], name))
    raise InvalidName(name)