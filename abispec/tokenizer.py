"""Parsing of textual values into tokens."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Sequence

from . import param_type as pt
from .token import (
    AddressToken,
    ArrayToken,
    BoolToken,
    BytesToken,
    FixedArrayToken,
    FixedBytesToken,
    IntToken,
    StringToken,
    Token,
    TupleToken,
    UintToken,
)
from .util import InvalidData

__all__ = ["Tokenizer"]


def _split_items(value: str, opening: str, closing: str) -> Iterator[str]:
    """Yield the top-level items of a bracketed, comma separated list."""
    if not value.startswith(opening) or not value.endswith(closing):
        raise InvalidData()
    if len(value) == 2:
        return

    nested = 0
    ignore = False
    last_item = 1
    for pos, ch in enumerate(value):
        if ch == opening and not ignore:
            nested += 1
        elif ch == closing and not ignore:
            nested -= 1
            if nested < 0:
                raise InvalidData()
            if nested == 0:
                yield value[last_item:pos]
                last_item = pos + 1
        elif ch == '"':
            ignore = not ignore
        elif ch == "," and nested == 1 and not ignore:
            yield value[last_item:pos]
            last_item = pos + 1

    if ignore:
        raise InvalidData()


class Tokenizer(ABC):
    """Turns strings into tokens; subclasses decide how primitive values are read."""

    def tokenize(self, param: pt.ParamType, value: str) -> Token:
        """Parse ``value`` as a token of type ``param``."""
        match param:
            case pt.Address():
                return AddressToken(self.tokenize_address(value))
            case pt.String():
                return StringToken(self.tokenize_string(value))
            case pt.Bool():
                return BoolToken(self.tokenize_bool(value))
            case pt.Bytes():
                return BytesToken(self.tokenize_bytes(value))
            case pt.FixedBytes(size):
                return FixedBytesToken(self.tokenize_fixed_bytes(value, size))
            case pt.Uint():
                return UintToken(self.tokenize_uint(value))
            case pt.Int():
                return IntToken(self.tokenize_int(value))
            case pt.Array(inner):
                return ArrayToken(self.tokenize_array(value, inner))
            case pt.FixedArray(inner, size):
                return FixedArrayToken(self.tokenize_fixed_array(value, inner, size))
            case pt.Tuple(params):
                return TupleToken(self.tokenize_struct(value, params))
        raise TypeError(f"not a parameter type: {param!r}")

    def tokenize_fixed_array(self, value: str, param: pt.ParamType, length: int) -> list[Token]:
        """Parse ``value`` as an array of exactly ``length`` elements."""
        result = self.tokenize_array(value, param)
        if len(result) != length:
            raise InvalidData()
        return result

    def tokenize_struct(self, value: str, params: Sequence[pt.ParamType]) -> list[Token]:
        """Parse ``value`` written as ``(a,b,...)`` against ``params`` in order."""
        kinds = iter(params)
        result = []
        for item in _split_items(value, "(", ")"):
            kind = next(kinds, None)
            if kind is None:
                raise InvalidData()
            result.append(self.tokenize(kind, item))
        return result

    def tokenize_array(self, value: str, param: pt.ParamType) -> list[Token]:
        """Parse ``value`` written as ``[a,b,...]`` with every element of type ``param``."""
        return [self.tokenize(param, item) for item in _split_items(value, "[", "]")]

    @abstractmethod
    def tokenize_address(self, value: str) -> bytes:
        """Parse an address, returning its 20 bytes."""

    @abstractmethod
    def tokenize_string(self, value: str) -> str:
        """Parse a string."""

    @abstractmethod
    def tokenize_bool(self, value: str) -> bool:
        """Parse a boolean."""

    @abstractmethod
    def tokenize_bytes(self, value: str) -> bytes:
        """Parse bytes of any length."""

    @abstractmethod
    def tokenize_fixed_bytes(self, value: str, length: int) -> bytes:
        """Parse bytes of the given length."""

    @abstractmethod
    def tokenize_uint(self, value: str) -> int:
        """Parse an unsigned integer as a 256-bit word."""

    @abstractmethod
    def tokenize_int(self, value: str) -> int:
        """Parse a signed integer as a 256-bit two's complement word."""