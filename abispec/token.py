"""Values of ABI parameters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Sequence

from . import param_type as pt

__all__ = [
    "Token",
    "AddressToken",
    "FixedBytesToken",
    "BytesToken",
    "IntToken",
    "UintToken",
    "BoolToken",
    "StringToken",
    "FixedArrayToken",
    "ArrayToken",
    "TupleToken",
    "types_check",
]

_WORD_LIMIT = 1 << 256
ADDRESS_LENGTH = 20


@dataclass(frozen=True)
class Token(ABC):
    """Base class of every ABI value."""

    @abstractmethod
    def type_check(self, param_type: pt.ParamType) -> bool:
        """Whether this value can be encoded as ``param_type``."""

    def is_dynamic(self) -> bool:
        """Whether this value is encoded behind an offset."""
        return False

    @abstractmethod
    def __str__(self) -> str:
        """Short textual form of the value."""


@dataclass(frozen=True)
class AddressToken(Token):
    """A 20-byte address."""

    address: bytes

    def __post_init__(self) -> None:
        value = bytes(self.address)
        if len(value) != ADDRESS_LENGTH:
            raise ValueError(f"an address holds {ADDRESS_LENGTH} bytes, got {len(value)}")
        object.__setattr__(self, "address", value)

    def type_check(self, param_type: pt.ParamType) -> bool:
        return param_type == pt.Address()

    def __str__(self) -> str:
        return self.address.hex()


@dataclass(frozen=True)
class _BytesLike(Token):
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def __str__(self) -> str:
        return self.data.hex()


@dataclass(frozen=True)
class FixedBytesToken(_BytesLike):
    """Bytes of a known size."""

    def type_check(self, param_type: pt.ParamType) -> bool:
        return isinstance(param_type, pt.FixedBytes) and param_type.size >= len(self.data)


@dataclass(frozen=True)
class BytesToken(_BytesLike):
    """Bytes of unknown size."""

    def type_check(self, param_type: pt.ParamType) -> bool:
        return param_type == pt.Bytes()

    def is_dynamic(self) -> bool:
        return True


@dataclass(frozen=True)
class _Word(Token):
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value < _WORD_LIMIT:
            raise ValueError(f"{self.value} does not fit in an unsigned 256-bit word")

    def __str__(self) -> str:
        return format(self.value, "x")


@dataclass(frozen=True)
class IntToken(_Word):
    """Signed integer, held as its 256-bit two's complement word."""

    def type_check(self, param_type: pt.ParamType) -> bool:
        return isinstance(param_type, pt.Int)


@dataclass(frozen=True)
class UintToken(_Word):
    """Unsigned integer."""

    def type_check(self, param_type: pt.ParamType) -> bool:
        return isinstance(param_type, pt.Uint)


@dataclass(frozen=True)
class BoolToken(Token):
    """Boolean."""

    value: bool

    def type_check(self, param_type: pt.ParamType) -> bool:
        return param_type == pt.Bool()

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class StringToken(Token):
    """UTF-8 string."""

    value: str

    def type_check(self, param_type: pt.ParamType) -> bool:
        return param_type == pt.String()

    def is_dynamic(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class _Sequence(Token):
    tokens: tuple[Token, ...] = ()

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        object.__setattr__(self, "tokens", tuple(tokens))

    def __iter__(self):
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

    def _joined(self) -> str:
        return ",".join(str(t) for t in self.tokens)


class FixedArrayToken(_Sequence):
    """Array of a known size."""

    def type_check(self, param_type: pt.ParamType) -> bool:
        return (
            isinstance(param_type, pt.FixedArray)
            and param_type.size == len(self.tokens)
            and all(t.type_check(param_type.inner) for t in self.tokens)
        )

    def is_dynamic(self) -> bool:
        return any(t.is_dynamic() for t in self.tokens)

    def __str__(self) -> str:
        return f"[{self._joined()}]"


class ArrayToken(_Sequence):
    """Array of unknown size."""

    def type_check(self, param_type: pt.ParamType) -> bool:
        return isinstance(param_type, pt.Array) and all(
            t.type_check(param_type.inner) for t in self.tokens
        )

    def is_dynamic(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"[{self._joined()}]"


class TupleToken(_Sequence):
    """Tuple of values of possibly different types."""

    def type_check(self, param_type: pt.ParamType) -> bool:
        if not isinstance(param_type, pt.Tuple):
            return False
        params = param_type.params
        if len(self.tokens) > len(params):
            return False
        return all(t.type_check(p) for t, p in zip(self.tokens, params))

    def is_dynamic(self) -> bool:
        return any(t.is_dynamic() for t in self.tokens)

    def __str__(self) -> str:
        return f"({self._joined()})"


def types_check(tokens: Sequence[Token], param_types: Sequence[pt.ParamType]) -> bool:
    """Whether ``tokens`` match ``param_types`` one for one."""
    return len(tokens) == len(param_types) and all(
        token.type_check(kind) for token, kind in zip(tokens, param_types)
    )