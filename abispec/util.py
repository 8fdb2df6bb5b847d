"""Errors and small helpers shared across the package."""

from __future__ import annotations

__all__ = ["AbiError", "InvalidName", "InvalidData", "pad_u32", "sanitize_name"]


class AbiError(ValueError):
    """Base class for every error raised by this package."""


class InvalidName(AbiError):
    """A type name could not be understood."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid name `{name}`")
        self.name = name


class InvalidData(AbiError):
    """Data does not match what was expected."""

    def __init__(self, message: str = "Invalid data") -> None:
        super().__init__(message)


def pad_u32(value: int) -> bytes:
    """Return a 32-byte word holding ``value`` as a right-aligned big-endian u32."""
    if value < 0:
        raise OverflowError(f"{value} is not an unsigned 32-bit value")
    return bytes(28) + value.to_bytes(4, "big")


def sanitize_name(name: str) -> str:
    """Drop everything from the first ``(`` on, as some ABIs put signatures in names."""
    head, _, _ = name.partition("(")
    return head