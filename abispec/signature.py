"""Keccak-256 based function and event signatures."""

from __future__ import annotations

from typing import Sequence

from Crypto.Hash import keccak

from .param_type import ParamType, write

__all__ = ["short_signature", "long_signature"]


def _digest(name: str, params: Sequence[ParamType]) -> bytes:
    types = ",".join(write(p) for p in params)
    return keccak.new(digest_bits=256, data=f"{name}({types})".encode()).digest()


def short_signature(name: str, params: Sequence[ParamType]) -> bytes:
    """First four bytes of the Keccak-256 hash of ``name(types)``."""
    return _digest(name, params)[:4]


def long_signature(name: str, params: Sequence[ParamType]) -> bytes:
    """Full Keccak-256 hash of ``name(types)``."""
    return _digest(name, params)