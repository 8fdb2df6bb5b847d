"""How a function treats blockchain state."""

from __future__ import annotations

from enum import Enum

__all__ = ["StateMutability"]


class StateMutability(str, Enum):
    """Whether a function reads or modifies blockchain state."""

    PURE = "pure"
    VIEW = "view"
    NON_PAYABLE = "nonpayable"
    PAYABLE = "payable"

    @classmethod
    def default(cls) -> StateMutability:
        """The mutability assumed when none is given."""
        return cls.NON_PAYABLE