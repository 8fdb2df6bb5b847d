"""Ethereum contract ABI types, tokens, signatures, JSON specifications and log filters."""

__version__ = "0.1.0"

__all__ = [
    "util",
    "param_type",
    "token",
    "tokenizer",
    "signature",
    "state_mutability",
    "param",
    "function",
    "filter",
    "log",
]