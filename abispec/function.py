"""Contract function specification."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterable

from .param import Param
from .param_type import ParamType
from .signature import short_signature as _short_signature
from .state_mutability import StateMutability
from .util import InvalidData, sanitize_name

__all__ = ["Function"]


def _params(data: Mapping[str, Any], key: str) -> tuple[Param, ...]:
    if key not in data:
        raise InvalidData(f"missing field `{key}`")
    raw = data[key]
    if not isinstance(raw, list):
        raise InvalidData(f"field `{key}` must be a list")
    return tuple(Param.from_dict(item) for item in raw)


@dataclass(frozen=True)
class Function:
    """A contract function: its name, inputs, outputs and mutability."""

    name: str
    inputs: tuple[Param, ...] = ()
    outputs: tuple[Param, ...] = ()
    # Removed from the language in favour of ``state_mutability``; kept for old ABIs.
    constant: bool = False
    state_mutability: StateMutability = field(default_factory=StateMutability.default)

    def __init__(
        self,
        name: str,
        inputs: Iterable[Param] = (),
        outputs: Iterable[Param] = (),
        constant: bool = False,
        state_mutability: StateMutability | None = None,
    ) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "inputs", tuple(inputs))
        object.__setattr__(self, "outputs", tuple(outputs))
        object.__setattr__(self, "constant", constant)
        object.__setattr__(
            self,
            "state_mutability",
            StateMutability.default() if state_mutability is None else state_mutability,
        )

    @property
    def input_param_types(self) -> list[ParamType]:
        """Types of the input parameters, in order."""
        return [p.kind for p in self.inputs]

    @property
    def output_param_types(self) -> list[ParamType]:
        """Types of the output parameters, in order."""
        return [p.kind for p in self.outputs]

    def short_signature(self) -> bytes:
        """The 4-byte selector of this function."""
        return _short_signature(self.name, self.input_param_types)

    def signature(self) -> str:
        """A string that identifies this function, such as ``f(bool):(uint256)``."""
        inputs = ",".join(str(p.kind) for p in self.inputs)
        if not self.outputs:
            return f"{self.name}({inputs})"
        outputs = ",".join(str(p.kind) for p in self.outputs)
        return f"{self.name}({inputs}):({outputs})"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Function:
        """Build a function from its JSON ABI object."""
        if not isinstance(data, Mapping):
            raise InvalidData("expected a function spec object")
        if "name" not in data:
            raise InvalidData("missing field `name`")
        name = data["name"]
        if not isinstance(name, str):
            raise InvalidData("field `name` must be a string")
        constant = data.get("constant", False)
        if not isinstance(constant, bool):
            raise InvalidData("field `constant` must be a boolean")
        mutability = StateMutability.default()
        if "stateMutability" in data:
            try:
                mutability = StateMutability(data["stateMutability"])
            except ValueError:
                raise InvalidData(
                    f"unknown state mutability {data['stateMutability']!r}"
                ) from None
        return cls(
            name=sanitize_name(name),
            inputs=_params(data, "inputs"),
            outputs=_params(data, "outputs"),
            constant=constant,
            state_mutability=mutability,
        )

    def to_dict(self) -> dict[str, Any]:
        """The JSON ABI object for this function."""
        return {
            "name": self.name,
            "inputs": [p.to_dict() for p in self.inputs],
            "outputs": [p.to_dict() for p in self.outputs],
            "constant": self.constant,
            "stateMutability": self.state_mutability.value,
        }