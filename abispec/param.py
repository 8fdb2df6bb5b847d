"""Function and tuple parameters, and their JSON ABI form."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Sequence

from .param_type import Array, FixedArray, ParamType, Tuple, read, write_for_abi
from .util import InvalidData

__all__ = ["Param", "TupleParam", "param_type_from_json"]


def param_type_from_json(value: Any) -> ParamType:
    """Read a parameter type from its JSON ABI name, such as ``"uint256[]"``."""
    if not isinstance(value, str):
        raise InvalidData("expected a correct name of abi-encodable parameter type")
    return read(value)


def _inner_tuple(kind: ParamType) -> Tuple | None:
    """The tuple at the bottom of any array nesting, if there is one."""
    while True:
        match kind:
            case Array(inner) | FixedArray(inner, _):
                kind = inner
            case Tuple():
                return kind
            case _:
                return None


def _extend_inner_tuple(kind: ParamType, extra: Sequence[ParamType]) -> ParamType:
    match kind:
        case Array(inner):
            return Array(_extend_inner_tuple(inner, extra))
        case FixedArray(inner, size):
            return FixedArray(_extend_inner_tuple(inner, extra), size)
        case Tuple(params):
            return Tuple((*params, *extra))
    return kind


def _set_tuple_components(
    kind: ParamType, components: list[TupleParam] | None
) -> ParamType:
    if _inner_tuple(kind) is None:
        return kind
    if components is None:
        raise InvalidData("missing field `components`")
    return _extend_inner_tuple(kind, [c.kind for c in components])


def _serialize_kind(kind: ParamType) -> dict[str, Any]:
    result: dict[str, Any] = {"type": write_for_abi(kind, False)}
    inner = _inner_tuple(kind)
    if inner is not None:
        result["components"] = [_serialize_kind(p) for p in inner.params]
    return result


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise InvalidData(f"field `{key}` must be a string")
    return value


def _read_spec(data: Any, what: str) -> tuple[str | None, ParamType, str | None]:
    if not isinstance(data, Mapping):
        raise InvalidData(f"expected a valid {what} parameter spec")
    name = _optional_str(data, "name")
    if "type" not in data:
        raise InvalidData("missing field `type`")
    kind = param_type_from_json(data["type"])
    internal_type = _optional_str(data, "internalType")
    components = None
    if "components" in data:
        raw = data["components"]
        if not isinstance(raw, list):
            raise InvalidData("field `components` must be a list")
        components = [TupleParam.from_dict(item) for item in raw]
    return name, _set_tuple_components(kind, components), internal_type


def _write_spec(
    name: str | None, kind: ParamType, internal_type: str | None
) -> dict[str, Any]:
    result: dict[str, Any] = {}
    if internal_type is not None:
        result["internalType"] = internal_type
    if name is not None:
        result["name"] = name
    result.update(_serialize_kind(kind))
    return result


@dataclass(frozen=True)
class Param:
    """A named function parameter."""

    name: str
    kind: ParamType
    internal_type: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Param:
        """Build a parameter from its JSON ABI object."""
        name, kind, internal_type = _read_spec(data, "event")
        if name is None:
            raise InvalidData("missing field `name`")
        return cls(name=name, kind=kind, internal_type=internal_type)

    def to_dict(self) -> dict[str, Any]:
        """The JSON ABI object for this parameter."""
        return _write_spec(self.name, self.kind, self.internal_type)


@dataclass(frozen=True)
class TupleParam:
    """A tuple component, whose name is optional."""

    name: str | None
    kind: ParamType
    internal_type: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TupleParam:
        """Build a tuple component from its JSON ABI object."""
        name, kind, internal_type = _read_spec(data, "tuple")
        return cls(name=name, kind=kind, internal_type=internal_type)

    def to_dict(self) -> dict[str, Any]:
        """The JSON ABI object for this component."""
        return _write_spec(self.name, self.kind, self.internal_type)