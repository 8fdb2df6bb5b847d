import json

import pytest

from abispec.param import Param, TupleParam, param_type_from_json
from abispec.param_type import (
    Address,
    Array,
    Bool,
    Bytes,
    FixedArray,
    FixedBytes,
    Int,
    String,
    Tuple,
    Uint,
)
from abispec.util import AbiError, InvalidData, InvalidName


def _param(s):
    return Param.from_dict(json.loads(s))


def _tuple_param(s):
    return TupleParam.from_dict(json.loads(s))


def test_param_type_deserialization():
    names = json.loads(
        '["address", "bytes", "bytes32", "bool", "string", "int", "uint", '
        '"address[]", "uint[3]", "bool[][5]", "tuple[]"]'
    )
    assert [param_type_from_json(n) for n in names] == [
        Address(),
        Bytes(),
        FixedBytes(32),
        Bool(),
        String(),
        Int(256),
        Uint(256),
        Array(Address()),
        FixedArray(Uint(256), 3),
        FixedArray(Array(Bool()), 5),
        Array(Tuple()),
    ]


def test_param_type_from_json_errors():
    with pytest.raises(InvalidName):
        param_type_from_json("foo")
    with pytest.raises(InvalidData):
        param_type_from_json(5)


def test_param_simple():
    s = '{"name": "foo", "type": "address"}'
    p = _param(s)
    assert p == Param(name="foo", kind=Address(), internal_type=None)
    assert p.to_dict() == json.loads(s)


def test_param_simple_internal_type():
    s = '{"name": "foo", "type": "address", "internalType": "struct Verifier.Proof"}'
    p = _param(s)
    assert p == Param(name="foo", kind=Address(), internal_type="struct Verifier.Proof")
    assert p.to_dict() == json.loads(s)


NESTED = """{
    "name": "foo",
    "type": "tuple",
    "components": [
        {"type": "uint48"},
        {"type": "tuple", "components": [{"type": "address"}]}
    ]
}"""


def test_param_tuple():
    p = _param(NESTED)
    assert p == Param(name="foo", kind=Tuple([Uint(48), Tuple([Address()])]))
    assert p.to_dict() == json.loads(NESTED)


def test_param_tuple_internal_type():
    data = json.loads(NESTED)
    data["internalType"] = "struct Pairing.G1Point[]"
    p = Param.from_dict(data)
    assert p == Param(
        name="foo",
        kind=Tuple([Uint(48), Tuple([Address()])]),
        internal_type="struct Pairing.G1Point[]",
    )
    assert p.to_dict() == data


def test_param_tuple_named():
    s = """{
        "name": "foo",
        "type": "tuple",
        "components": [
            {"name": "amount", "type": "uint48"},
            {"name": "things", "type": "tuple",
             "components": [{"name": "baseTupleParam", "type": "address"}]}
        ]
    }"""
    p = _param(s)
    assert p == Param(name="foo", kind=Tuple([Uint(48), Tuple([Address()])]))
    assert Param.from_dict(json.loads(json.dumps(p.to_dict()))) == p


def test_param_tuple_array():
    s = """{"name": "foo", "type": "tuple[]",
        "components": [{"type": "uint48"}, {"type": "address"}, {"type": "address"}]}"""
    p = _param(s)
    assert p == Param(name="foo", kind=Array(Tuple([Uint(48), Address(), Address()])))
    assert p.to_dict() == json.loads(s)


def test_param_array_of_array_of_tuple():
    s = """{"name": "foo", "type": "tuple[][]",
        "components": [{"type": "uint8"}, {"type": "uint16"}]}"""
    p = _param(s)
    assert p == Param(name="foo", kind=Array(Array(Tuple([Uint(8), Uint(16)]))))
    assert p.to_dict() == json.loads(s)


def test_param_tuple_fixed_array():
    s = """{"name": "foo", "type": "tuple[2]",
        "components": [{"type": "uint48"}, {"type": "address"}, {"type": "address"}]}"""
    p = _param(s)
    assert p == Param(
        name="foo", kind=FixedArray(Tuple([Uint(48), Address(), Address()]), 2)
    )
    assert p.to_dict() == json.loads(s)


NESTED_ARRAYS = """{
    "name": "foo",
    "type": "tuple",
    "components": [
        {"type": "tuple[]", "components": [{"type": "address"}]},
        {"type": "tuple[42]", "components": [{"type": "address"}]}
    ]
}"""


def test_param_tuple_with_nested_tuple_arrays():
    p = _param(NESTED_ARRAYS)
    assert p == Param(
        name="foo",
        kind=Tuple([Array(Tuple([Address()])), FixedArray(Tuple([Address()]), 42)]),
    )
    assert p.to_dict() == json.loads(NESTED_ARRAYS)


def test_param_to_dict_key_order():
    p = Param(name="foo", kind=Tuple([Bool()]), internal_type="struct S")
    assert list(p.to_dict()) == ["internalType", "name", "type", "components"]


def test_param_missing_name():
    with pytest.raises(InvalidData):
        Param.from_dict({"type": "address"})


def test_param_missing_type():
    with pytest.raises(InvalidData):
        Param.from_dict({"name": "foo"})


def test_param_missing_components():
    with pytest.raises(InvalidData):
        Param.from_dict({"name": "foo", "type": "tuple[]"})


def test_param_invalid_type_name():
    with pytest.raises(AbiError):
        Param.from_dict({"name": "foo", "type": "uint2x"})


def test_param_not_a_mapping():
    with pytest.raises(InvalidData):
        Param.from_dict(["name", "type"])


def test_tuple_param_simple():
    s = '{"name": "foo", "type": "address"}'
    p = _tuple_param(s)
    assert p == TupleParam(name="foo", kind=Address(), internal_type=None)
    assert p.to_dict() == json.loads(s)


def test_tuple_param_internal_type():
    s = '{"internalType": "struct Verifier.Proof", "name": "foo", "type": "address"}'
    p = _tuple_param(s)
    assert p == TupleParam(
        name="foo", kind=Address(), internal_type="struct Verifier.Proof"
    )
    assert p.to_dict() == json.loads(s)


def test_tuple_param_unnamed():
    s = '{"type": "address"}'
    p = _tuple_param(s)
    assert p == TupleParam(name=None, kind=Address(), internal_type=None)
    assert p.to_dict() == json.loads(s)


def test_tuple_param_tuple():
    data = json.loads(NESTED)
    del data["name"]
    p = TupleParam.from_dict(data)
    assert p == TupleParam(name=None, kind=Tuple([Uint(48), Tuple([Address()])]))
    assert p.to_dict() == data


def test_tuple_param_tuple_named():
    s = """{
        "type": "tuple",
        "components": [
            {"name": "amount", "type": "uint48"},
            {"name": "things", "type": "tuple",
             "components": [{"name": "baseTupleParam", "type": "address"}]}
        ]
    }"""
    p = _tuple_param(s)
    assert p == TupleParam(name=None, kind=Tuple([Uint(48), Tuple([Address()])]))
    assert TupleParam.from_dict(json.loads(json.dumps(p.to_dict()))) == p


def test_tuple_param_tuple_array():
    s = """{"type": "tuple[]",
        "components": [{"type": "uint48"}, {"type": "address"}, {"type": "address"}]}"""
    p = _tuple_param(s)
    assert p == TupleParam(name=None, kind=Array(Tuple([Uint(48), Address(), Address()])))
    assert p.to_dict() == json.loads(s)


def test_tuple_param_array_of_array_of_tuple():
    s = """{"type": "tuple[][]",
        "components": [{"type": "uint8"}, {"type": "uint16"}]}"""
    p = _tuple_param(s)
    assert p == TupleParam(name=None, kind=Array(Array(Tuple([Uint(8), Uint(16)]))))
    assert p.to_dict() == json.loads(s)


def test_tuple_param_tuple_fixed_array():
    s = """{"type": "tuple[2]",
        "components": [{"type": "uint48"}, {"type": "address"}, {"type": "address"}]}"""
    p = _tuple_param(s)
    assert p == TupleParam(
        name=None, kind=FixedArray(Tuple([Uint(48), Address(), Address()]), 2)
    )
    assert p.to_dict() == json.loads(s)


def test_tuple_param_with_nested_tuple_arrays():
    data = json.loads(NESTED_ARRAYS)
    del data["name"]
    p = TupleParam.from_dict(data)
    assert p == TupleParam(
        name=None,
        kind=Tuple([Array(Tuple([Address()])), FixedArray(Tuple([Address()]), 42)]),
    )
    assert p.to_dict() == data


def test_tuple_param_missing_type():
    with pytest.raises(InvalidData):
        TupleParam.from_dict({"name": "foo"})


def test_tuple_param_missing_components():
    with pytest.raises(InvalidData):
        TupleParam.from_dict({"type": "tuple"})