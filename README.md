# abispec

A Python library for working with Ethereum contract ABI descriptions:

- **Parameter types** (`abispec.param_type`): parse type names such as
  `uint256`, `bytes32[]` or `(address,bool)[2]` into `ParamType` objects and
  write them back out.
- **Tokens** (`abispec.token`): typed values (`UintToken`, `AddressToken`,
  `ArrayToken`, ...) that can be checked against parameter types.
- **Tokenizing** (`abispec.tokenizer`): a `Tokenizer` base class that splits
  textual arrays and tuples such as `"[1,0]"` or `"(true,foo)"` and builds
  tokens of a given type.
- **Signatures** (`abispec.signature`): the Keccak-256 based 4-byte selector
  and the full 32-byte hash of a function or event signature.
- **JSON specifications** (`abispec.param`, `abispec.function`,
  `abispec.state_mutability`): read and write `Param`, `TupleParam` and
  `Function` entries as found in contract ABI JSON files, including nested
  tuple components and `stateMutability`.
- **Logs and filters** (`abispec.filter`, `abispec.log`): `Topic`,
  `TopicFilter` and `RawTopicFilter` for event log filters, and the `RawLog`,
  `LogParam` and `Log` records.

## Installation

```
pip install abispec
```

The only runtime dependency is `pycryptodome`, used for Keccak-256.

## Parameter types

```python
from abispec.param_type import read, write, write_for_abi, Array, Uint

kind = read("(uint256,bytes32)[]")
print(write(kind))                   # (uint256,bytes32)[]
print(write_for_abi(kind, False))    # tuple[]
print(kind.is_dynamic())             # True
print(str(Array(Uint(256))))         # uint256[]
```

`int` and `uint` without a size read as 256 bits, and `tuple` reads as an
empty `Tuple`. An unknown type name raises `abispec.util.InvalidName`.
`ParamType.is_empty_bytes_valid_encoding()` is true only for zero-sized
`FixedBytes` and `FixedArray`.

## Tokens

```python
from abispec.param_type import Uint, Bool, FixedBytes
from abispec.token import UintToken, BoolToken, FixedBytesToken, types_check

types_check([UintToken(0), BoolToken(False)], [Uint(256), Bool()])  # True
FixedBytesToken(b"\x00\x00\x00").type_check(FixedBytes(4))         # True
str(UintToken(255))                                                 # 'ff'
```

`IntToken` and `UintToken` hold a value in `0 <= value < 2**256`; a signed
integer is held as its two's complement word. `AddressToken` holds exactly
20 bytes.

## Tokenizing

`Tokenizer.tokenize(param, value)` handles arrays, fixed arrays and tuples
itself and leaves primitive values to a subclass, which implements
`tokenize_address`, `tokenize_string`, `tokenize_bool`, `tokenize_bytes`,
`tokenize_fixed_bytes`, `tokenize_uint` and `tokenize_int`. Unbalanced
brackets, an unclosed `"` or a wrong element count raise `InvalidData`.

## Signatures

```python
from abispec.param_type import Uint, Bool
from abispec.signature import short_signature, long_signature

short_signature("baz", [Uint(32), Bool()]).hex()   # 'cdcd77c0'
long_signature("baz", [Uint(32), Bool()])          # full 32-byte hash
```

## Functions and parameters from ABI JSON

```python
from abispec.function import Function

func = Function.from_dict({
    "type": "function",
    "name": "baz",
    "inputs": [
        {"name": "a", "type": "uint32"},
        {"name": "b", "type": "bool"},
    ],
    "outputs": [],
    "stateMutability": "payable",
})

func.signature()              # 'baz(uint32,bool)'
func.short_signature().hex()  # 'cdcd77c0'
func.to_dict()                # back to a JSON-ready dict
```

Names such as `"foo()"` are cleaned to `"foo"` when read
(`abispec.util.sanitize_name`). A missing `stateMutability` defaults to
`StateMutability.NON_PAYABLE`.

`Param.from_dict` and `TupleParam.from_dict` read single parameters; a
`tuple`, `tuple[]` or `tuple[N]` type takes its members from `components`,
and `to_dict` writes them back the same way. `param_type_from_json` reads a
bare type name.

## Topic filters and logs

```python
from abispec.filter import Topic, TopicFilter

topic_filter = TopicFilter(
    topic0=Topic.this(bytes.fromhex("00" * 12 + "a94f5374fce5edbc8e2a8697c15331677e6ebf0b")),
    topic1=Topic.any(),
)
topic_filter.to_json()   # '["0x000000000000000000000000a94f...",null,null,null]'
```

`Topic.from_value` accepts `None` (any), a list (one of) or a single value;
`Topic.to_list` turns a topic back into a list, and indexing a topic that
matches anything raises `IndexError("Topic unavailable")`.
`RawLog.from_tuple((topics, data))` builds a raw log.

## What this package does not do

It does not encode tokens into call data or decode call data and log data
back into tokens, and it does not read whole contract ABI files: there are
no constructor, event or error specifications and no contract object. It
ships no concrete `Tokenizer`, and it has no command-line interface.

## Errors

All errors derive from `abispec.util.AbiError` (itself a `ValueError`);
`InvalidName` reports an unreadable type name and `InvalidData` reports
values or JSON that do not match what is expected.

## Running the tests

```
pip install -e ".[test]"
pytest
```