from abispec import param_type as pt
from abispec.signature import long_signature, short_signature


def test_signature():
    assert short_signature("baz", [pt.Uint(32), pt.Bool()]) == bytes.fromhex("cdcd77c0")


def test_transfer_selector():
    assert short_signature("transfer", [pt.Address(), pt.Uint(256)]) == bytes.fromhex("a9059cbb")


def test_long_signature_of_transfer_event():
    expected = bytes.fromhex("ddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef")
    assert long_signature("Transfer", [pt.Address(), pt.Address(), pt.Uint(256)]) == expected


def test_short_is_prefix_of_long():
    params = [pt.Array(pt.Tuple([pt.Uint(256), pt.FixedBytes(32)])), pt.String()]
    long = long_signature("f", params)
    assert len(long) == 32
    assert short_signature("f", params) == long[:4]