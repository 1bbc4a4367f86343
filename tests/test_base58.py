import pytest

from libss58 import base58
from .utils import does_not_raise


@pytest.mark.parametrize('v,expected_value,expected_err',  (
        ('HelloWorld', b'54uZdajEaDdN6F', does_not_raise()),
        (b'HelloWorld', b'54uZdajEaDdN6F', does_not_raise()),
        ('D3ADB0D4', b'CQdPxL6ytwV', does_not_raise()),
        (type('test_bytes', (bytes,), {})(b'D3ADB0D4'), b'CQdPxL6ytwV', does_not_raise()),
        (bytearray(b'\x00\x00\x01'), b'112', does_not_raise()),
        (b'', b'', does_not_raise()),
        ('Привет', b'', pytest.raises(ValueError)),
        (None, b'', pytest.raises(TypeError)),
    ))
def test_b58encode(v, expected_value, expected_err):
    with expected_err:
        assert base58.b58encode(v) == expected_value


@pytest.mark.parametrize('v,expected_value,expected_err',  (
        (b'54uZdajEaDdN6F', b'HelloWorld', does_not_raise()),
        ('54uZdajEaDdN6F', b'HelloWorld', does_not_raise()),
        ('C7t1bx5byEq', b'ByMeBeer', does_not_raise()),
        (type('test_bytes', (bytes,), {})(b'r4j1UTw7anDX'), b'BuyMeBeer', does_not_raise()),
        ('112', b'\x00\x00\x01', does_not_raise()),
        ('', b'', does_not_raise()),
        ('Привет', b'', pytest.raises(ValueError)),
        ('ÂBCDÊ', b'', pytest.raises(ValueError)),
        ('!#', b'', pytest.raises(ValueError)),
        ('0OIl', b'', pytest.raises(ValueError)),
        ('54uZdajEaDdN6F\n', b'', pytest.raises(ValueError)),
        (None, b'', pytest.raises(TypeError)),
    ))
def test_b58decode(v, expected_value, expected_err):
    with expected_err:
        assert base58.b58decode(v) == expected_value


def test_b58decode_int():
    assert base58.b58decode_int('') == 0
    assert base58.b58decode_int('2') == 1
    assert base58.b58decode_int('21') == 58


def test_b58encode_int():
    assert base58.b58encode_int(0) == b''
    assert base58.b58encode_int(58) == b'21'
