import os

import pytest

from kdfid.enc_util import *


def test_bytes2hex():
    assert bytes2hex(b"test data") == '746573742064617461'
    assert hex2bytes('746573742064617461') == b"test data"
    data = b"\x01\x23\x45\x67\x89\xAB\xCD\xEF"
    text = '0123456789aBcDeF'
    assert bytes2hex(data) == text.lower()
    assert hex2bytes(text) == data
    assert hex2bytes(text.upper()) == data
    assert hex2bytes(text.lower()) == data


def test_hex2bytes_empty():
    assert hex2bytes("") == b""


INVALID_HEX_CASES = [
    "abc",
    "0",
    "zz",
    "0x00",
    "00 11",
    "é1",
]


@pytest.mark.parametrize("hex_str", INVALID_HEX_CASES)
def test_hex2bytes_invalid(hex_str):
    try:
        hex2bytes(hex_str)
        assert False, f"expected ValueError for {hex_str!r}"
    except ValueError:
        pass


def test_hex2bytes_fuzz():
    for _ in range(100):
        data     = os.urandom(10)
        hex_text = bytes2hex(data)
        assert hex2bytes(hex_text) == data


BASE64_TEST_CASES = [
    [b""                , ""],
    [b"\x00\x01\x02"    , "AAEC"],
    [b"\xff\xfe"        , "//4="],
    [b"\xfb\xef"        , "++8="],
    [b"argon2id-shared!", "YXJnb24yaWQtc2hhcmVkIQ=="],
]


@pytest.mark.parametrize("data, expected", BASE64_TEST_CASES)
def test_bytes2base64(data, expected):
    assert bytes2base64(data) == expected
    assert base642bytes(expected) == data
