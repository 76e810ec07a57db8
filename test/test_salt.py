import pytest

from kdfid import salt
from kdfid import errors
from kdfid import enc_util


# NOTE (mb 2022-10-09): Keys derived without an explicit salt depend
#   on this value. It is hard-coded here so that it is not changed
#   by accident.
DEFAULT_SALT_HEX = "6172676f6e3269642d73686172656421"


def test_default_salt():
    assert salt.resolve_salt() == salt.DEFAULT_SALT
    assert salt.resolve_salt(None) == b"argon2id-shared!"
    assert len(salt.DEFAULT_SALT) == 16
    assert enc_util.bytes2hex(salt.DEFAULT_SALT) == DEFAULT_SALT_HEX


def test_explicit_salt():
    assert salt.resolve_salt("00") == b"\x00"
    assert salt.resolve_salt("0123456789abcdef") == b"\x01\x23\x45\x67\x89\xab\xcd\xef"
    assert salt.resolve_salt("0123456789ABCDEF") == b"\x01\x23\x45\x67\x89\xab\xcd\xef"
    assert salt.resolve_salt(DEFAULT_SALT_HEX) == salt.DEFAULT_SALT


@pytest.mark.parametrize("salt_hex", ["abc", "0", "zz", "00112g", "not hex!"])
def test_invalid_salt_encoding(salt_hex):
    try:
        salt.resolve_salt(salt_hex)
        assert False, f"expected InvalidSaltEncoding for {salt_hex!r}"
    except errors.InvalidSaltEncoding as err:
        assert isinstance(err, ValueError)


def test_odd_length_message():
    try:
        salt.resolve_salt("abc")
        assert False, "expected InvalidSaltEncoding"
    except errors.InvalidSaltEncoding as err:
        assert "even length" in str(err)


def test_empty_salt():
    try:
        salt.resolve_salt("")
        assert False, "expected EmptySalt"
    except errors.EmptySalt:
        pass
