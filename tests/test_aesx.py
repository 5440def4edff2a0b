import pytest

from dkits.aesx import decrypt, encrypt, encrypt_string

KEY = "1234567891234567"


def test_decrypt_with_string_key():
    encrypted = encrypt_string("zcq", KEY.encode())
    assert decrypt(encrypted, KEY) == b"zcq"


def test_decrypt_with_bytes_key():
    encrypted = encrypt(b"zcq", KEY.encode())
    assert decrypt(encrypted, KEY.encode()) == b"zcq"


def test_encrypt_is_deterministic_and_block_sized():
    first = encrypt(b"zcq", KEY.encode())
    assert first == encrypt(b"zcq", KEY)
    assert first == encrypt_string("zcq", KEY)
    assert len(first) == 16


def test_full_block_adds_padding_block():
    assert len(encrypt(b"a" * 16, KEY)) == 32


@pytest.mark.parametrize("bad_key", [None, b"", b"short"])
def test_invalid_key(bad_key):
    with pytest.raises(ValueError):
        encrypt(b"zcq", bad_key)
    with pytest.raises(ValueError):
        decrypt(b"\x00" * 16, bad_key)


def test_decrypt_partial_block():
    with pytest.raises(ValueError):
        decrypt(b"abc", KEY)