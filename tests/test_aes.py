"""
Unit tests for AES-128-ECB with PKCS#7 padding.
"""

import pytest

from dhchannel.common.exceptions import EncryptionError, PaddingInvalid
from dhchannel.crypto.aes import encrypt, decrypt, pkcs7_pad, pkcs7_unpad


KEY = b'0123456789ABCDEF'
OTHER_KEY = b'FEDCBA9876543210'


def test_round_trip():
    for message in [b"TEST", b"", b"A" * 15, b"B" * 16, b"C" * 17, bytes(range(256))]:
        assert decrypt(encrypt(message, KEY), KEY) == message


def test_ciphertext_length():
    for length in (0, 1, 15, 16, 17, 31, 32, 100):
        expected = 16 * ((length + 1 + 15) // 16)
        assert len(encrypt(b"x" * length, KEY)) == expected


def test_empty_plaintext_is_one_block():
    ct = encrypt(b"", KEY)
    assert len(ct) == 16
    assert decrypt(ct, KEY) == b""


def test_ecb_is_deterministic():
    assert encrypt(b"TEST", KEY) == encrypt(b"TEST", KEY)


def test_wrong_key_never_returns_plaintext():
    message = b"This is the Diffie-Hellman key exchange protocol!"
    ct = encrypt(message, KEY)
    try:
        result = decrypt(ct, OTHER_KEY)
    except PaddingInvalid:
        return
    assert result != message


def test_truncated_ciphertext():
    ct = encrypt(b"some longer message here", KEY)
    with pytest.raises(PaddingInvalid):
        decrypt(ct[:-1], KEY)
    with pytest.raises(PaddingInvalid):
        decrypt(b"", KEY)


def test_padding_invalid_is_encryption_error():
    with pytest.raises(EncryptionError):
        decrypt(b"\x00" * 15, KEY)


def test_bad_key_length():
    with pytest.raises(EncryptionError):
        encrypt(b"TEST", b"short")
    with pytest.raises(EncryptionError):
        decrypt(bytes(16), b"k" * 32)


def test_pkcs7_pad():
    assert pkcs7_pad(b"") == bytes([16] * 16)
    assert pkcs7_pad(b"TEST") == b"TEST" + bytes([12] * 12)


def test_pkcs7_unpad_rejects_malformed():
    with pytest.raises(PaddingInvalid):
        pkcs7_unpad(b"A" * 15 + b"\x00")
    with pytest.raises(PaddingInvalid):
        pkcs7_unpad(b"A" * 15 + b"\x11")
    with pytest.raises(PaddingInvalid):
        pkcs7_unpad(b"A" * 13 + b"\x02\x03\x03")
