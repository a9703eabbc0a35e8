"""
AES-128 Encryption/Decryption with PKCS#7 Padding

This module implements AES-128 in ECB mode with PKCS#7 padding.
ECB without a MAC is kept on purpose for the demo (not for production!):
identical blocks leak, and ciphertext tampering is not detected.
"""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.backends import default_backend

from ..common.exceptions import EncryptionError, PaddingInvalid


BLOCK_SIZE = 16


def pkcs7_pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Apply PKCS#7 padding to data.
    
    Always adds between 1 and block_size bytes.
    
    Args:
        data: Data to pad
        block_size: Block size in bytes (default: 16 for AES)
    
    Returns:
        Padded data
    """
    padding_length = block_size - (len(data) % block_size)
    padding = bytes([padding_length] * padding_length)
    return data + padding


def pkcs7_unpad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Remove PKCS#7 padding from data.
    
    Args:
        data: Padded data
        block_size: Block size in bytes (default: 16 for AES)
    
    Returns:
        Unpadded data
    
    Raises:
        PaddingInvalid: If padding is invalid
    """
    if not data:
        raise PaddingInvalid("Cannot unpad empty data")
    
    padding_length = data[-1]
    
    if padding_length < 1 or padding_length > block_size or padding_length > len(data):
        raise PaddingInvalid(f"Invalid padding length: {padding_length}")
    
    # Verify all padding bytes are correct
    for i in range(padding_length):
        if data[-(i + 1)] != padding_length:
            raise PaddingInvalid("Invalid PKCS#7 padding")
    
    return data[:-padding_length]


def _cipher(key: bytes) -> Cipher:
    if len(key) != 16:
        raise EncryptionError(f"AES-128 requires 16-byte key, got {len(key)} bytes")
    return Cipher(
        algorithms.AES(key),
        modes.ECB(),
        backend=default_backend()
    )


def encrypt(plaintext: bytes, key: bytes) -> bytes:
    """
    Encrypt plaintext using AES-128 ECB mode with PKCS#7 padding.
    
    Args:
        plaintext: Bytes to encrypt
        key: 16-byte AES key
    
    Returns:
        Ciphertext, 16 * ceil((len(plaintext) + 1) / 16) bytes long
    
    Raises:
        EncryptionError: If key length is not 16 bytes
    """
    encryptor = _cipher(key).encryptor()
    padded_data = pkcs7_pad(plaintext)
    return encryptor.update(padded_data) + encryptor.finalize()


def decrypt(ciphertext: bytes, key: bytes) -> bytes:
    """
    Decrypt ciphertext using AES-128 ECB mode.
    
    Args:
        ciphertext: Ciphertext bytes
        key: 16-byte AES key
    
    Returns:
        Decrypted plaintext bytes
    
    Raises:
        EncryptionError: If key length is not 16 bytes
        PaddingInvalid: If the ciphertext is empty, truncated, or its
            padding is malformed (usually a wrong key)
    """
    decryptor = _cipher(key).decryptor()
    
    if not ciphertext or len(ciphertext) % BLOCK_SIZE:
        raise PaddingInvalid(
            f"Ciphertext length {len(ciphertext)} is not a positive multiple of {BLOCK_SIZE}"
        )
    
    padded_plaintext = decryptor.update(ciphertext) + decryptor.finalize()
    return pkcs7_unpad(padded_plaintext)


# Test function for development
if __name__ == "__main__":
    test_key = b'0123456789ABCDEF'  # 16 bytes
    test_message = b"Hello, dhchannel!"
    
    print(f"Original: {test_message}")
    
    encrypted = encrypt(test_message, test_key)
    print(f"Encrypted (hex): {encrypted.hex()}")
    
    decrypted = decrypt(encrypted, test_key)
    print(f"Decrypted: {decrypted}")
    
    assert decrypted == test_message, "Encryption/Decryption test failed!"
    print("\n[✓] AES encryption/decryption test passed!")
