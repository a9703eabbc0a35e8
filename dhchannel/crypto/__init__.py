"""
Cryptographic primitives for dhchannel.

This package provides:
- Big-integer helpers (modular exponentiation, fixed-width conversion)
- Diffie-Hellman key agreement and key derivation
- AES-128 encryption/decryption with PKCS#7 padding
"""

from .aes import encrypt, decrypt
from .bigint import generate_private_key, modexp, to_le_bytes
from .dh import generate_keypair, compute_public_value, compute_shared_secret, derive_aes_key

__all__ = [
    'encrypt',
    'decrypt',
    'generate_private_key',
    'modexp',
    'to_le_bytes',
    'generate_keypair',
    'compute_public_value',
    'compute_shared_secret',
    'derive_aes_key',
]
