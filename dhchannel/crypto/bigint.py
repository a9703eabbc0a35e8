"""
Arbitrary-precision integer helpers used by the DH exchange.

Python ints are already arbitrary precision; this module adds the operand
checks and the fixed-width conversions the exchange relies on.
"""

import secrets

from ..common.exceptions import InvalidParameters, EntropyUnavailable


PRIVATE_KEY_BITS = 128


def from_random_bytes(data: bytes) -> int:
    """Interpret a fixed-width random buffer as a little-endian unsigned int."""
    return int.from_bytes(data, byteorder='little')


def generate_private_key(bits: int = PRIVATE_KEY_BITS) -> int:
    """
    Draw a private key uniformly from [0, 2^bits).
    
    Args:
        bits: Key width in bits (default: 128)
    
    Returns:
        Random non-negative integer
    
    Raises:
        EntropyUnavailable: If the OS random source cannot be read
    """
    try:
        data = secrets.token_bytes((bits + 7) // 8)
    except (OSError, NotImplementedError) as e:
        raise EntropyUnavailable(f"Cannot read random source: {e}") from e

    # Mask off bits above the requested width
    return from_random_bytes(data) & ((1 << bits) - 1)


def modexp(base: int, exponent: int, modulus: int) -> int:
    """
    Compute base^exponent mod modulus.
    
    Returns:
        Integer in [0, modulus); exponent 0 gives 1 % modulus
    
    Raises:
        InvalidParameters: If modulus <= 0 or base/exponent is negative
    """
    if modulus <= 0:
        raise InvalidParameters(f"Modulus must be positive, got {modulus}")
    if base < 0 or exponent < 0:
        raise InvalidParameters("Base and exponent must be non-negative")
    return pow(base, exponent, modulus)


def to_le_bytes(value: int, size: int = 16) -> bytes:
    """
    Convert to exactly `size` little-endian bytes.
    
    Values wider than `size` bytes keep only their least significant bytes;
    narrower values are zero padded.
    
    Raises:
        InvalidParameters: If value is negative
    """
    if value < 0:
        raise InvalidParameters(f"Cannot convert negative value {value}")
    return (value % (1 << (8 * size))).to_bytes(size, byteorder='little')
