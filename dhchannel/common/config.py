"""
Runtime configuration for dhchannel.

Values come from the environment (optionally a .env file). The defaults are
the small demo group used for reproducible output; they are NOT secure.
"""

import os
from typing import Optional
from dotenv import load_dotenv

from .exceptions import InvalidParameters
from .protocol import DomainParameters

# Load environment variables
load_dotenv()

DEFAULT_BASE = 5
DEFAULT_MODULUS = 57

DEFAULT_MESSAGE_A = "This is the Diffie-Hellman key exchange protocol!"
DEFAULT_MESSAGE_B = "This protocol is a symmetric encryption algorithm!"


def _int_setting(name: str, value, default: int) -> int:
    if value is None:
        value = os.getenv(name, str(default))
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameters(f"{name} must be an integer, got {value!r}") from e


def load_domain_parameters(base: Optional[int] = None, modulus: Optional[int] = None) -> DomainParameters:
    """
    Build DomainParameters from explicit values or the environment.
    
    Args:
        base: Overrides DH_BASE
        modulus: Overrides DH_MODULUS
    
    Returns:
        Validated DomainParameters
    
    Raises:
        InvalidParameters: If a value is not an integer or modulus <= 1
    """
    return DomainParameters(
        base=_int_setting('DH_BASE', base, DEFAULT_BASE),
        modulus=_int_setting('DH_MODULUS', modulus, DEFAULT_MODULUS),
    )


def load_messages() -> tuple:
    """Return (message_a, message_b) for the demo exchange."""
    return (
        os.getenv('DH_MESSAGE_A', DEFAULT_MESSAGE_A),
        os.getenv('DH_MESSAGE_B', DEFAULT_MESSAGE_B),
    )


def transcript_path() -> Optional[str]:
    """Path to write the exchange transcript to, or None."""
    return os.getenv('DH_TRANSCRIPT_PATH') or None
