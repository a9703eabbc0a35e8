"""
dhchannel

A console demo of a Diffie-Hellman secure-channel bootstrap:
- DH key agreement over illustrative (insecure) domain parameters
- Shared secret to AES-128 key conversion
- AES-128 (ECB, PKCS#7) message exchange between two parties
"""

from .party import Party, PartyState
from .exchange import run_exchange, ExchangeResult

__version__ = "1.0.0"

__all__ = [
    'Party',
    'PartyState',
    'run_exchange',
    'ExchangeResult',
]
