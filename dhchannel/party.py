"""
A single participant in the DH exchange.

Each Party owns its private key and everything derived from it. Nothing is
shared between parties; only public values and ciphertexts are handed over.
"""

from enum import Enum
from typing import Optional

from dhchannel.common.exceptions import ProtocolError
from dhchannel.common.protocol import DomainParameters
from dhchannel.crypto import aes
from dhchannel.crypto.bigint import generate_private_key
from dhchannel.crypto.dh import (
    compute_public_value, compute_shared_secret, derive_aes_key
)


class PartyState(Enum):
    INITIALIZED = "initialized"
    PUBLIC_VALUE_COMPUTED = "public_value_computed"
    SECRET_ESTABLISHED = "secret_established"


class Party:
    """
    One side of the exchange (conventionally "initiator" or "responder").

    Lifecycle: INITIALIZED -> PUBLIC_VALUE_COMPUTED -> SECRET_ESTABLISHED.
    """

    def __init__(self, params: DomainParameters, name: str = "party", private_key: Optional[int] = None):
        """
        Initialize the party and draw its private key.

        Args:
            params: Domain parameters shared with the peer
            name: Label used in reports and messages
            private_key: Fixed private key; drawn from the OS random source if None

        Raises:
            EntropyUnavailable: If no private key can be drawn
        """
        self.params = params
        self.name = name
        self._private_key = generate_private_key() if private_key is None else private_key
        self._public_value = None
        self._shared_secret = None
        self._key = None
        self.state = PartyState.INITIALIZED

    @property
    def private_key(self) -> int:
        return self._private_key

    def compute_public_value(self) -> int:
        """Move to PUBLIC_VALUE_COMPUTED and return g^private mod p."""
        if self._public_value is None:
            self._public_value = compute_public_value(self.params, self._private_key)
            self.state = PartyState.PUBLIC_VALUE_COMPUTED
        return self._public_value

    def public_value(self) -> int:
        if self._public_value is None:
            raise ProtocolError(f"{self.name}: public value not computed yet")
        return self._public_value

    def derive_secret(self, peer_public_value: int) -> int:
        """
        Compute the shared secret from the peer's public value.

        Calling again replaces the previous secret and key.

        Raises:
            ProtocolError: If the public value has not been computed
        """
        if self.state is PartyState.INITIALIZED:
            raise ProtocolError(f"{self.name}: compute the public value before deriving a secret")

        self._shared_secret = compute_shared_secret(self._private_key, peer_public_value, self.params)
        self._key = derive_aes_key(self._shared_secret)
        self.state = PartyState.SECRET_ESTABLISHED
        return self._shared_secret

    def shared_secret(self) -> int:
        self._require_secret()
        return self._shared_secret

    def symmetric_key(self) -> bytes:
        self._require_secret()
        return self._key

    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt with the derived key."""
        self._require_secret()
        return aes.encrypt(plaintext, self._key)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """
        Decrypt with the derived key.

        Raises:
            PaddingInvalid: On a key mismatch or corrupted ciphertext
        """
        self._require_secret()
        return aes.decrypt(ciphertext, self._key)

    def _require_secret(self):
        if self.state is not PartyState.SECRET_ESTABLISHED:
            raise ProtocolError(f"{self.name}: no shared secret established")

    def __repr__(self):
        return f"Party(name={self.name!r}, state={self.state.value})"
