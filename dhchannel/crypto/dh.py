"""
Diffie-Hellman Key Exchange

Implements classical DH over caller-supplied domain parameters and converts
the shared secret into an AES-128 key.

WARNING: the key derivation is a plain truncation of the secret, with no hash
or salt. Two secrets that agree on their low 16 bytes give the same key. Do
not reuse this for production key derivation.
"""

from typing import Optional, Tuple

from ..common.protocol import DomainParameters
from .bigint import generate_private_key, modexp, to_le_bytes


AES_KEY_SIZE = 16


def compute_public_value(params: DomainParameters, private_key: int) -> int:
    """
    Compute the public value g^private_key mod p.
    
    Args:
        params: Domain parameters (base g, modulus p)
        private_key: Own private key
    
    Returns:
        Public value in [0, p)
    """
    return modexp(params.base, private_key, params.modulus)


def generate_keypair(params: DomainParameters, private_key: Optional[int] = None) -> Tuple[int, int]:
    """
    Generate a DH keypair.
    
    Args:
        params: Domain parameters
        private_key: Fixed private key (test vectors); drawn at random if None
    
    Returns:
        Tuple of (private_key, public_key)
        private_key: Random 128-bit integer
        public_key: g^private_key mod p
    """
    if private_key is None:
        private_key = generate_private_key()
    return (private_key, compute_public_value(params, private_key))


def compute_shared_secret(private_key: int, peer_public_value: int, params: DomainParameters) -> int:
    """
    Compute the shared secret using the peer's public value.
    
    The peer value is reduced modulo p before use instead of being rejected.
    No validation of the peer value beyond that is done (unauthenticated
    exchange).
    
    Args:
        private_key: Own private key
        peer_public_value: Peer's public value
        params: Domain parameters
    
    Returns:
        Shared secret K_s = peer_public_value^private_key mod p
    """
    return modexp(peer_public_value % params.modulus, private_key, params.modulus)


def derive_aes_key(shared_secret: int) -> bytes:
    """
    Derive AES-128 key from DH shared secret.
    
    The key is derived as:
        K = LE_16(K_s)
    i.e. the 16 least significant bytes of K_s, little-endian, zero padded.
    
    Args:
        shared_secret: DH shared secret (integer)
    
    Returns:
        16-byte AES key
    """
    return to_le_bytes(shared_secret, AES_KEY_SIZE)


# Test function for development
if __name__ == "__main__":
    print("[*] Testing Diffie-Hellman Key Exchange")
    
    params = DomainParameters(base=5, modulus=57)
    print(f"\n[1] Parameters: g={params.base}, p={params.modulus}")
    
    alice_private, alice_public = generate_keypair(params)
    bob_private, bob_public = generate_keypair(params)
    print(f"\n[2] Alice: private={alice_private} public={alice_public}")
    print(f"    Bob:   private={bob_private} public={bob_public}")
    
    alice_shared = compute_shared_secret(alice_private, bob_public, params)
    bob_shared = compute_shared_secret(bob_private, alice_public, params)
    print(f"\n[3] Shared secrets: {alice_shared} / {bob_shared}")
    
    alice_key = derive_aes_key(alice_shared)
    bob_key = derive_aes_key(bob_shared)
    print(f"\n[4] AES keys: {alice_key.hex()} / {bob_key.hex()}")
    
    assert alice_key == bob_key, "AES keys don't match!"
    print("\n[✓] Diffie-Hellman key exchange test passed!")
