"""
Unit tests for the Party state machine.
"""

import pytest

from dhchannel.common.exceptions import ProtocolError, PaddingInvalid
from dhchannel.common.protocol import DomainParameters
from dhchannel.party import Party, PartyState


PARAMS = DomainParameters(base=5, modulus=57)


def test_lifecycle():
    party = Party(PARAMS, "alice", private_key=6)
    assert party.state is PartyState.INITIALIZED

    assert party.compute_public_value() == 7
    assert party.public_value() == 7
    assert party.state is PartyState.PUBLIC_VALUE_COMPUTED

    assert party.derive_secret(26) == 1
    assert party.state is PartyState.SECRET_ESTABLISHED
    assert party.shared_secret() == 1
    assert party.symmetric_key() == b'\x01' + bytes(15)


def test_compute_public_value_is_idempotent():
    party = Party(PARAMS, private_key=6)
    assert party.compute_public_value() == party.compute_public_value() == 7


def test_random_private_keys_differ():
    a = Party(PARAMS)
    b = Party(PARAMS)
    assert a.private_key != b.private_key
    assert 0 <= a.private_key < 2**128


def test_public_value_before_compute():
    with pytest.raises(ProtocolError):
        Party(PARAMS).public_value()


def test_derive_secret_before_public_value():
    with pytest.raises(ProtocolError):
        Party(PARAMS).derive_secret(26)


def test_key_access_before_secret():
    party = Party(PARAMS, private_key=6)
    party.compute_public_value()
    with pytest.raises(ProtocolError):
        party.shared_secret()
    with pytest.raises(ProtocolError):
        party.symmetric_key()
    with pytest.raises(ProtocolError):
        party.encrypt(b"TEST")


def test_derive_secret_last_write_wins():
    party = Party(PARAMS, private_key=6)
    party.compute_public_value()
    party.derive_secret(26)
    second = party.derive_secret(2)
    assert second == pow(2, 6, 57)
    assert party.shared_secret() == second
    assert party.state is PartyState.SECRET_ESTABLISHED


def test_out_of_range_peer_value_is_reduced():
    party = Party(PARAMS, private_key=6)
    party.compute_public_value()
    assert party.derive_secret(26 + 57 * 3) == 1


def test_parties_agree_and_exchange_messages():
    alice = Party(PARAMS, "alice")
    bob = Party(PARAMS, "bob")
    alice.compute_public_value()
    bob.compute_public_value()
    bob.derive_secret(alice.public_value())
    alice.derive_secret(bob.public_value())

    assert alice.shared_secret() == bob.shared_secret()
    assert alice.symmetric_key() == bob.symmetric_key()
    assert bob.decrypt(alice.encrypt(b"TEST")) == b"TEST"
    assert alice.decrypt(bob.encrypt(b"")) == b""


def test_mismatched_keys_do_not_decrypt():
    big = DomainParameters(base=2, modulus=2**127 - 1)
    alice = Party(big, "alice", private_key=3)
    bob = Party(big, "bob", private_key=5)
    alice.compute_public_value()
    bob.compute_public_value()
    alice.derive_secret(bob.public_value())
    # Bob uses a bogus peer value, so the keys differ
    bob.derive_secret(12345)
    assert alice.symmetric_key() != bob.symmetric_key()

    message = b"This is the Diffie-Hellman key exchange protocol!"
    try:
        result = bob.decrypt(alice.encrypt(message))
    except PaddingInvalid:
        return
    assert result != message
