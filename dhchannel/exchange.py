#!/usr/bin/env python3
"""
Exchange Driver

Runs a complete DH secure-channel bootstrap between two in-process parties:
1. Both parties draw private keys
2. Both compute public values
3. Initiator's public value is sent to the responder, who derives the secret
4. Responder's public value is sent to the initiator, who derives the secret
5. Initiator encrypts message A, responder decrypts it
6. Responder encrypts message B, initiator decrypts it

"Sending" means serializing a message to JSON and parsing it back on the
other side; no network is involved.
"""

import argparse
import sys
from typing import Optional

from dhchannel.common.config import (
    DEFAULT_MESSAGE_A, DEFAULT_MESSAGE_B,
    load_domain_parameters, load_messages, transcript_path
)
from dhchannel.common.exceptions import DHChannelException, ExchangeError
from dhchannel.common.protocol import (
    DomainParameters, PublicValueMessage, CiphertextMessage,
    serialize_message, deserialize_message
)
from dhchannel.common.utils import b64encode, b64decode
from dhchannel.party import Party
from dhchannel.transcript import Transcript


class ExchangeResult:
    """Everything produced by one run of the exchange."""

    def __init__(self, initiator: Party, responder: Party, transcript: Transcript,
                 received_a: str, received_b: str):
        self.initiator = initiator
        self.responder = responder
        self.transcript = transcript
        self.received_a = received_a
        self.received_b = received_b

    @property
    def secrets_match(self) -> bool:
        return self.initiator.shared_secret() == self.responder.shared_secret()


def send_public_value(sender: Party) -> int:
    """Serialize sender's public value and parse it on the receiving side."""
    wire = serialize_message(PublicValueMessage(sender=sender.name, value=sender.public_value()))
    return deserialize_message(wire, PublicValueMessage).value


def send_ciphertext(sender: Party, ciphertext: bytes) -> bytes:
    """Serialize a ciphertext and parse it on the receiving side."""
    wire = serialize_message(CiphertextMessage(sender=sender.name, ct=b64encode(ciphertext)))
    return b64decode(deserialize_message(wire, CiphertextMessage).ct)


def _send_message(step: int, sender: Party, receiver: Party, message: str,
                  transcript: Transcript, verbose: bool) -> str:
    plaintext = message.encode('utf-8')
    ciphertext = sender.encrypt(plaintext)
    transcript.append(step, sender.name, "plaintext", message)
    transcript.append(step, sender.name, "ciphertext", b64encode(ciphertext))
    if verbose:
        print(f"  [>] {sender.name} sends ciphertext: {b64encode(ciphertext)}")

    decrypted = receiver.decrypt(send_ciphertext(sender, ciphertext))
    received = decrypted.decode('utf-8', errors='replace')
    transcript.append(step, receiver.name, "decrypted", received)
    if verbose:
        print(f"  [<] {receiver.name}'s decrypted data is: {received}")

    if decrypted != plaintext:
        raise ExchangeError(f"{receiver.name} decrypted {received!r}, expected {message!r}")
    return received


def run_exchange(
    params: DomainParameters,
    message_a: str = DEFAULT_MESSAGE_A,
    message_b: str = DEFAULT_MESSAGE_B,
    initiator_key: Optional[int] = None,
    responder_key: Optional[int] = None,
    initiator_name: str = "Alice",
    responder_name: str = "Bob",
    verbose: bool = True
) -> ExchangeResult:
    """
    Run the six-step exchange.

    Args:
        params: Domain parameters shared by both parties
        message_a: Message sent initiator -> responder
        message_b: Message sent responder -> initiator
        initiator_key: Fixed initiator private key (random if None)
        responder_key: Fixed responder private key (random if None)
        initiator_name: Label for the initiator
        responder_name: Label for the responder
        verbose: Print each step

    Returns:
        ExchangeResult with both parties and the transcript

    Raises:
        EntropyUnavailable: If a private key cannot be drawn
        PaddingInvalid: If a ciphertext does not decrypt
        ExchangeError: If a decrypted message differs from the original
    """
    transcript = Transcript()

    # Step 1: Parties
    if verbose:
        print("[Step 1] Private keys")
    initiator = Party(params, initiator_name, initiator_key)
    responder = Party(params, responder_name, responder_key)
    for party in (initiator, responder):
        transcript.append(1, party.name, "private_key", party.private_key)
        if verbose:
            print(f"  [*] {party.name}'s private key is: {party.private_key}")

    # Step 2: Public values
    if verbose:
        print("\n[Step 2] Public values")
    for party in (initiator, responder):
        value = party.compute_public_value()
        transcript.append(2, party.name, "public_value", value)
        if verbose:
            print(f"  [*] {party.name}'s public value is: {value}")

    # Steps 3 and 4: Exchange public values, derive secrets
    for step, sender, receiver in ((3, initiator, responder), (4, responder, initiator)):
        if verbose:
            print(f"\n[Step {step}] {sender.name} -> {receiver.name}: public value")
        received = send_public_value(sender)
        transcript.append(step, "channel", "public_value", received)
        secret = receiver.derive_secret(received)
        transcript.append(step, receiver.name, "shared_secret", secret)
        transcript.append(step, receiver.name, "symmetric_key", receiver.symmetric_key().hex())
        if verbose:
            print(f"  [<] {receiver.name} received: {received}")
            print(f"  [✓] {receiver.name} has generated the secret key as: {secret}")
            print(f"      AES key: {receiver.symmetric_key().hex()}")

    # Step 5: initiator -> responder
    if verbose:
        print(f"\n[Step 5] {initiator.name} -> {responder.name}: encrypted message")
    received_a = _send_message(5, initiator, responder, message_a, transcript, verbose)

    # Step 6: responder -> initiator
    if verbose:
        print(f"\n[Step 6] {responder.name} -> {initiator.name}: encrypted message")
    received_b = _send_message(6, responder, initiator, message_b, transcript, verbose)

    if verbose:
        print(f"\n[✓] Exchange complete. Transcript SHA-256: {transcript.sha256_hex()}")

    return ExchangeResult(initiator, responder, transcript, received_a, received_b)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a Diffie-Hellman key exchange followed by AES-128 messaging"
    )
    parser.add_argument(
        "--base",
        type=int,
        help="DH base (default: DH_BASE or 5)"
    )
    parser.add_argument(
        "--modulus",
        type=int,
        help="DH modulus (default: DH_MODULUS or 57)"
    )
    parser.add_argument(
        "--message-a",
        help="Message the initiator sends"
    )
    parser.add_argument(
        "--message-b",
        help="Message the responder sends"
    )
    parser.add_argument(
        "--transcript",
        help="Write the exchange transcript to this JSON file"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the final result"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if not args.quiet:
        print("=" * 70)
        print("  DIFFIE-HELLMAN SECURE CHANNEL DEMO")
        print("  (illustrative parameters, NOT secure)")
        print("=" * 70 + "\n")

    try:
        params = load_domain_parameters(args.base, args.modulus)
        default_a, default_b = load_messages()
        result = run_exchange(
            params,
            message_a=args.message_a if args.message_a is not None else default_a,
            message_b=args.message_b if args.message_b is not None else default_b,
            verbose=not args.quiet
        )
    except DHChannelException as e:
        print(f"\n[!] Error: {e}")
        return 1

    output = args.transcript or transcript_path()
    if output:
        result.transcript.save(output)
        print(f"[✓] Transcript saved to: {output}")

    if args.quiet:
        print(f"[✓] Shared secret established ({len(result.transcript)} transcript entries)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
