"""
Custom exceptions for dhchannel.
"""


class DHChannelException(Exception):
    """Base exception for dhchannel errors."""
    pass


class InvalidParameters(DHChannelException):
    """Domain parameters or arithmetic operands are malformed."""
    pass


class EntropyUnavailable(DHChannelException):
    """The operating system random source could not be read."""
    pass


class EncryptionError(DHChannelException):
    """Encryption/decryption failed."""
    pass


class PaddingInvalid(EncryptionError):
    """Ciphertext padding is malformed (wrong key or corrupted data)."""
    pass


class ProtocolError(DHChannelException):
    """Operation not valid in the current state, or malformed message."""
    pass


class ExchangeError(DHChannelException):
    """Decrypted message does not match what the peer sent."""
    pass
