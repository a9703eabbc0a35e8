"""
Common utilities, configuration and message definitions for dhchannel.
"""

from .protocol import *
from .utils import sha256_hex, b64encode, b64decode
from .exceptions import *

__all__ = [
    'sha256_hex',
    'b64encode',
    'b64decode',
]
