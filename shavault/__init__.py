# ShaVault
"""
A from-scratch FIPS 180-4 SHA-256 implementation.

    >>> from shavault import sha256_hex
    >>> sha256_hex(b"abc")
    'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
"""

from .core_crypto import sha256, sha256_hex, sha256_string
from .errors import Sha256Error, UnsupportedInputError, HashAllocationError

__version__ = "1.0.0"

__all__ = [
    'sha256',
    'sha256_hex',
    'sha256_string',
    'Sha256Error',
    'UnsupportedInputError',
    'HashAllocationError',
]
