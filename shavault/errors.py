"""
Exceptions raised by the hashing pipeline.

The algorithm is total over every message whose bit length fits in
64 bits, so the only failures are unsupported lengths and running out of
memory while building the padded buffer.
"""


class Sha256Error(Exception):
    """Base class for shavault errors."""
    pass


class UnsupportedInputError(Sha256Error, ValueError):
    """Raised when the message bit length does not fit in 64 bits."""
    pass


class HashAllocationError(Sha256Error, MemoryError):
    """Raised when the padded buffer cannot be allocated."""
    pass
