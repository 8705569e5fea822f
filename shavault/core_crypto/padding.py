"""
Message Padding

Pads a message to a whole number of 512-bit chunks:
1. Copy the message bytes
2. Append the separator bit '1' (0x80 byte)
3. Zero fill
4. Store the message length in bits as a 64-bit big-endian integer
   in the last 8 bytes of the buffer
"""

import logging
from typing import Iterator, Optional, Union

from .constants import CHUNK_SIZE, LENGTH_FIELD_SIZE, SEPARATOR, MAX_MESSAGE_BYTES
from ..errors import UnsupportedInputError, HashAllocationError


logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def chunk_count(length: int) -> int:
    """
    Number of 64-byte chunks needed for a message of `length` bytes.

    One separator byte and the 8-byte length field must fit after the
    message: ceil((length + 9) / 64).
    """
    if length < 0:
        raise ValueError(f"Message length must be non-negative, got {length}")
    return (length + 1 + LENGTH_FIELD_SIZE + CHUNK_SIZE - 1) // CHUNK_SIZE


def _byte_view(data: BytesLike) -> memoryview:
    """Flat unsigned-byte view of `data`, copying strided views."""
    view = memoryview(data)
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    return view.cast('B')


def _message_length(data: BytesLike, length: Optional[int]) -> int:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}")
    available = memoryview(data).nbytes
    if length is None:
        length = available
    if length < 0 or length > available:
        raise ValueError(
            f"Message length {length} out of range for {available}-byte input"
        )
    if length > MAX_MESSAGE_BYTES:
        raise UnsupportedInputError(
            f"Message of {length} bytes exceeds the 64-bit bit-length field"
        )
    return length


def pad(data: BytesLike, length: Optional[int] = None) -> bytearray:
    """
    Pad the message as required by FIPS 180-4.

    Args:
        data: The original message bytes
        length: Exact number of bytes of `data` to hash (default: all of it)

    Returns:
        Padded buffer (length is a positive multiple of 64 bytes)

    Raises:
        UnsupportedInputError: If the bit length does not fit in 64 bits
        HashAllocationError: If the buffer cannot be allocated
    """
    length = _message_length(data, length)
    chunks = chunk_count(length)
    logger.debug("No of chunks: %d", chunks)

    try:
        padded = bytearray(chunks * CHUNK_SIZE)
    except MemoryError as e:
        raise HashAllocationError(
            f"Cannot allocate {chunks * CHUNK_SIZE} bytes for padded message"
        ) from e

    padded[:length] = _byte_view(data)[:length]
    padded[length] = SEPARATOR
    padded[-LENGTH_FIELD_SIZE:] = (length * 8).to_bytes(LENGTH_FIELD_SIZE, byteorder='big')
    return padded


def iter_chunks(padded: BytesLike) -> Iterator[memoryview]:
    """Yield successive 64-byte chunks of a padded buffer, in order."""
    view = _byte_view(padded)
    if view.nbytes == 0 or view.nbytes % CHUNK_SIZE:
        raise ValueError(
            f"Padded buffer must be a positive multiple of {CHUNK_SIZE} bytes, "
            f"got {view.nbytes}"
        )
    for offset in range(0, view.nbytes, CHUNK_SIZE):
        yield view[offset:offset + CHUNK_SIZE]
