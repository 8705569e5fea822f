"""
SHA-256 Hash Implementation (From Scratch)

Implements the SHA-256 cryptographic hash function as defined in FIPS 180-4.
This implementation avoids using hashlib and builds the algorithm from scratch.

Components:
- Padding: Pads message to multiple of 512 bits (padding.py)
- Message Schedule: Expands 16 words to 64 words (schedule.py)
- Compression: 64 rounds of compression function (compression.py)
- Output: 256-bit (32-byte) digest (this module)
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from .compression import State, compress
from .constants import H_INITIAL, STATE_WORDS
from .bitops import word_to_bytes
from .padding import BytesLike, iter_chunks, pad
from .schedule import expand


def finalize(state: Sequence[int]) -> bytes:
    """
    Serialize the final hash state as the 32-byte digest.

    Each of h0..h7 is written as 4 big-endian bytes, in order.
    """
    if len(state) != STATE_WORDS:
        raise ValueError(f"Expected {STATE_WORDS} state words, got {len(state)}")
    return b''.join(word_to_bytes(word) for word in state)


def finalize_hex(state: Sequence[int]) -> str:
    """Serialize the final hash state as 64 lowercase hex characters."""
    return finalize(state).hex()


def hash_padded(padded: BytesLike) -> Iterator[Tuple[int, List[int], State]]:
    """
    Run schedule and compression over an already padded buffer.

    Yields:
        (chunk_index, message_schedule, hash_state_after_chunk)
    """
    state: State = H_INITIAL
    for index, chunk in enumerate(iter_chunks(padded)):
        words = expand(chunk)
        state = compress(words, state)
        yield index, words, state


def hash_chunks(
    data: BytesLike, length: Optional[int] = None
) -> Iterator[Tuple[int, List[int], State]]:
    """Pad `data` and walk the pipeline one chunk at a time."""
    return hash_padded(pad(data, length))


def sha256(data: BytesLike, length: Optional[int] = None) -> bytes:
    """
    Compute the SHA-256 hash of the input data.

    Args:
        data: Input bytes to hash
        length: Number of leading bytes of `data` to hash (default: all)

    Returns:
        256-bit (32-byte) digest as bytes

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    state: State = H_INITIAL
    for _, _, state in hash_chunks(data, length):
        pass
    return finalize(state)


def sha256_hex(data: BytesLike, length: Optional[int] = None) -> str:
    """
    Compute SHA-256 hash and return as hexadecimal string.

    Args:
        data: Input bytes to hash
        length: Number of leading bytes of `data` to hash (default: all)

    Returns:
        64-character hexadecimal string
    """
    return sha256(data, length).hex()


def sha256_string(text: str, encoding: str = 'utf-8') -> bytes:
    """
    Compute SHA-256 hash of a string.

    Args:
        text: Input string to hash
        encoding: String encoding (default: utf-8)

    Returns:
        256-bit (32-byte) digest as bytes
    """
    return sha256(text.encode(encoding))
