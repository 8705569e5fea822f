"""
Bit Primitives

32-bit word operations shared by the message schedule and the
compression function. Python integers are unbounded, so every result is
masked back to 32 bits to get the wraparound the algorithm relies on.
"""

from typing import List

from .constants import MASK_32, WORD_SIZE, CHUNK_SIZE


def _check_amount(amount: int) -> None:
    if not 0 < amount < 32:
        raise ValueError(f"Rotation amount must be in 1..31, got {amount}")


def _rotr(value: int, amount: int) -> int:
    return ((value >> amount) | (value << (32 - amount))) & MASK_32


def rotr(value: int, amount: int) -> int:
    """Right rotate a 32-bit integer by the specified amount."""
    _check_amount(amount)
    return _rotr(value & MASK_32, amount)


def rotl(value: int, amount: int) -> int:
    """Left rotate a 32-bit integer by the specified amount."""
    _check_amount(amount)
    value &= MASK_32
    return ((value << amount) | (value >> (32 - amount))) & MASK_32


def shr(value: int, amount: int) -> int:
    """Logical right shift of a 32-bit integer."""
    return (value & MASK_32) >> amount


def ch(x: int, y: int, z: int) -> int:
    """Choice function: if x then y else z (bitwise)."""
    return ((x & y) ^ (~x & z)) & MASK_32


def maj(x: int, y: int, z: int) -> int:
    """Majority function: majority vote of bits."""
    return (x & y) ^ (x & z) ^ (y & z)


def small_sigma0(x: int) -> int:
    """Lowercase sigma 0: used in message schedule."""
    return _rotr(x, 7) ^ _rotr(x, 18) ^ shr(x, 3)


def small_sigma1(x: int) -> int:
    """Lowercase sigma 1: used in message schedule."""
    return _rotr(x, 17) ^ _rotr(x, 19) ^ shr(x, 10)


def big_sigma0(x: int) -> int:
    """Uppercase Sigma 0: used in compression."""
    return _rotr(x, 2) ^ _rotr(x, 13) ^ _rotr(x, 22)


def big_sigma1(x: int) -> int:
    """Uppercase Sigma 1: used in compression."""
    return _rotr(x, 6) ^ _rotr(x, 11) ^ _rotr(x, 25)


def bytes_to_word(data: bytes) -> int:
    """Assemble 4 bytes into one big-endian 32-bit word."""
    if len(data) != WORD_SIZE:
        raise ValueError(f"Expected {WORD_SIZE} bytes, got {len(data)}")
    return int.from_bytes(data, byteorder='big')


def word_to_bytes(word: int) -> bytes:
    """Serialize a 32-bit word as 4 big-endian bytes."""
    return (word & MASK_32).to_bytes(WORD_SIZE, byteorder='big')


def bytes_to_words(chunk: bytes) -> List[int]:
    """Convert a 64-byte chunk into 16 32-bit words (big-endian)."""
    if len(chunk) != CHUNK_SIZE:
        raise ValueError(f"Expected {CHUNK_SIZE}-byte chunk, got {len(chunk)}")
    return [bytes_to_word(chunk[i:i + WORD_SIZE]) for i in range(0, CHUNK_SIZE, WORD_SIZE)]
