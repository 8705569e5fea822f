"""
Message Schedule

Expands one 64-byte chunk into the 64-word schedule consumed by the
compression rounds.

For i from 16 to 63:
    W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]   (mod 2^32)
"""

from typing import List, Sequence

from .bitops import bytes_to_words, small_sigma0, small_sigma1
from .constants import MASK_32, WORD_COUNT


def extend_schedule(words: Sequence[int]) -> List[int]:
    """
    Expand 16 words into 64 words for the message schedule.

    Args:
        words: The first 16 schedule words

    Returns:
        New list of 64 32-bit words; `words` is left untouched
    """
    if len(words) != 16:
        raise ValueError(f"Expected 16 initial words, got {len(words)}")

    w = [word & MASK_32 for word in words]
    for i in range(16, WORD_COUNT):
        s0 = small_sigma0(w[i - 15])
        s1 = small_sigma1(w[i - 2])
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & MASK_32)
    return w


def expand(chunk: bytes) -> List[int]:
    """Build the 64-word schedule for a 64-byte chunk."""
    return extend_schedule(bytes_to_words(chunk))
