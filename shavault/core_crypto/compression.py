"""
Compression Function

Runs the 64 SHA-256 rounds for one chunk over the working variables
a..h, then folds them back into the hash state.
"""

from typing import Sequence, Tuple

from .bitops import big_sigma0, big_sigma1, ch, maj
from .constants import K, MASK_32, STATE_WORDS, WORD_COUNT


State = Tuple[int, int, int, int, int, int, int, int]


def compression_round(working: Sequence[int], k: int, w: int) -> State:
    """
    Perform one compression round.

    Args:
        working: Current working variables (a, b, c, d, e, f, g, h)
        k: Round constant K[i]
        w: Message schedule word W[i]

    Returns:
        Working variables after the round
    """
    a, b, c, d, e, f, g, h = working

    t1 = (h + big_sigma1(e) + ch(e, f, g) + k + w) & MASK_32
    t2 = (big_sigma0(a) + maj(a, b, c)) & MASK_32

    return (
        (t1 + t2) & MASK_32,
        a,
        b,
        c,
        (d + t1) & MASK_32,
        e,
        f,
        g,
    )


def compress(words: Sequence[int], state: Sequence[int]) -> State:
    """
    Perform 64 rounds of compression on the state.

    Args:
        words: Message schedule (64 32-bit words)
        state: Current hash state (8 32-bit words)

    Returns:
        Updated hash state; `state` itself is not modified
    """
    if len(words) != WORD_COUNT:
        raise ValueError(f"Expected {WORD_COUNT} schedule words, got {len(words)}")
    if len(state) != STATE_WORDS:
        raise ValueError(f"Expected {STATE_WORDS} state words, got {len(state)}")

    working = tuple(state)
    for i in range(WORD_COUNT):
        working = compression_round(working, K[i], words[i])

    # Add compressed chunk to current hash value
    return tuple((h + v) & MASK_32 for h, v in zip(state, working))
