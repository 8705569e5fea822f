"""
Diagnostic Printing

Bit and word dumps of the hashing pipeline's intermediate values.
All helpers return strings; callers decide where to print them.
"""

from typing import List, Optional, Sequence

from ..core_crypto.constants import CHUNK_SIZE
from ..core_crypto.padding import BytesLike, pad
from ..core_crypto.sha256 import finalize_hex, hash_padded


def format_bits(value: int, width: int = 8) -> str:
    """Render `value` as a `width`-bit binary string, most significant bit first."""
    if value < 0 or value >= 1 << width:
        raise ValueError(f"{value} does not fit in {width} bits")
    return format(value, f'0{width}b')


def _rows(cells: List[str], per_line: int) -> str:
    if per_line < 1:
        raise ValueError(f"per_line must be positive, got {per_line}")
    return '\n'.join(
        '\t'.join(cells[i:i + per_line]) for i in range(0, len(cells), per_line)
    )


def format_padded(buffer: BytesLike, per_line: int = 8) -> str:
    """Dump a byte buffer as bit strings, `per_line` bytes per row."""
    return _rows([format_bits(b, 8) for b in bytes(buffer)], per_line)


def format_words(words: Sequence[int], per_line: int = 2) -> str:
    """Dump 32-bit words as bit strings, `per_line` words per row."""
    return _rows([format_bits(w, 32) for w in words], per_line)


def format_words_hex(words: Sequence[int], per_line: int = 8) -> str:
    """Dump 32-bit words as 8-digit lowercase hex."""
    return _rows([f'{w:08x}' for w in words], per_line)


def trace_message(data: BytesLike, length: Optional[int] = None) -> str:
    """
    Produce a full trace of hashing `data`.

    Includes the chunk count, the padded buffer in bits, and for every
    chunk its message schedule and the hash state after compression.
    """
    padded = pad(data, length)
    lines = [
        f"No of chunks: {len(padded) // CHUNK_SIZE}",
        "",
        "Padded message:",
        format_padded(padded),
    ]

    state = None
    for index, words, state in hash_padded(padded):
        lines.extend([
            "",
            f"Chunk {index} message schedule:",
            format_words(words),
            "",
            f"Chunk {index} hash state:",
            format_words_hex(state),
        ])

    lines.extend(["", f"Digest: {finalize_hex(state)}"])
    return '\n'.join(lines)
