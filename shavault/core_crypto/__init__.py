# Core Cryptography Module
"""
SHA-256 pipeline stages:
- Padding (padding.py)
- Message schedule (schedule.py)
- Compression (compression.py)
- Digest assembly and orchestration (sha256.py)
"""

from .sha256 import (
    sha256,
    sha256_hex,
    sha256_string,
    finalize,
    finalize_hex,
    hash_chunks,
    hash_padded,
)

from .padding import pad, chunk_count, iter_chunks
from .schedule import expand, extend_schedule
from .compression import compress, compression_round

__all__ = [
    'sha256',
    'sha256_hex',
    'sha256_string',
    'finalize',
    'finalize_hex',
    'hash_chunks',
    'hash_padded',
    'pad',
    'chunk_count',
    'iter_chunks',
    'expand',
    'extend_schedule',
    'compress',
    'compression_round',
]
