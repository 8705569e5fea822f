# Diagnostics Module
"""
Human-readable dumps of the padded buffer, message schedules and
intermediate hash states, used by `shavault hash --trace`.
"""

from .printing import (
    format_bits,
    format_padded,
    format_words,
    format_words_hex,
    trace_message,
)

__all__ = [
    'format_bits',
    'format_padded',
    'format_words',
    'format_words_hex',
    'trace_message',
]
