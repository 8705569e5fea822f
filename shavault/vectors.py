"""
Known SHA-256 Test Vectors

NIST example values plus padding-boundary lengths. Boundary messages have
no fixed digest here; they are checked against the `cryptography` library.
"""

from typing import List, Tuple

from cryptography.hazmat.primitives import hashes


KNOWN_VECTORS: List[Tuple[str, bytes, str]] = [
    ("empty", b"",
     "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    ("abc", b"abc",
     "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    ("448-bit", b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
    ("896-bit",
     b"abcdefghbcdefghicdefghijdefghijkefghijklfghijklmghijklmn"
     b"hijklmnoijklmnopjklmnopqklmnopqrlmnopqrsmnopqrstnopqrstu",
     "cf5b16a778af8380036ce59e7b0492370b249b11e8f07a51afac45037afee9d1"),
    ("quick brown fox", b"The quick brown fox jumps over the lazy dog",
     "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592"),
    ("one million a", b"a" * 1_000_000,
     "cdc76e5c9914fb9281a1c7e284d73e67f1809a48a497200e046d39ccc7112cd0"),
]

# 55: last single-chunk length; 56: separator fits but length field spills;
# 63/64/65: around one full chunk of message
BOUNDARY_LENGTHS: Tuple[int, ...] = (0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128)


def reference_digest(data: bytes) -> bytes:
    """SHA-256 of `data` computed by the `cryptography` library."""
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize()


def boundary_message(length: int) -> bytes:
    """Deterministic non-repeating message of `length` bytes."""
    return bytes((i * 31 + 7) & 0xFF for i in range(length))
