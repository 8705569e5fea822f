"""
Unit tests for the SHA-256 pipeline.

Tests:
- Bit primitives
- Padding
- Message schedule
- Compression
- Full SHA-256 against known vectors
"""

import pytest

from shavault.core_crypto.bitops import (
    rotr, rotl, shr, ch, maj, small_sigma1, bytes_to_word, word_to_bytes, bytes_to_words
)
from shavault.core_crypto.constants import H_INITIAL, K
from shavault.core_crypto.padding import pad, chunk_count, iter_chunks
from shavault.core_crypto.schedule import expand, extend_schedule
from shavault.core_crypto.compression import compress, compression_round
from shavault.core_crypto.sha256 import (
    sha256, sha256_hex, sha256_string, finalize, finalize_hex, hash_chunks
)
from shavault.vectors import (
    KNOWN_VECTORS, BOUNDARY_LENGTHS, boundary_message, reference_digest
)


class TestBitOps:
    """Unit tests for 32-bit word primitives."""

    def test_rotr_wraps_low_bit(self):
        """Rotating right moves the low bit to the top."""
        assert rotr(1, 1) == 0x80000000

    def test_rotl_wraps_high_bit(self):
        """Rotating left moves the top bit to the bottom."""
        assert rotl(0x80000000, 1) == 1

    def test_rotr_rotl_inverse(self):
        """rotl undoes rotr."""
        assert rotl(rotr(0xdeadbeef, 13), 13) == 0xdeadbeef

    def test_rotation_amount_checked(self):
        """Rotation amounts outside 1..31 are rejected."""
        with pytest.raises(ValueError):
            rotr(1, 0)
        with pytest.raises(ValueError):
            rotl(1, 32)

    def test_shr_is_logical(self):
        """Right shift never sign-extends."""
        assert shr(0x80000000, 31) == 1

    def test_ch_and_maj(self):
        """Choice and majority on simple patterns."""
        assert ch(0xFFFFFFFF, 0x12345678, 0x9abcdef0) == 0x12345678
        assert ch(0, 0x12345678, 0x9abcdef0) == 0x9abcdef0
        assert maj(0xFFFF0000, 0xFF00FF00, 0x00000000) == 0xFF000000

    def test_small_sigma1_of_length_word(self):
        """sigma1(0x18) as used in the 'abc' schedule."""
        assert small_sigma1(0x18) == 0x000f0000

    def test_word_byte_round_trip(self):
        """Words are assembled big-endian."""
        assert bytes_to_word(b"\x61\x62\x63\x80") == 0x61626380
        assert word_to_bytes(0x61626380) == b"abc\x80"

    def test_bytes_to_words_requires_full_chunk(self):
        """Only 64-byte chunks convert to 16 words."""
        assert len(bytes_to_words(bytes(64))) == 16
        with pytest.raises(ValueError):
            bytes_to_words(bytes(63))


class TestPadding:
    """Unit tests for message padding."""

    def test_empty_message(self):
        """Empty input pads to one chunk: 0x80 then zeros."""
        padded = pad(b"")
        assert len(padded) == 64
        assert padded[0] == 0x80
        assert padded[1:] == bytes(63)

    def test_abc_layout(self):
        """Separator follows the message, bit length ends the buffer."""
        padded = pad(b"abc")
        assert padded[:4] == b"abc\x80"
        assert padded[4:56] == bytes(52)
        assert padded[56:] == (24).to_bytes(8, 'big')

    @pytest.mark.parametrize("length,chunks", [
        (0, 1), (55, 1), (56, 2), (63, 2), (64, 2), (65, 2), (119, 2), (120, 3),
    ])
    def test_chunk_count(self, length, chunks):
        """Chunk count is ceil((n + 9) / 64)."""
        assert chunk_count(length) == chunks
        assert len(pad(bytes(length))) == 64 * chunks

    def test_length_field_spills_to_new_chunk(self):
        """At 56 bytes the separator fits but the length field does not."""
        padded = pad(b"x" * 56)
        assert padded[56] == 0x80
        assert padded[57:120] == bytes(63)
        assert padded[120:] == (448).to_bytes(8, 'big')

    def test_explicit_length_truncates(self):
        """Only the first `length` bytes are padded."""
        assert pad(b"abcdef", 3) == pad(b"abc")

    def test_input_not_modified(self):
        """Padding never touches the caller's buffer."""
        data = bytearray(b"abc")
        pad(data)
        assert data == bytearray(b"abc")

    def test_iter_chunks_order(self):
        """Chunks come out in buffer order."""
        padded = pad(bytes(range(100)))
        chunks = list(iter_chunks(padded))
        assert len(chunks) == 2
        assert bytes(chunks[0]) == bytes(range(64))

    def test_iter_chunks_rejects_partial_buffer(self):
        """A buffer that is not a multiple of 64 is rejected."""
        with pytest.raises(ValueError):
            list(iter_chunks(bytes(65)))
        with pytest.raises(ValueError):
            list(iter_chunks(b""))


class TestSchedule:
    """Unit tests for message schedule expansion."""

    def test_abc_schedule(self):
        """First words of the 'abc' schedule match FIPS 180-4 example values."""
        w = expand(pad(b"abc"))
        assert len(w) == 64
        assert w[0] == 0x61626380
        assert w[1:15] == [0] * 14
        assert w[15] == 0x00000018
        assert w[16] == 0x61626380
        assert w[17] == 0x000f0000

    def test_words_are_32_bit(self):
        """Every schedule word stays within 32 bits."""
        w = expand(b"\xff" * 64)
        assert all(0 <= word <= 0xFFFFFFFF for word in w)

    def test_extend_leaves_input_untouched(self):
        """extend_schedule returns a new list."""
        words = list(range(16))
        w = extend_schedule(words)
        assert words == list(range(16))
        assert w[:16] == words

    def test_extend_requires_16_words(self):
        """The recurrence needs exactly 16 seed words."""
        with pytest.raises(ValueError):
            extend_schedule([0] * 15)

    def test_deterministic(self):
        """Same chunk, same schedule."""
        chunk = bytes(range(64))
        assert expand(chunk) == expand(chunk)


class TestCompression:
    """Unit tests for the compression function."""

    def test_first_round_abc(self):
        """Round 0 for 'abc' matches the FIPS 180-4 worked example."""
        w = expand(pad(b"abc"))
        working = compression_round(H_INITIAL, K[0], w[0])
        assert working == (
            0x5d6aebcd, 0x6a09e667, 0xbb67ae85, 0x3c6ef372,
            0xfa2a4622, 0x510e527f, 0x9b05688c, 0x1f83d9ab,
        )

    def test_compress_abc(self):
        """One compression of the padded 'abc' chunk gives the digest words."""
        state = compress(expand(pad(b"abc")), H_INITIAL)
        assert finalize_hex(state) == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_compress_is_pure(self):
        """Compression does not mutate its inputs and repeats exactly."""
        words = expand(bytes(range(64)))
        state = list(H_INITIAL)
        first = compress(words, state)
        second = compress(words, state)
        assert first == second
        assert state == list(H_INITIAL)

    def test_wrong_sizes_rejected(self):
        """Schedule must have 64 words and state 8."""
        with pytest.raises(ValueError):
            compress([0] * 63, H_INITIAL)
        with pytest.raises(ValueError):
            compress([0] * 64, H_INITIAL[:7])


class TestSHA256:
    """Unit tests for SHA-256 implementation."""

    @pytest.mark.parametrize("name,data,expected", KNOWN_VECTORS, ids=[v[0] for v in KNOWN_VECTORS])
    def test_known_vectors(self, name, data, expected):
        """Digests match published test vectors."""
        assert sha256_hex(data) == expected

    @pytest.mark.parametrize("length", BOUNDARY_LENGTHS)
    def test_boundary_lengths(self, length):
        """Lengths around chunk boundaries agree with the reference library."""
        data = boundary_message(length)
        assert sha256(data) == reference_digest(data)

    def test_all_lengths_up_to_two_chunks(self):
        """Every length 0..130 agrees with the reference library."""
        for length in range(131):
            data = b"a" * length
            assert sha256(data) == reference_digest(data), length

    def test_deterministic(self):
        """SHA-256 should be deterministic."""
        msg = b"test message"
        assert sha256(msg) == sha256(msg)

    def test_returns_32_bytes(self):
        """SHA-256 should return 32 bytes / 64 hex characters."""
        assert len(sha256(b"")) == 32
        assert len(sha256(b"test")) == 32
        assert len(sha256_hex(b"x" * 200)) == 64

    def test_avalanche(self):
        """Flipping any single input bit changes many output bits."""
        base = bytearray(b"abc")
        base_digest = int.from_bytes(sha256(base), 'big')
        for bit in range(len(base) * 8):
            flipped = bytearray(base)
            flipped[bit // 8] ^= 0x80 >> (bit % 8)
            changed = bin(base_digest ^ int.from_bytes(sha256(flipped), 'big')).count('1')
            assert changed > 64

    def test_explicit_length(self):
        """Only the first `length` bytes are hashed."""
        assert sha256(b"abcdef", 3) == sha256(b"abc")
        assert sha256(b"abc", 0) == sha256(b"")

    def test_bytes_like_inputs(self):
        """bytearray and memoryview hash like bytes."""
        expected = sha256(b"abc")
        assert sha256(bytearray(b"abc")) == expected
        assert sha256(memoryview(b"abc")) == expected

    def test_strided_memoryview(self):
        """Non-contiguous views hash the bytes they expose."""
        view = memoryview(b"abcdef")[::2]
        assert sha256(view) == sha256(b"ace")
        assert sha256(view, 2) == sha256(b"ac")
        assert pad(view) == pad(b"ace")

    def test_sha256_string(self):
        """Strings are encoded before hashing."""
        assert sha256_string("abc") == sha256(b"abc")
        assert sha256_string("é", encoding="latin-1") == sha256(b"\xe9")

    def test_hash_chunks_threads_state(self):
        """Each chunk's state feeds the next; the last one is the digest."""
        steps = list(hash_chunks(b"a" * 120))
        assert [index for index, _, _ in steps] == [0, 1, 2]
        assert all(len(words) == 64 for _, words, _ in steps)
        assert finalize(steps[-1][2]) == sha256(b"a" * 120)

    def test_finalize_serializes_big_endian(self):
        """Digest words are written big-endian, h0 first."""
        assert finalize(H_INITIAL)[:4] == b"\x6a\x09\xe6\x67"
        assert finalize_hex(H_INITIAL).startswith("6a09e667bb67ae85")
