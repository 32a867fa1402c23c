"""SHA-256 message digest."""

from __future__ import annotations

import struct

from purehash.words import Words, _BlockHasher, rotr, sum32

_MASK = 0xFFFFFFFF

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def ch(x: int, y: int, z: int) -> int:
    """Choose: bits of ``y`` where ``x`` is set, else bits of ``z``."""
    return ((x & y) ^ (~x & z)) & _MASK


def maj(x: int, y: int, z: int) -> int:
    """Bitwise majority of three words."""
    return (x & y) ^ (x & z) ^ (y & z)


def bsig0(x: int) -> int:
    return rotr(x, 2) ^ rotr(x, 13) ^ rotr(x, 22)


def bsig1(x: int) -> int:
    return rotr(x, 6) ^ rotr(x, 11) ^ rotr(x, 25)


def ssig0(x: int) -> int:
    return rotr(x, 7) ^ rotr(x, 18) ^ (x >> 3)


def ssig1(x: int) -> int:
    return rotr(x, 17) ^ rotr(x, 19) ^ (x >> 10)


class Sha256(_BlockHasher):
    """Incremental SHA-256 hash."""

    _INITIAL = (
        0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
        0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
    )

    def __init__(self, data: bytes = b"") -> None:
        super().__init__(data)

    @staticmethod
    def _compress(state: Words, block: bytes) -> Words:
        w = list(struct.unpack(">16I", block))
        for t in range(16, 64):
            w.append((ssig1(w[t - 2]) + w[t - 7] + ssig0(w[t - 15]) + w[t - 16]) & _MASK)

        a, b, c, d, e, f, g, h = state
        for k, wt in zip(_K, w):
            t1 = (h + bsig1(e) + ch(e, f, g) + k + wt) & _MASK
            t2 = sum32(bsig0(a), maj(a, b, c))
            a, b, c, d, e, f, g, h = sum32(t1, t2), a, b, c, sum32(d, t1), e, f, g

        return tuple(sum32(s, v) for s, v in zip(state, (a, b, c, d, e, f, g, h)))

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        super().update(data)

    def copy(self) -> "Sha256":
        """Return an independent copy of this hash."""
        return super().copy()

    def digest(self) -> bytes:
        """Return the 32-byte digest."""
        return super().digest()

    def hexdigest(self) -> str:
        """Return the digest as 64 hexadecimal characters."""
        return super().hexdigest()

    def words(self) -> Words:
        """Return the digest as eight 32-bit words."""
        return super().words()


def sha256(data: bytes = b"") -> Sha256:
    """Create a SHA-256 hash, optionally fed with ``data``."""
    return Sha256(data)