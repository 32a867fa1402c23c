"""SHA-1 message digest."""

from __future__ import annotations

import struct

from purehash.words import Words, _BlockHasher, rotl, sum32

_MASK = 0xFFFFFFFF


def sha1_f(t: int, b: int, c: int, d: int) -> int:
    """Round function for SHA-1 step ``t`` (0..79)."""
    if 0 <= t <= 19:
        return ((b & c) | (~b & d)) & _MASK
    if 20 <= t <= 39 or 60 <= t <= 79:
        return b ^ c ^ d
    if 40 <= t <= 59:
        return (b & c) | (b & d) | (c & d)
    raise ValueError(f"sha1_f: step {t} is not in range 0 <= t < 80")


def sha1_k(t: int) -> int:
    """Additive constant for SHA-1 step ``t`` (0..79)."""
    if 0 <= t <= 19:
        return 0x5A827999
    if 20 <= t <= 39:
        return 0x6ED9EBA1
    if 40 <= t <= 59:
        return 0x8F1BBCDC
    if 60 <= t <= 79:
        return 0xCA62C1D6
    raise ValueError(f"sha1_k: step {t} is not in range 0 <= t < 80")


class Sha1(_BlockHasher):
    """Incremental SHA-1 hash."""

    _INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

    def __init__(self, data: bytes = b"") -> None:
        super().__init__(data)

    @staticmethod
    def _compress(state: Words, block: bytes) -> Words:
        w = list(struct.unpack(">16I", block))
        for t in range(16, 80):
            w.append(rotl(w[t - 3] ^ w[t - 8] ^ w[t - 14] ^ w[t - 16], 1))

        a, b, c, d, e = state
        for t, wt in enumerate(w):
            temp = (rotl(a, 5) + sha1_f(t, b, c, d) + e + wt + sha1_k(t)) & _MASK
            a, b, c, d, e = temp, a, rotl(b, 30), c, d

        return tuple(sum32(h, v) for h, v in zip(state, (a, b, c, d, e)))

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        super().update(data)

    def copy(self) -> "Sha1":
        """Return an independent copy of this hash."""
        return super().copy()

    def digest(self) -> bytes:
        """Return the 20-byte digest."""
        return super().digest()

    def hexdigest(self) -> str:
        """Return the digest as 40 hexadecimal characters."""
        return super().hexdigest()

    def words(self) -> Words:
        """Return the digest as five 32-bit words."""
        return super().words()


def sha1(data: bytes = b"") -> Sha1:
    """Create a SHA-1 hash, optionally fed with ``data``."""
    return Sha1(data)