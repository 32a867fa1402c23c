"""32-bit word arithmetic and the block-buffering machinery shared by the hashes."""

from __future__ import annotations

from typing import ClassVar, Tuple

U32_MAX = 0xFFFFFFFF
BLOCK_SIZE = 64
_MAX_MESSAGE_BITS = 2**64 - 1

Words = Tuple[int, ...]


def sum32(x: int, y: int) -> int:
    """Add two 32-bit words modulo 2**32."""
    return (x + y) & U32_MAX


def _check_shift(name: str, n: int) -> None:
    if not 0 <= n < 32:
        raise ValueError(f"{name}: {n} is not in range 0 <= n < 32")


def rotl(x: int, n: int) -> int:
    """Rotate a 32-bit word left by ``n`` bits."""
    _check_shift("rotl", n)
    x &= U32_MAX
    return ((x << n) | (x >> (32 - n))) & U32_MAX


def rotr(x: int, n: int) -> int:
    """Rotate a 32-bit word right by ``n`` bits."""
    _check_shift("rotr", n)
    x &= U32_MAX
    return ((x >> n) | (x << (32 - n))) & U32_MAX


class _BlockHasher:
    """Merkle-Damgard hashing over 64-byte blocks with big-endian length padding."""

    _INITIAL: ClassVar[Words] = ()

    def __init__(self, data: bytes = b"") -> None:
        self._state: Words = self._INITIAL
        self._buffer = bytearray()
        self._bits = 0
        if data:
            self.update(data)

    @staticmethod
    def _compress(state: Words, block: bytes) -> Words:
        raise NotImplementedError

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        chunk = memoryview(data).tobytes()
        bits = self._bits + 8 * len(chunk)
        if bits > _MAX_MESSAGE_BITS:
            raise OverflowError("input length is too long: it is 2**64 bits or more")
        self._bits = bits
        self._buffer += chunk
        full = len(self._buffer) - len(self._buffer) % BLOCK_SIZE
        state = self._state
        for start in range(0, full, BLOCK_SIZE):
            state = self._compress(state, bytes(self._buffer[start:start + BLOCK_SIZE]))
        self._state = state
        del self._buffer[:full]

    def copy(self):
        """Return an independent copy of the current hashing state."""
        other = type(self).__new__(type(self))
        other._state = self._state
        other._buffer = bytearray(self._buffer)
        other._bits = self._bits
        return other

    def words(self) -> Words:
        """Return the final hash as a tuple of 32-bit words, leaving the state usable."""
        tail = bytes(self._buffer) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % BLOCK_SIZE)
        tail += self._bits.to_bytes(8, "big")
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = self._compress(state, tail[start:start + BLOCK_SIZE])
        return state

    def digest(self) -> bytes:
        """Return the final hash as bytes."""
        return b"".join(word.to_bytes(4, "big") for word in self.words())

    def hexdigest(self) -> str:
        """Return the final hash as lower-case hexadecimal text."""
        return self.digest().hex()