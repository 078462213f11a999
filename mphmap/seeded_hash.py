"""Seeded hashing of keys into 32-bit and 128-bit digests.

Keys are turned into bytes first: text is encoded as UTF-8, bytes-like
objects are used as they are and integers are laid out as 8 little-endian
bytes, the way a 64-bit integer sits in memory.
"""

from dataclasses import dataclass

from .murmurhash3 import murmur3_x64_128, murmur3_x86_32

_MASK32 = 0xFFFFFFFF
_INT64_MIN = -(1 << 63)
_UINT64_LIMIT = 1 << 64


@dataclass(frozen=True)
class H128:
    """A 128-bit digest held as four 32-bit words."""

    words: tuple

    def __post_init__(self):
        words = tuple(self.words)
        if len(words) != 4:
            raise ValueError(f"expected four 32-bit words, got {len(words)}")
        for word in words:
            if not 0 <= word <= _MASK32:
                raise ValueError(f"{word} is not a 32-bit unsigned integer")
        object.__setattr__(self, "words", words)

    def __getitem__(self, i):
        return self.words[i]

    def get64(self, second):
        """Join the first (or, if ``second``, the last) two words, high word first."""
        base = 2 if second else 0
        return (self.words[base] << 32) | self.words[base + 1]

    def hash32(self):
        """A 32-bit hash of the digest itself: its last word."""
        return self.words[3]

    def __hash__(self):
        return self.hash32()


def key_to_bytes(key):
    """Return the bytes hashed for ``key``."""
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    if isinstance(key, int):
        if _INT64_MIN <= key < 0:
            return key.to_bytes(8, "little", signed=True)
        if 0 <= key < _UINT64_LIMIT:
            return key.to_bytes(8, "little")
        raise ValueError(f"integer key {key} does not fit in 64 bits")
    raise TypeError(f"cannot hash key of type {type(key).__name__}")


def seeded_hash32(key, seed):
    """Return the 32-bit seeded hash of ``key``."""
    return murmur3_x86_32(key_to_bytes(key), seed & _MASK32)


def seeded_hash128(key, seed):
    """Return the 128-bit seeded hash of ``key``."""
    h1, h2 = murmur3_x64_128(key_to_bytes(key), seed & _MASK32)
    return H128((h1 & _MASK32, h1 >> 32, h2 & _MASK32, h2 >> 32))