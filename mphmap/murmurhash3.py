"""MurmurHash3 in its 32-bit and two 128-bit variants.

All functions take a bytes-like key and a 32-bit seed. Blocks are read as
little-endian words, so results do not depend on the host platform.
"""

import struct

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_X86_32_C1 = 0xCC9E2D51
_X86_32_C2 = 0x1B873593

_X86_128_C1 = 0x239B961B
_X86_128_C2 = 0xAB0E9789
_X86_128_C3 = 0x38B34AE5
_X86_128_C4 = 0xA1E38B93
# (multiplier, rotation, multiplier) applied to each of the four lanes.
_X86_128_LANES = (
    (_X86_128_C1, 15, _X86_128_C2),
    (_X86_128_C2, 16, _X86_128_C3),
    (_X86_128_C3, 17, _X86_128_C4),
    (_X86_128_C4, 18, _X86_128_C1),
)

_X64_128_C1 = 0x87C37B91114253D5
_X64_128_C2 = 0x4CF5AD432745937F


def _as_bytes(key):
    return memoryview(key).tobytes()


def _rotl32(x, r):
    return ((x << r) | (x >> (32 - r))) & _MASK32


def _rotl64(x, r):
    return ((x << r) | (x >> (64 - r))) & _MASK64


def _fmix32(h):
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _MASK32
    h ^= h >> 16
    return h


def _fmix64(k):
    k ^= k >> 33
    k = (k * 0xFF51AFD7ED558CCD) & _MASK64
    k ^= k >> 33
    k = (k * 0xC4CEB9FE1A85EC53) & _MASK64
    k ^= k >> 33
    return k


def _mix32(k, lane):
    first, rotation, second = lane
    k = (k * first) & _MASK32
    k = _rotl32(k, rotation)
    return (k * second) & _MASK32


def murmur3_x86_32(key, seed):
    """Return the 32-bit MurmurHash3 of ``key``."""
    data = _as_bytes(key)
    length = len(data)
    body_end = length - length % 4
    lane = (_X86_32_C1, 15, _X86_32_C2)

    h1 = seed & _MASK32
    for (k1,) in struct.iter_unpack("<I", data[:body_end]):
        h1 ^= _mix32(k1, lane)
        h1 = _rotl32(h1, 13)
        h1 = (h1 * 5 + 0xE6546B64) & _MASK32

    tail = data[body_end:]
    if tail:
        h1 ^= _mix32(int.from_bytes(tail, "little"), lane)

    h1 ^= length & _MASK32
    return _fmix32(h1)


def murmur3_x86_128(key, seed):
    """Return the x86 128-bit MurmurHash3 of ``key`` as four 32-bit words."""
    data = _as_bytes(key)
    length = len(data)
    body_end = length - length % 16
    lane1, lane2, lane3, lane4 = _X86_128_LANES

    h1 = h2 = h3 = h4 = seed & _MASK32
    for k1, k2, k3, k4 in struct.iter_unpack("<4I", data[:body_end]):
        h1 ^= _mix32(k1, lane1)
        h1 = _rotl32(h1, 19)
        h1 = (h1 + h2) & _MASK32
        h1 = (h1 * 5 + 0x561CCD1B) & _MASK32

        h2 ^= _mix32(k2, lane2)
        h2 = _rotl32(h2, 17)
        h2 = (h2 + h3) & _MASK32
        h2 = (h2 * 5 + 0x0BCAA747) & _MASK32

        h3 ^= _mix32(k3, lane3)
        h3 = _rotl32(h3, 15)
        h3 = (h3 + h4) & _MASK32
        h3 = (h3 * 5 + 0x96CD1C35) & _MASK32

        h4 ^= _mix32(k4, lane4)
        h4 = _rotl32(h4, 13)
        h4 = (h4 + h1) & _MASK32
        h4 = (h4 * 5 + 0x32AC3B17) & _MASK32

    tail = data[body_end:]
    h = [h1, h2, h3, h4]
    for lane_no, lane in enumerate(_X86_128_LANES):
        chunk = tail[4 * lane_no:4 * lane_no + 4]
        if chunk:
            h[lane_no] ^= _mix32(int.from_bytes(chunk, "little"), lane)
    h1, h2, h3, h4 = (v ^ (length & _MASK32) for v in h)

    h1 = (h1 + h2 + h3 + h4) & _MASK32
    h2 = (h2 + h1) & _MASK32
    h3 = (h3 + h1) & _MASK32
    h4 = (h4 + h1) & _MASK32

    h1, h2, h3, h4 = _fmix32(h1), _fmix32(h2), _fmix32(h3), _fmix32(h4)

    h1 = (h1 + h2 + h3 + h4) & _MASK32
    h2 = (h2 + h1) & _MASK32
    h3 = (h3 + h1) & _MASK32
    h4 = (h4 + h1) & _MASK32
    return (h1, h2, h3, h4)


def _mix_k1_x64(k1):
    k1 = (k1 * _X64_128_C1) & _MASK64
    k1 = _rotl64(k1, 31)
    return (k1 * _X64_128_C2) & _MASK64


def _mix_k2_x64(k2):
    k2 = (k2 * _X64_128_C2) & _MASK64
    k2 = _rotl64(k2, 33)
    return (k2 * _X64_128_C1) & _MASK64


def murmur3_x64_128(key, seed):
    """Return the x64 128-bit MurmurHash3 of ``key`` as two 64-bit words."""
    data = _as_bytes(key)
    length = len(data)
    body_end = length - length % 16

    h1 = h2 = seed & _MASK32
    for k1, k2 in struct.iter_unpack("<2Q", data[:body_end]):
        h1 ^= _mix_k1_x64(k1)
        h1 = _rotl64(h1, 27)
        h1 = (h1 + h2) & _MASK64
        h1 = (h1 * 5 + 0x52DCE729) & _MASK64

        h2 ^= _mix_k2_x64(k2)
        h2 = _rotl64(h2, 31)
        h2 = (h2 + h1) & _MASK64
        h2 = (h2 * 5 + 0x38495AB5) & _MASK64

    tail = data[body_end:]
    if len(tail) > 8:
        h2 ^= _mix_k2_x64(int.from_bytes(tail[8:], "little"))
    if tail:
        h1 ^= _mix_k1_x64(int.from_bytes(tail[:8], "little"))

    h1 ^= length & _MASK64
    h2 ^= length & _MASK64

    h1 = (h1 + h2) & _MASK64
    h2 = (h2 + h1) & _MASK64

    h1 = _fmix64(h1)
    h2 = _fmix64(h2)

    h1 = (h1 + h2) & _MASK64
    h2 = (h2 + h1) & _MASK64
    return (h1, h2)