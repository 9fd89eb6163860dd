"""
rng.py - Seeded ChaCha12 generator for random boards

Reproduces the stream of rand's StdRng seeded through seed_from_u64: the
u64 seed is expanded into a 32-byte key with PCG32 steps, the key drives a
ChaCha12 keystream (block counter from 0, stream 0), and the keystream is
consumed as little-endian u32 words.
"""

from dataclasses import dataclass, field
from typing import List
import struct

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

PCG_MUL = 6364136223846793005
PCG_INC = 11634580027462260723

CHACHA_CONSTANTS = (0x61707865, 0x3320646E, 0x79622D32, 0x6B206574)
CHACHA_DOUBLE_ROUNDS = 6  # ChaCha12


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & MASK32


def _quarter_round(s: List[int], a: int, b: int, c: int, d: int) -> None:
    s[a] = (s[a] + s[b]) & MASK32
    s[d] = _rotl(s[d] ^ s[a], 16)
    s[c] = (s[c] + s[d]) & MASK32
    s[b] = _rotl(s[b] ^ s[c], 12)
    s[a] = (s[a] + s[b]) & MASK32
    s[d] = _rotl(s[d] ^ s[a], 8)
    s[c] = (s[c] + s[d]) & MASK32
    s[b] = _rotl(s[b] ^ s[c], 7)


def expand_seed(state: int) -> bytes:
    """Turn a u64 seed into a 32-byte key, four bytes per PCG32 step."""
    key = b""
    for _ in range(8):
        state = (state * PCG_MUL + PCG_INC) & MASK64
        xorshifted = (((state >> 18) ^ state) >> 27) & MASK32
        rot = state >> 59
        word = ((xorshifted >> rot) | (xorshifted << ((32 - rot) & 31))) & MASK32
        key += struct.pack("<I", word)
    return key


@dataclass
class ChaCha12Rng:
    key: bytes
    counter: int = 0
    _buffer: List[int] = field(default_factory=list, repr=False)

    @classmethod
    def seed_from_u64(cls, seed: int) -> "ChaCha12Rng":
        return cls(expand_seed(seed & MASK64))

    def _refill(self) -> None:
        initial = [
            *CHACHA_CONSTANTS,
            *struct.unpack("<8I", self.key),
            self.counter & MASK32,
            (self.counter >> 32) & MASK32,
            0,
            0,
        ]
        s = list(initial)
        for _ in range(CHACHA_DOUBLE_ROUNDS):
            _quarter_round(s, 0, 4, 8, 12)
            _quarter_round(s, 1, 5, 9, 13)
            _quarter_round(s, 2, 6, 10, 14)
            _quarter_round(s, 3, 7, 11, 15)
            _quarter_round(s, 0, 5, 10, 15)
            _quarter_round(s, 1, 6, 11, 12)
            _quarter_round(s, 2, 7, 8, 13)
            _quarter_round(s, 3, 4, 9, 14)

        # reversed so pop() yields word 0 first
        self._buffer = [(x + y) & MASK32 for x, y in zip(s, initial)][::-1]
        self.counter = (self.counter + 1) & MASK64

    def next_u32(self) -> int:
        if not self._buffer:
            self._refill()
        return self._buffer.pop()

    def gen_bool(self) -> bool:
        """Fair coin flip: true when the top bit of the next word is set."""
        return bool(self.next_u32() >> 31)
