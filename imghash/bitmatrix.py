"""Bit matrix hash value and its hex codec.

The string form is compatible with ``str(imagehash.ImageHash)``: bits are read
row by row, the whole bit string is left-padded with zeros up to a multiple of
four and rendered as lowercase hex, most significant nibble first.
"""
import string
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .errors import (
    DimensionMismatchError,
    EmptyHashStringError,
    HashLengthError,
    HashShapeError,
    InvalidHexDigitError,
    ZeroDimensionError,
)

_HEX_DIGITS = frozenset(string.hexdigits)


def _nibbles(bit_count: int) -> int:
    return (bit_count + 3) // 4


class BitMatrixHash:
    __slots__ = ('_bits',)

    def __init__(self, bits: Iterable[bool], width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f'Width or height cannot be 0 (got {width}x{height})')
        if not isinstance(bits, np.ndarray):
            bits = list(bits)
        arr = np.asarray(bits, dtype=bool).ravel()
        if arr.size != width * height:
            raise ValueError(f'expected {width * height} bits for {width}x{height}, got {arr.size}')
        arr = arr.reshape(height, width).copy()
        arr.flags.writeable = False
        self._bits = arr

    @classmethod
    def from_matrix(cls, rows: Sequence[Sequence[bool]]) -> 'BitMatrixHash':
        rows = [list(r) for r in rows]
        if not rows or not rows[0]:
            raise ValueError('Cannot build a hash from an empty matrix')
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError('all matrix rows must have the same length')
        return cls([b for r in rows for b in r], width, len(rows))

    @property
    def width(self) -> int:
        return self._bits.shape[1]

    @property
    def height(self) -> int:
        return self._bits.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def bits(self) -> np.ndarray:
        # read-only flat view
        return self._bits.ravel()

    @property
    def matrix(self) -> List[List[bool]]:
        return self._bits.tolist()

    def flatten(self) -> List[bool]:
        return self._bits.ravel().tolist()

    def encode(self) -> str:
        bits = self._bits.ravel()
        assert bits.size > 0, 'Cannot encode an empty matrix'
        value = int(''.join('1' if b else '0' for b in bits), 2)
        return f'{value:0{_nibbles(bits.size)}x}'

    @classmethod
    def decode(cls, s: str, width: int, height: int) -> 'BitMatrixHash':
        """Parse a hex string produced by encode() (or by imagehash).

        width/height must be the shape the hash was computed with; imagehash
        hashes of ``hash_size=n`` are n x n.
        """
        total = width * height
        if width <= 0 or height <= 0:
            raise ZeroDimensionError('Width or height cannot be 0')
        if not s:
            raise EmptyHashStringError('String is empty')
        if len(s) != _nibbles(total):
            raise HashLengthError('String is too short or too long for the specified size')
        if not all(ch in _HEX_DIGITS for ch in s):
            raise InvalidHexDigitError('invalid digit found in string')

        # ведущие нули, добавленные при кодировании, пропускаются
        skip = (4 - total % 4) % 4
        bits = []
        for i, ch in enumerate(s):
            digit = int(ch, 16)
            for j in range(skip if i == 0 else 0, 4):
                bits.append(bool((digit >> (3 - j)) & 1))

        if len(bits) != total:
            raise DimensionMismatchError('Matrix dimensions do not match the specified width and height')
        return cls(bits, width, height)

    def distance(self, other: 'BitMatrixHash') -> int:
        if not isinstance(other, BitMatrixHash):
            raise TypeError(f'cannot compare BitMatrixHash with {type(other).__name__}')
        if self.shape != other.shape:
            raise HashShapeError(
                f'Cannot compare hashes of different sizes: {self.width}x{self.height} vs {other.width}x{other.height}'
            )
        return int(np.count_nonzero(self._bits != other._bits))

    def __sub__(self, other: 'BitMatrixHash') -> int:
        return self.distance(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BitMatrixHash):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._bits, other._bits))

    def __hash__(self) -> int:
        return hash((self.shape, self._bits.tobytes()))

    def __len__(self) -> int:
        return self._bits.size

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f'BitMatrixHash({self.encode()!r}, width={self.width}, height={self.height})'
