from enum import Enum
from typing import Iterable

import numpy as np

# DCT-II в той же нормировке, что scipy.fftpack.dct(type=2):
# X[k] = 2 * sum(x[i] * cos(pi * k * (2i + 1) / 2n)), без ortho и без 1/2 для DC


class Axis(Enum):
    ROW = 'row'
    COLUMN = 'column'


def cosine_basis(n: int) -> np.ndarray:
    k = np.arange(n, dtype=np.float64).reshape(-1, 1)
    i = np.arange(n, dtype=np.float64).reshape(1, -1)
    return np.cos(np.pi * k * (2 * i + 1) / (2 * n))


def dct2(values: Iterable[float]) -> np.ndarray:
    if not isinstance(values, np.ndarray):
        values = list(values)
    x = np.asarray(values, dtype=np.float64)
    if x.size == 0:
        return np.empty(0, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError(f'dct2 expects a 1D sequence, got shape {x.shape}')
    return 2.0 * (cosine_basis(x.size) @ x)


def dct2_over_matrix(matrix, axis: Axis = Axis.ROW) -> np.ndarray:
    """Apply dct2 to every row or every column of a 2D matrix.

    The input is left untouched; a new float64 array is returned.
    """
    m = np.asarray(matrix, dtype=np.float64)
    if m.size == 0:
        return m.copy()
    if m.ndim != 2:
        raise ValueError(f'dct2_over_matrix expects a 2D matrix, got shape {m.shape}')

    height, width = m.shape
    if axis is Axis.ROW:
        return 2.0 * (m @ cosine_basis(width).T)
    if axis is Axis.COLUMN:
        return 2.0 * (cosine_basis(height) @ m)
    raise ValueError(f'unknown axis: {axis!r}')
