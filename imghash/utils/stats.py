from typing import Iterable, Optional

import numpy as np


def _as_array(values: Iterable[float]) -> np.ndarray:
    if not isinstance(values, np.ndarray):
        values = list(values)
    return np.asarray(values, dtype=np.float64).ravel()


def mean(values: Iterable[float]) -> Optional[float]:
    arr = _as_array(values)
    if arr.size == 0:
        return None
    return float(arr.mean())


def median(values: Iterable[float]) -> Optional[float]:
    # при чётном количестве - среднее двух центральных
    arr = _as_array(values)
    if arr.size == 0:
        return None
    return float(np.median(arr))
