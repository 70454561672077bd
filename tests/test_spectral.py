import numpy as np
import pytest

from imghash.utils.spectral import Axis, dct2, dct2_over_matrix

ROW_DCT = [20.0, -6.308644059797899, 0.0, -0.44834152916796777]
MATRIX = np.arange(1, 17, dtype=np.float64).reshape(4, 4)


def test_dct2():
    assert dct2([1, 2, 3, 4]).tolist() == pytest.approx(ROW_DCT, abs=1e-9)


def test_dct2_matches_definition():
    x = np.array([3.0, -1.0, 4.0, 1.0, -5.0, 9.0, 2.0])
    n = x.size
    expected = [2 * sum(x[i] * np.cos(np.pi * k * (2 * i + 1) / (2 * n)) for i in range(n)) for k in range(n)]
    assert dct2(x).tolist() == pytest.approx(expected, abs=1e-9)


def test_dct2_with_empty_input():
    assert dct2([]).tolist() == []


def test_dct2_rejects_matrix():
    with pytest.raises(ValueError):
        dct2(MATRIX)


def test_dct2_over_matrix_rows():
    result = dct2_over_matrix(MATRIX, Axis.ROW)
    expected = [
        [20.0, -6.308644059797899, 0.0, -0.44834152916796777],
        [52.0, -6.308644059797897, 0.0, -0.44834152916797],
        [84.0, -6.308644059797897, 0.0, -0.44834152916797265],
        [116.0, -6.308644059797899, 0.0, -0.4483415291679762],
    ]
    assert result.ravel().tolist() == pytest.approx(np.ravel(expected).tolist(), abs=1e-9)


def test_dct2_over_matrix_columns():
    result = dct2_over_matrix(MATRIX, Axis.COLUMN)
    expected = [
        [56.0, 64.0, 72.0, 80.0],
        [-25.234576239191597] * 4,
        [0.0] * 4,
        [-1.7933661166718693] * 4,
    ]
    assert result.ravel().tolist() == pytest.approx(np.ravel(expected).tolist(), abs=1e-9)


def test_dct2_over_matrix_does_not_modify_input():
    m = MATRIX.copy()
    dct2_over_matrix(m, Axis.COLUMN)
    assert np.array_equal(m, MATRIX)


def test_dct2_over_non_square_matrix():
    m = np.arange(6, dtype=np.float64).reshape(2, 3)
    rows = dct2_over_matrix(m, Axis.ROW)
    cols = dct2_over_matrix(m, Axis.COLUMN)
    assert rows.shape == cols.shape == (2, 3)
    assert rows[1].tolist() == pytest.approx(dct2(m[1]).tolist())
    assert cols[:, 2].tolist() == pytest.approx(dct2(m[:, 2]).tolist())


def test_dct2_both_axes_order_is_irrelevant():
    a = dct2_over_matrix(dct2_over_matrix(MATRIX, Axis.COLUMN), Axis.ROW)
    b = dct2_over_matrix(dct2_over_matrix(MATRIX, Axis.ROW), Axis.COLUMN)
    assert np.allclose(a, b)
    assert a[0, 0] == pytest.approx(4 * MATRIX.sum())


@pytest.mark.parametrize('axis', [Axis.ROW, Axis.COLUMN])
def test_dct2_over_empty_matrix(axis):
    assert dct2_over_matrix([], axis).size == 0


def test_dct2_over_matrix_rejects_1d_input():
    with pytest.raises(ValueError):
        dct2_over_matrix([1.0, 2.0], Axis.ROW)
