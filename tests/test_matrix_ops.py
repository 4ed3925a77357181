import numpy as np
import pytest

from screwkin import matrix_ops as mo


def test_compare_in_dic_order():
    assert mo.compare_in_dic_order([0, 1, 2], [0, 1, 3])
    assert not mo.compare_in_dic_order([0, 2, 0], [0, 1, 3])
    assert not mo.compare_in_dic_order([1, 2], [1, 2])
    assert mo.compare_in_dic_order([1, 2], [1, 2, 0])
    assert not mo.compare_in_dic_order([1, 2, 0], [1, 2])


def test_sort_rows_is_ordered_permutation():
    rng = np.random.default_rng(0)
    mat = rng.uniform(-1, 1, (3, 4))
    out = mo.sort_rows(mat)
    assert out.shape == mat.shape
    for first, second in zip(out, out[1:]):
        assert not mo.compare_in_dic_order(second, first)
    assert sorted(map(tuple, out)) == sorted(map(tuple, mat))


def test_unique_rows():
    mat = np.array([[0, 1, 2], [0, 1, 2], [3, 4, 5], [3, 4, 5], [3, 4, 5]], dtype=float)
    out = mo.unique_rows(mat)
    assert np.array_equal(out, np.array([[0, 1, 2], [3, 4, 5]], dtype=float))


def test_unique_rows_only_consecutive():
    mat = np.array([[0, 1], [2, 3], [0, 1]], dtype=float)
    assert np.array_equal(mo.unique_rows(mat), mat)


def test_remove_redundant_constrs():
    a = np.array([[0, 1, 2], [3, 4, 5], [0, 1, 2], [3, 4, 5], [3, 4, 5]], dtype=float)
    b = np.array([0, 1, 0, 2, 1], dtype=float)
    a2, b2 = mo.remove_redundant_constrs(a, b)
    assert np.array_equal(a2, np.array([[0, 1, 2], [3, 4, 5], [3, 4, 5]], dtype=float))
    assert np.array_equal(b2, np.array([0, 1, 2], dtype=float))


def test_remove_redundant_constrs_shape_mismatch():
    with pytest.raises(ValueError):
        mo.remove_redundant_constrs(np.zeros((2, 3)), np.zeros(3))


def test_col_space_span():
    a = np.array([[0, 1, 2], [3, 4, 5], [0, 1, 2], [3, 4, 5], [3, 4, 5]], dtype=float)
    b = np.array([0, 1, 0, 2, 1], dtype=float)
    mat = np.column_stack([a, b]).T
    span = mo.col_space_span(mat)
    assert span.shape[1] == np.linalg.matrix_rank(mat)
    assert np.allclose(span.T @ span, np.eye(span.shape[1]))
    projected = span @ (span.T @ mat)
    assert np.allclose(projected, mat)


def test_remove_linear_redundant_constrs_preserves_row_space():
    a = np.array([[1, 0], [2, 0], [0, 1]], dtype=float)
    b = np.array([1, 2, 3], dtype=float)
    a2, b2 = mo.remove_linear_redundant_constrs(a, b)
    new = np.column_stack([a2, b2])
    old = np.column_stack([a, b])
    assert new.shape[0] == np.linalg.matrix_rank(old)
    coeffs, *_ = np.linalg.lstsq(new.T, old.T, rcond=None)
    assert np.allclose(new.T @ coeffs, old.T)


def test_uniform_sample_3d_in_bounds_and_seeded():
    ll = [-1.0, 0.0, 2.0]
    ul = [1.0, 0.5, 3.0]
    s1 = mo.uniform_sample_3d(ll, ul, np.random.default_rng(5))
    s2 = mo.uniform_sample_3d(ll, ul, np.random.default_rng(5))
    assert np.array_equal(s1, s2)
    for _ in range(20):
        s = mo.uniform_sample_3d(ll, ul)
        assert np.all(s >= ll) and np.all(s <= ul)


def test_compare_vector_smaller_eq():
    assert mo.compare_vector_smaller_eq([1, 2, 3], [1, 2, 3])
    assert not mo.compare_vector_smaller_eq([1, 5], [1, 2])
    assert mo.compare_vector_smaller_eq([1, 2, 9], [1, 2])