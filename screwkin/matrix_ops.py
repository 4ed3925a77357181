"""Row-wise matrix helpers for constraint sets, plus simple comparisons and sampling."""

from __future__ import annotations

import numpy as np
from scipy.linalg import qr

__all__ = [
    "compare_in_dic_order",
    "sort_rows",
    "unique_rows",
    "remove_redundant_constrs",
    "remove_linear_redundant_constrs",
    "col_space_span",
    "uniform_sample_3d",
    "compare_vector_smaller_eq",
]


def compare_in_dic_order(vec1, vec2) -> bool:
    """True when ``vec1`` comes strictly before ``vec2`` in dictionary order.

    On a common prefix the shorter vector comes first.
    """
    a = np.asarray(vec1, dtype=float).reshape(-1)
    b = np.asarray(vec2, dtype=float).reshape(-1)
    for x, y in zip(a, b):
        if x < y:
            return True
        if x > y:
            return False
    return a.size < b.size


def sort_rows(matrix) -> np.ndarray:
    """Return the rows of ``matrix`` sorted in dictionary order."""
    mat = np.asarray(matrix, dtype=float)
    return np.array(sorted(mat, key=tuple), dtype=float).reshape(mat.shape)


def unique_rows(matrix) -> np.ndarray:
    """Drop rows equal to the row just before them."""
    mat = np.asarray(matrix, dtype=float)
    if mat.shape[0] == 0:
        return mat.copy()
    kept = [mat[0]]
    for row in mat[1:]:
        if not np.array_equal(row, kept[-1]):
            kept.append(row)
    return np.array(kept)


def _stack(a, b) -> np.ndarray:
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float).reshape(-1)
    if a.ndim != 2 or a.shape[0] != b.size:
        raise ValueError("A must be 2-D with as many rows as b has entries")
    return np.column_stack([a, b])


def remove_redundant_constrs(a, b) -> tuple[np.ndarray, np.ndarray]:
    """Remove identical rows of the constraint ``A v + b`` (rows come back sorted)."""
    p = unique_rows(sort_rows(_stack(a, b)))
    return p[:, :-1], p[:, -1]


def col_space_span(a) -> np.ndarray:
    """Orthonormal basis of the column space of ``a``, by column-pivoted QR."""
    mat = np.asarray(a, dtype=float)
    if mat.ndim != 2:
        raise ValueError("expected a 2-D matrix")
    q, r, _ = qr(mat, mode="full", pivoting=True)
    diag = np.abs(np.diag(r))
    if diag.size == 0:
        return q[:, :0]
    threshold = np.finfo(float).eps * min(mat.shape) * diag.max()
    rank = int(np.count_nonzero(diag > threshold))
    return q[:, :rank]


def remove_linear_redundant_constrs(a, b) -> tuple[np.ndarray, np.ndarray]:
    """Replace equality constraints ``A v + b = 0`` by an orthonormal basis of their rows."""
    span = col_space_span(_stack(a, b).T)
    p = span.T
    return p[:, :-1], p[:, -1]


def uniform_sample_3d(ll, ul, rng=None) -> np.ndarray:
    """Sample a 3-vector uniformly in the box ``[ll, ul]``."""
    lower = np.asarray(ll, dtype=float).reshape(3)
    upper = np.asarray(ul, dtype=float).reshape(3)
    generator = rng if rng is not None else np.random.default_rng()
    return generator.uniform(lower, upper)


def compare_vector_smaller_eq(a, b) -> bool:
    """True when ``a[i] <= b[i]`` over the common length of both vectors."""
    x = np.asarray(a, dtype=float).reshape(-1)
    y = np.asarray(b, dtype=float).reshape(-1)
    n = min(x.size, y.size)
    return bool(np.all(x[:n] <= y[:n]))