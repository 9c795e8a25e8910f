"""
Cofactor-expansion kernels.

Determinant, minors, cofactors and the adjugate of small square arrays,
computed by plain recursive Laplace expansion along the first row. The
cost grows as O(N!), which is fine for the N <= 4 matrices this library
targets and keeps singular and near-singular inputs free of pivoting
effects.

All functions take and return numpy arrays; pygfxmath.matrix wraps them.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


def minor_of(a: NDArray[Any], row: int, column: int) -> NDArray[Any]:
    """
    Submatrix left after deleting one row and one column.

    Args:
        a: Square array (n x n), n >= 2
        row: Row to delete
        column: Column to delete

    Returns:
        (n-1) x (n-1) array
    """
    return np.delete(np.delete(a, row, axis=0), column, axis=1)


def determinant_of(a: NDArray[Any]) -> Any:
    """
    Determinant by recursive expansion along the first row.

        det(A) = sum_j (-1)^j * A[0, j] * det(minor(A, 0, j))

    Args:
        a: Square array (n x n), n >= 1

    Returns:
        Scalar of a's dtype
    """
    n = a.shape[0]
    if n == 1:
        return a[0, 0]
    total = a.dtype.type(0)
    for j in range(n):
        term = a[0, j] * determinant_of(minor_of(a, 0, j))
        total = total + term if j % 2 == 0 else total - term
    return total


def cofactor_of(a: NDArray[Any], row: int, column: int) -> Any:
    """Signed cofactor (-1)^(row+column) * det(minor(A, row, column))."""
    if a.shape[0] == 1:
        return a.dtype.type(1)
    value = determinant_of(minor_of(a, row, column))
    return value if (row + column) % 2 == 0 else -value


def cofactor_matrix_of(a: NDArray[Any]) -> NDArray[Any]:
    """Matrix whose (i, j) entry is the cofactor of A at (i, j)."""
    n = a.shape[0]
    result = np.empty_like(a)
    for i in range(n):
        for j in range(n):
            result[i, j] = cofactor_of(a, i, j)
    return result


def adjugate_of(a: NDArray[Any]) -> NDArray[Any]:
    """Transpose of the cofactor matrix."""
    return cofactor_matrix_of(a).T


def row_normalized(a: NDArray[Any]) -> tuple[NDArray[Any], NDArray[Any]]:
    """
    Split A into diag(norms) @ N with every row of N of unit length.

    Rows that are entirely zero stay zero in N. det(N) is the Hadamard
    ratio |det(A)| / prod(norms) up to sign: 1 for orthogonal rows, near 0
    for nearly dependent ones, and immune to uniform scaling of A.

    Returns:
        (N, norms) with norms[i] = ||row_i(A)||
    """
    a = np.asarray(a, dtype=np.float64)
    norms = np.linalg.norm(a, axis=1)
    safe = np.where(norms == 0.0, 1.0, norms)
    with np.errstate(invalid='ignore'):
        return a / safe[:, np.newaxis], norms

