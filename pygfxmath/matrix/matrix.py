"""
Fixed-size row-major matrices.

``Matrix[R, C]`` is an immutable R x C grid of scalars (float64 unless a
scalar type is given: ``Matrix[4, 4, np.float32]``). Square-only members
(identity, minor, cofactor, determinant, inverse) exist only on square
specializations; transform factories only on Matrix[3, 3] and
Matrix[4, 4]. See pygfxmath.matrix.transforms for the transform
convention.

Naming:
    minor(i, j)     the (N-1) x (N-1) submatrix without row i and column j
    cofactor(i, j)  the signed scalar (-1)^(i+j) * det(minor(i, j))
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pygfxmath.core.exceptions import DimensionError, SingularMatrixError
from pygfxmath.core.formatting import format_matrix
from pygfxmath.core.shaped import ShapedValue
from pygfxmath.core.tolerances import ILL_CONDITIONED_RATIO, select_tolerance
from pygfxmath.core.validation import check_array, check_index, is_scalar
from pygfxmath.matrix.cofactor import (
    adjugate_of,
    cofactor_matrix_of,
    cofactor_of,
    determinant_of,
    minor_of,
    row_normalized,
)
from pygfxmath.matrix.transforms import _Transform2D, _Transform3D
from pygfxmath.vector import Vector


class _SquareMatrix:
    """Operations defined only when rows == columns."""

    __slots__ = ()

    @classmethod
    def identity(cls):
        """Ones on the diagonal, zeros elsewhere."""
        return cls._wrap(np.eye(cls.rows, dtype=cls.dtype))

    def trace(self) -> Any:
        return np.trace(self._data)

    def minor(self, row: int, column: int):
        """
        Submatrix obtained by deleting one row and one column.

        Raises:
            DimensionError: On a 1x1 matrix (the minor would be empty)
            IndexOutOfRangeError: If row or column is out of range
        """
        n = self.rows
        if n == 1:
            raise DimensionError("a 1x1 matrix has no non-empty minor")
        row = check_index(row, n, 'row')
        column = check_index(column, n, 'column')
        return Matrix._specialize((n - 1, n - 1), self.dtype)._wrap(
            minor_of(self._data, row, column)
        )

    def cofactor(self, row: int, column: int) -> Any:
        """Signed cofactor (-1)^(row+column) * minor(row, column).determinant()."""
        row = check_index(row, self.rows, 'row')
        column = check_index(column, self.columns, 'column')
        return cofactor_of(self._data, row, column)

    def cofactor_matrix(self):
        return self._wrap(cofactor_matrix_of(self._data))

    def adjugate(self):
        """Transpose of the cofactor matrix."""
        return self._wrap(adjugate_of(self._data))

    def determinant(self) -> Any:
        """
        Determinant by recursive cofactor expansion along the first row.

        A 1x1 matrix's determinant is its only element.
        """
        return determinant_of(self._data)

    def inverse(self):
        """
        Inverse via the adjugate: inverse(A) = adjugate(A) / det(A).

        Computed in float64; integer matrices invert to float64 matrices,
        float matrices keep their scalar type.

        Returns:
            The inverse matrix

        Raises:
            SingularMatrixError: If |det(A)| does not exceed
                atol * prod(||row_i||), atol taken from the tolerance tier
                of this matrix's scalar type

        Warns:
            RuntimeWarning: If the matrix is invertible but ill-conditioned
                (Hadamard ratio below ILL_CONDITIONED_RATIO)

        Rows are normalised before the determinant is taken, so scaling a
        matrix by 1e-110 or 1e110 changes neither the verdict nor the
        accuracy of the result.
        """
        # A = diag(norms) @ N with unit rows, so inverse(A) = inverse(N) @ diag(1 / norms)
        normalized, norms = row_normalized(self._data)
        det_normalized = determinant_of(normalized)
        ratio = abs(float(det_normalized)) if np.all(norms > 0) else 0.0
        tier = select_tolerance(self.dtype)
        if not ratio > tier.atol:
            with np.errstate(over='ignore', under='ignore', invalid='ignore'):
                det = float(det_normalized * np.prod(norms))
            raise SingularMatrixError(
                f"{type(self).__name__} is singular: determinant {det!r} "
                f"(Hadamard ratio {ratio:.3g} <= {tier.atol:g})",
                matrix_name=type(self).__name__,
                determinant=float(det),
                threshold=tier.atol,
            )
        if ratio < ILL_CONDITIONED_RATIO:
            warnings.warn(
                f"{type(self).__name__} is ill-conditioned (Hadamard ratio "
                f"{ratio:.3g}); the inverse may be inaccurate",
                RuntimeWarning,
                stacklevel=2,
            )
        inverse = adjugate_of(normalized) / det_normalized / norms[np.newaxis, :]
        dtype = self.dtype if np.issubdtype(self.dtype, np.floating) else np.dtype(np.float64)
        return Matrix._specialize(self.shape, dtype)._wrap(inverse)


class Matrix(ShapedValue, family=True):
    """
    Immutable R x C matrix stored row-major.

    Construction:
        Matrix[2, 2]()                    # zeros
        Matrix[2, 2](1, 2, 3, 4)          # R*C scalars, row-major
        Matrix[2, 2]([1, 2, 3, 4])        # flat aggregate
        Matrix[2, 2]([[1, 2], [3, 4]])    # nested aggregate / numpy array
        Matrix([[1, 2], [3, 4]])          # shape inferred -> Matrix[2, 2]

    Access:
        m[row, column], m[index]          # unchecked fast path; index is
                                          # row-major over all R*C entries
        m.at(row, column), m.at(index)    # bounds-checked
    """

    __slots__ = ()
    _ndim = 2

    @classmethod
    def _specialization_bases(cls, shape):
        rows, columns = shape
        bases = []
        if rows == columns:
            if rows == 3:
                bases.append(_Transform2D)
            elif rows == 4:
                bases.append(_Transform3D)
            bases.append(_SquareMatrix)
        return tuple(bases)

    @classmethod
    def _specialization_attributes(cls, shape):
        rows, columns = shape
        return {'rows': rows, 'columns': columns, 'size': rows * columns}

    @classmethod
    def _specialization_name(cls, shape, dtype):
        rows, columns = shape
        if dtype == np.float64:
            return f"Matrix[{rows}, {columns}]"
        return f"Matrix[{rows}, {columns}, {dtype.name}]"

    @classmethod
    def _infer_shape(cls, args):
        if len(args) == 1 and not is_scalar(args[0]):
            values = check_array(args[0], 'values')
            if values.ndim == 2:
                return values.shape
        raise DimensionError(
            "cannot infer matrix dimensions; pass a nested R x C aggregate "
            "or use Matrix[R, C](...)"
        )

    @classmethod
    def _coerce(cls, args):
        rows, columns = cls.shape
        if not args:
            return np.zeros(cls.shape, dtype=cls.dtype)
        if len(args) == 1 and not is_scalar(args[0]):
            values = check_array(args[0], 'values', dtype=cls.dtype)
            if values.shape == cls.shape:
                return values
            if values.ndim == 1 and values.shape[0] == cls.size:
                return values.reshape(cls.shape)
            raise DimensionError(
                f"{cls.__name__}: expected {rows}x{columns} values, got shape {values.shape}"
            )
        if len(args) != cls.size:
            raise DimensionError(
                f"{cls.__name__} takes 0 or {cls.size} values, got {len(args)}"
            )
        return check_array(list(args), 'values', dtype=cls.dtype).reshape(cls.shape)

    # Access

    def __getitem__(self, key):
        """Unchecked fast path: m[row, column] or flat row-major m[index]."""
        if isinstance(key, tuple):
            return self._data[key]
        return self._data.reshape(-1)[key]

    def at(self, row: int, column: int | None = None) -> Any:
        """
        Bounds-checked access by (row, column) or by flat row-major index.

        Raises:
            IndexOutOfRangeError: If the position is outside the matrix
        """
        if column is None:
            index = check_index(row, self.size, 'index')
            return self._data.reshape(-1)[index]
        row = check_index(row, self.rows, 'row')
        column = check_index(column, self.columns, 'column')
        return self._data[row, column]

    @property
    def data(self) -> NDArray[Any]:
        """Read-only view of the R x C storage."""
        return self._data

    def __iter__(self):
        """Iterate over rows as vectors."""
        vector = Vector._specialize((self.columns,), self.dtype)
        return (vector._wrap(row) for row in self._data)

    def row(self, index: int) -> Vector:
        index = check_index(index, self.rows, 'row')
        return Vector._specialize((self.columns,), self.dtype)._wrap(self._data[index])

    def column(self, index: int) -> Vector:
        index = check_index(index, self.columns, 'column')
        return Vector._specialize((self.rows,), self.dtype)._wrap(self._data[:, index])

    def transposed(self):
        """New Matrix[C, R] with result[c, r] == self[r, c]."""
        return Matrix._specialize((self.columns, self.rows), self.dtype)._wrap(self._data.T)

    # Arithmetic

    def _transform(self, vector: Vector) -> Vector:
        if vector.shape != (self.columns,):
            raise DimensionError(
                f"cannot transform a {type(vector).__name__} by a {type(self).__name__}: "
                f"vector length must equal the column count {self.columns}"
            )
        dtype = np.result_type(self.dtype, vector.dtype)
        return Vector._specialize((self.rows,), dtype)._wrap(self._data @ vector._data)

    def _matrix_operand(self, other: Matrix, op: str) -> NDArray[Any]:
        if other.shape != self.shape:
            raise DimensionError(
                f"'{op}' between {type(self).__name__} and {type(other).__name__}"
            )
        return other._data

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if other.rows != self.columns:
                raise DimensionError(
                    f"cannot multiply {type(self).__name__} by {type(other).__name__}: "
                    f"inner dimensions {self.columns} and {other.rows} differ"
                )
            dtype = np.result_type(self.dtype, other.dtype)
            return Matrix._specialize((self.rows, other.columns), dtype)._wrap(
                self._data @ other._data
            )
        if isinstance(other, Vector):
            return self._transform(other)
        if is_scalar(other):
            return self._wrap(self._data * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Vector):
            return self._transform(other)
        if is_scalar(other):
            return self._wrap(other * self._data)
        return NotImplemented

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._wrap(self._data + self._matrix_operand(other, '+'))

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._wrap(self._data - self._matrix_operand(other, '-'))

    def __truediv__(self, other):
        if not is_scalar(other):
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            return self._wrap(self._data / other)

    def __neg__(self):
        return self._wrap(-self._data)

    def __pos__(self):
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()!r})"

    def __str__(self) -> str:
        return format_matrix(self._data)


Matrix2 = Matrix[2, 2]
Matrix3 = Matrix[3, 3]
Matrix4 = Matrix[4, 4]
Matrix2f = Matrix[2, 2, np.float32]
Matrix3f = Matrix[3, 3, np.float32]
Matrix4f = Matrix[4, 4, np.float32]
