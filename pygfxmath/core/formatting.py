"""
Diagnostic text rendering for vectors and matrices.

The output is meant for logs and assertion messages, not persistence:

    vec3(1, 2, 3)
    mat2((1, 0), (0, 1))
    mat3x2((1, 2), (3, 4), (5, 6))
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


def format_scalar(value: Any) -> str:
    """Shortest %g-style rendering; integers stay integral."""
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    return format(float(value), 'g')


def format_row(values: NDArray[Any]) -> str:
    return "(" + ", ".join(format_scalar(v) for v in values) + ")"


def format_vector(values: NDArray[Any]) -> str:
    return f"vec{values.shape[0]}" + format_row(values)


def format_matrix(values: NDArray[Any]) -> str:
    rows, columns = values.shape
    prefix = f"mat{rows}" if rows == columns else f"mat{rows}x{columns}"
    return prefix + "(" + ", ".join(format_row(row) for row in values) + ")"
