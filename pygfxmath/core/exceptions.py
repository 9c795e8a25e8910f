"""
Exception hierarchy for pygfxmath.

All exceptions inherit from PyGfxMathError to allow catching any
library-specific error. Module-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyGfxMathError(Exception):
    """Base exception for all pygfxmath errors."""
    pass


class ValidationError(PyGfxMathError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or inconsistent.

    Raised when a value is built from the wrong number of components, when
    two operands have incompatible shapes (vector lengths, matrix inner
    dimensions), or when a swizzle selects a component the source lacks.
    """
    pass


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Bounds-checked access outside the value's storage.

    Also an IndexError so plain Python handlers keep working.

    Attributes:
        index: The offending index (int or (row, column) tuple)
        bounds: The valid extent along each axis
    """

    def __init__(
        self,
        message: str,
        index: int | tuple[int, ...] | None = None,
        bounds: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bounds = bounds


class UnitMismatchError(ValidationError, TypeError):
    """
    Angle arithmetic mixed two different units.

    Arithmetic never promotes units implicitly; convert one operand first,
    e.g. ``Radians(Degrees(180))``.

    Attributes:
        left_unit: Unit of the left operand
        right_unit: Unit of the right operand
    """

    def __init__(
        self,
        message: str,
        left_unit: str | None = None,
        right_unit: str | None = None,
    ):
        super().__init__(message)
        self.left_unit = left_unit
        self.right_unit = right_unit


class NumericalError(PyGfxMathError):
    """
    Numerical computation failed.

    Base class for errors arising from degenerate numeric input.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a matrix operation requires invertibility but the
    determinant does not clear the tolerance threshold.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The computed determinant, if available
        threshold: Absolute threshold the determinant had to exceed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        threshold: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.threshold = threshold


class DegenerateGeometryError(NumericalError):
    """
    Geometric construction has no well-defined result.

    Raised when a transform factory is handed coincident points or
    parallel directions (e.g. a look-at whose up vector is parallel to
    the view direction).

    Attributes:
        reason: Short machine-readable tag ('coincident_points',
            'parallel_up_vector', ...)
    """

    def __init__(self, message: str, reason: str | None = None):
        super().__init__(message)
        self.reason = reason
