"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape-related failures live under DimensionError so
callers can handle "the operands don't fit together" in one place.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class MalformedInputError(ValidationError):
    """
    Literal matrix data is not a well-formed rectangular grid.

    Raised by Matrix.from_rows when rows have inconsistent lengths, when
    the data is not two-dimensional, or when it holds non-numeric values.

    Attributes:
        row_index: Index of the first offending row, if applicable
        expected_length: Length of the first row, if applicable
        actual_length: Length of the offending row, if applicable
    """

    def __init__(
        self,
        message: str,
        row_index: int | None = None,
        expected_length: int | None = None,
        actual_length: int | None = None
    ):
        super().__init__(message)
        self.row_index = row_index
        self.expected_length = expected_length
        self.actual_length = actual_length


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or inconsistent.

    Base class for failures where two matrices cannot be combined.

    Attributes:
        operation: Name of the operation that rejected the operands
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class DimensionMismatchError(DimensionError):
    """
    Elementwise operands do not have identical shapes.

    Raised by add, subtract and dot_multiply. No broadcasting is attempted.
    """
    pass


class IncompatibleShapeForProductError(DimensionError):
    """
    Matrix product operands are incompatible.

    Raised by multiply when the left operand's column count differs from
    the right operand's row count.
    """
    pass
