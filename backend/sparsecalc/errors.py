class MatrixError(Exception):
    """Base class for sparse matrix errors"""


class DimensionMismatchError(MatrixError, ValueError):
    """Operand shapes are incompatible for the requested operation"""

    def __init__(self, operation, left_shape, right_shape):
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape
        super().__init__(
            f"Matrix dimensions do not match for {operation}: "
            f"{left_shape[0]}x{left_shape[1]} and {right_shape[0]}x{right_shape[1]}"
        )


class MatrixFormatError(MatrixError, ValueError):
    """Structural violation of the matrix text format"""

    def __init__(self, message, line_number=None):
        self.line_number = line_number
        if line_number is not None:
            message = f"Invalid file format (line {line_number}): {message}"
        else:
            message = f"Invalid file format: {message}"
        super().__init__(message)


class NotANumberError(MatrixFormatError):
    """A numeric field could not be parsed as an integer"""

    def __init__(self, token, line_number=None):
        self.token = token
        super().__init__(f"{token!r} is not an integer", line_number)


class UnknownOperationError(MatrixError, ValueError):
    """Requested operation is not one of the supported operations"""

    def __init__(self, operation, allowed):
        self.operation = operation
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid operation '{operation}'. Allowed operations are {', '.join(self.allowed)}."
        )
