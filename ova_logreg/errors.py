# errors.py

from enum import Enum


class ErrorKind(Enum):
    SHAPE_MISMATCH = "shape_mismatch"
    NUMERIC_DEGENERACY = "numeric_degeneracy"
    DEVICE_OR_BACKEND_FAILURE = "device_or_backend_failure"


class LogRegError(Exception):
    """
    Base class for failures raised by this package.

    Every subclass carries a `kind` so the driver can map a failure to an
    exit code without inspecting the message.
    """
    kind: ErrorKind


class ShapeMismatchError(LogRegError, ValueError):
    """Operand dimensions are incompatible (matmul, element-wise, concat)."""
    kind = ErrorKind.SHAPE_MISMATCH


class NumericDegeneracyError(LogRegError, ArithmeticError):
    """A loss or gradient became non-finite (only raised in strict mode)."""
    kind = ErrorKind.NUMERIC_DEGENERACY


class BackendError(LogRegError, RuntimeError):
    """The requested compute device cannot be used."""
    kind = ErrorKind.DEVICE_OR_BACKEND_FAILURE


EXIT_CODES = {
    ErrorKind.SHAPE_MISMATCH: 2,
    ErrorKind.NUMERIC_DEGENERACY: 3,
    ErrorKind.DEVICE_OR_BACKEND_FAILURE: 4,
}
