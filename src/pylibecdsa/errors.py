"""
Error types raised by the ECDSA primitives

A failed signature check is never an error: `verify` returns False for it.
These errors mean the requested operation could not run at all.
"""

from enum import Enum


class ECDSAError(Exception):
    """An error which aborts key generation, signing or verification"""

    class ErrorType(Enum):
        """Types of ECDSA errors"""
        INVALID_CURVE_PARAMETERS = "invalid_curve_parameters"
        UNSUPPORTED_CURVE_BIT_SIZE = "unsupported_curve_bit_size"
        UNSUPPORTED_CURVE_NAME = "unsupported_curve_name"
        INVALID_RANGE = "invalid_range"
        UNINITIALIZED_CURVE = "uninitialized_curve"
        ENTROPY_EXHAUSTED = "entropy_exhausted"

    def __init__(self, error_type: ErrorType, message: str = ""):
        self.error_type = error_type
        super().__init__(f"{error_type.value}: {message}" if message else error_type.value)
