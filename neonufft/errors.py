"""Error codes and the exception hierarchy raised by the library."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "ErrorCode",
    "GenericError",
    "InputError",
    "InternalError",
    "MemoryAllocError",
    "NotImplementedFeatureError",
    "GPUError",
    "GPUFFTError",
]


class ErrorCode(IntEnum):
    """Numeric error codes, one per kind of failure."""

    SUCCESS = 0
    GENERIC_ERROR = 1
    MEMORY_ALLOC_ERROR = 2
    UNKNOWN_ERROR = 3
    INTERNAL_ERROR = 4
    INPUT_ERROR = 5
    GPU_ERROR = 6
    NOT_IMPLEMENTED_ERROR = 7


class GenericError(Exception):
    """Base class of every error raised by the library."""

    default_message = "Neonufft:: Generic error"
    code = ErrorCode.GENERIC_ERROR

    def __init__(self, message: str | None = None) -> None:
        self.message = self.default_message if message is None else message
        super().__init__(self.message)

    def error_code(self) -> ErrorCode:
        """Return the numeric code that identifies this kind of error."""
        return self.code


class InputError(GenericError):
    """Invalid input handed to the library."""

    default_message = "Neonufft:: Internal error"
    code = ErrorCode.INPUT_ERROR


class InternalError(GenericError):
    """An internal consistency check failed."""

    default_message = "Neonufft:: Internal error"
    code = ErrorCode.INTERNAL_ERROR


class MemoryAllocError(GenericError, MemoryError):
    """Memory could not be allocated."""

    default_message = "Neonufft:: Memory allocation error"
    code = ErrorCode.MEMORY_ALLOC_ERROR


class NotImplementedFeatureError(GenericError, NotImplementedError):
    """The requested feature is not available."""

    default_message = "Neonufft:: Not implemented"
    code = ErrorCode.NOT_IMPLEMENTED_ERROR


class GPUError(GenericError):
    """A failure reported by a GPU backend."""

    default_message = "Neonufft:: GPU error"
    code = ErrorCode.GPU_ERROR


class GPUFFTError(GenericError):
    """A failure reported by a GPU FFT backend."""

    default_message = "Neonufft:: GPU FFT error"
    code = ErrorCode.GPU_ERROR