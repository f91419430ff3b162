import pytest

from neonufft.errors import (
    ErrorCode,
    GenericError,
    GPUError,
    GPUFFTError,
    InputError,
    InternalError,
    MemoryAllocError,
    NotImplementedFeatureError,
)


@pytest.mark.parametrize(
    "cls, value",
    [
        (GenericError, 1),
        (MemoryAllocError, 2),
        (InternalError, 4),
        (InputError, 5),
        (GPUError, 6),
        (GPUFFTError, 6),
        (NotImplementedFeatureError, 7),
    ],
)
def test_error_code_numeric_values_follow_enum(cls, value):
    code = cls().error_code()
    assert int(code) == value
    assert code is ErrorCode(value)


@pytest.mark.parametrize(
    "cls, code",
    [
        (GenericError, ErrorCode.GENERIC_ERROR),
        (InputError, ErrorCode.INPUT_ERROR),
        (InternalError, ErrorCode.INTERNAL_ERROR),
        (MemoryAllocError, ErrorCode.MEMORY_ALLOC_ERROR),
        (NotImplementedFeatureError, ErrorCode.NOT_IMPLEMENTED_ERROR),
        (GPUError, ErrorCode.GPU_ERROR),
        (GPUFFTError, ErrorCode.GPU_ERROR),
    ],
)
def test_error_codes(cls, code):
    assert cls().error_code() == code
    assert cls("custom").error_code() == code


@pytest.mark.parametrize(
    "cls, message",
    [
        (GenericError, "Neonufft:: Generic error"),
        (InternalError, "Neonufft:: Internal error"),
        (MemoryAllocError, "Neonufft:: Memory allocation error"),
        (NotImplementedFeatureError, "Neonufft:: Not implemented"),
        (GPUError, "Neonufft:: GPU error"),
        (GPUFFTError, "Neonufft:: GPU FFT error"),
    ],
)
def test_default_messages(cls, message):
    err = cls()
    assert str(err) == message
    assert err.message == message


def test_custom_message_is_kept():
    err = InputError("bad shape")
    assert str(err) == "bad shape"
    assert err.message == "bad shape"


@pytest.mark.parametrize(
    "cls",
    [InputError, InternalError, MemoryAllocError, NotImplementedFeatureError, GPUError, GPUFFTError],
)
def test_all_errors_caught_as_generic(cls):
    with pytest.raises(GenericError) as info:
        raise cls("x")
    assert info.value.error_code() == cls.code


def test_builtin_compatibility():
    mem_err = MemoryAllocError()
    assert isinstance(mem_err, MemoryError)
    assert isinstance(mem_err, GenericError)
    assert mem_err.error_code() == ErrorCode.MEMORY_ALLOC_ERROR
    assert str(mem_err) == "Neonufft:: Memory allocation error"

    ni_err = NotImplementedFeatureError()
    assert isinstance(ni_err, NotImplementedError)
    assert isinstance(ni_err, GenericError)
    assert ni_err.error_code() == ErrorCode.NOT_IMPLEMENTED_ERROR
    assert str(ni_err) == "Neonufft:: Not implemented"