import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from neonufft.errors import InternalError
from neonufft.view import (
    all_equal,
    all_less,
    is_contiguous,
    view_index,
    view_size,
)


def _contiguous_strides(shape):
    strides = [1]
    for extent in shape[:-1]:
        strides.append(strides[-1] * extent)
    return strides


shapes = st.lists(st.integers(min_value=1, max_value=6), min_size=1, max_size=3)


def test_view_size_empty_shape_is_zero():
    assert view_size(()) == 0


def test_view_size_with_zero_extent():
    assert view_size((4, 0, 3)) == 0


@given(shapes)
def test_view_size_matches_numpy(shape):
    assert view_size(shape) == np.zeros(shape).size


@given(shapes, st.data())
def test_view_index_matches_column_major_ravel(shape, data):
    indices = [data.draw(st.integers(min_value=0, max_value=n - 1)) for n in shape]
    strides = _contiguous_strides(shape)
    expected = int(np.ravel_multi_index(indices, shape, order="F"))
    assert view_index(indices, strides) == expected


@given(shapes)
def test_view_index_last_element_is_size_minus_one(shape):
    strides = _contiguous_strides(shape)
    last = [n - 1 for n in shape]
    assert view_index(last, strides) == view_size(shape) - 1


def test_view_index_ignores_first_stride():
    assert view_index((5, 2), (7, 10)) == view_index((5, 2), (1, 10))


def test_view_index_padded_stride():
    # inner dimension padded to 8 entries
    assert view_index((3, 2), (1, 8)) == 19


def test_view_index_length_mismatch():
    with pytest.raises(InternalError):
        view_index((1, 2), (1,))


def test_view_index_empty():
    with pytest.raises(InternalError):
        view_index((), ())


def test_all_less():
    assert all_less((1, 2, 3), (2, 3, 4)) is True
    assert all_less((1, 3, 3), (2, 3, 4)) is False


def test_all_equal():
    assert all_equal((4, 5), (4, 5)) is True
    assert all_equal((4, 5), (4, 6)) is False


def test_comparisons_length_mismatch():
    with pytest.raises(InternalError):
        all_less((1,), (1, 2))
    with pytest.raises(InternalError):
        all_equal((1, 2), (1,))


@given(shapes)
def test_contiguous_strides_are_contiguous(shape):
    assert is_contiguous(shape, _contiguous_strides(shape)) is True


@given(st.lists(st.integers(min_value=1, max_value=6), min_size=2, max_size=3))
def test_padded_strides_are_not_contiguous(shape):
    strides = _contiguous_strides(shape)
    strides[1] += 1
    for i in range(2, len(shape)):
        strides[i] = strides[i - 1] * shape[i - 1]
    assert is_contiguous(shape, strides) is False


def test_one_dimensional_is_always_contiguous():
    assert is_contiguous((10,), (3,)) is True


def test_is_contiguous_length_mismatch():
    with pytest.raises(InternalError):
        is_contiguous((2, 3), (1,))