import numpy as np
import pytest
from numpy.testing import assert_array_equal as np_assert_equal

import ndcore.ops as ops
from ndcore.exceptions import InvalidShapeError, ShapeMismatchError
from ndcore.ndarray import NDArray

# ============================================================================
# Tests for construction
# ============================================================================


class TestConstruction:
    def test_flat_buffer_defaults_to_rank_one(self):
        a = NDArray([1, 2, 3])

        assert a.shape == (3,)
        assert a.ndim == 1
        assert a.size == 3
        assert a.data.dtype == np.float64

    def test_buffer_and_shape(self):
        a = NDArray(range(6), (2, 3))

        assert a.shape == (2, 3)
        assert a.tolist() == [[0.0, 1.0, 2.0], [3.0, 4.0, 5.0]]

    def test_buffer_is_copied(self):
        source = np.array([1.0, 2.0])
        a = NDArray(source)
        source[0] = 10.0

        assert a[0] == 1.0

    def test_rejects_empty_shape(self):
        with pytest.raises(InvalidShapeError):
            NDArray([1.0], ())

    def test_rejects_buffer_of_wrong_length(self):
        with pytest.raises(ShapeMismatchError):
            NDArray([1.0, 2.0, 3.0], (2, 2))

    def test_rejects_nested_buffer(self):
        with pytest.raises(ShapeMismatchError):
            NDArray(np.zeros((2, 2)), (2, 2))


# ============================================================================
# Tests for value semantics
# ============================================================================


class TestValueSemantics:
    def test_buffer_is_read_only(self):
        a = ops.zeros((2, 2))

        with pytest.raises(ValueError, match="read-only"):
            a.data[0] = 1.0

    def test_with_value_leaves_source_unchanged(self):
        a = ops.zeros((2, 3))

        b = a.with_value((1, 2), 9.0)

        assert a.tolist() == [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]
        assert b.tolist() == [[0.0, 0.0, 0.0], [0.0, 0.0, 9.0]]
        assert not b.data.flags.writeable

    def test_with_value_rejects_out_of_range_coordinate(self):
        with pytest.raises(IndexError):
            ops.zeros((2, 3)).with_value((2, 0), 1.0)

    def test_equality(self):
        a = ops.from_nested([[1, 2], [3, 4]])

        assert a == ops.from_nested([[1, 2], [3, 4]])
        assert a != ops.from_nested([1, 2, 3, 4])
        assert a != ops.from_nested([[1, 2], [3, 5]])
        assert a != [[1, 2], [3, 4]]

    def test_equal_arrays_hash_equal(self):
        assert hash(ops.ones((2, 2))) == hash(ops.full((2, 2), 1.0))
        assert len({ops.ones(3), ops.ones(3), ops.zeros(3)}) == 2

    def test_signed_zeros_are_equal_and_hash_equal(self):
        positive = ops.zeros(2)
        negative = NDArray([-0.0, -0.0])

        assert positive == negative
        assert hash(positive) == hash(negative)
        assert len({positive, negative}) == 1

    def test_with_value_rejects_non_numeric_value(self):
        with pytest.raises(TypeError):
            ops.zeros(3).with_value((0,), "5")  # type: ignore[arg-type]

    def test_to_numpy_returns_writable_copy(self):
        a = ops.from_nested([[1, 2], [3, 4]])
        out = a.to_numpy()
        out[0, 0] = 100.0

        assert out.shape == (2, 2)
        assert a[0, 0] == 1.0

    def test_numpy_interop(self):
        a = ops.from_nested([[1, 2], [3, 4]])

        np_assert_equal(np.asarray(a), np.array([[1.0, 2.0], [3.0, 4.0]]))

    def test_numpy_conversion_refuses_no_copy(self):
        a = ops.from_nested([1, 2])

        with pytest.raises(ValueError, match="without copying"):
            a.__array__(copy=False)
        np_assert_equal(a.__array__(copy=True), np.array([1.0, 2.0]))

    def test_repr(self):
        assert repr(ops.from_nested([[1, 2]])) == "NDArray(shape=(1, 2), data=[[1.0, 2.0]])"
        assert str(ops.from_nested([1, 2])) == "[1.0, 2.0]"


# ============================================================================
# Tests for element access and iteration
# ============================================================================


class TestAccess:
    def test_getitem_by_coordinate(self):
        a = ops.arange(24).reshape(2, 3, 4)

        assert a[0, 0, 0] == 0.0
        assert a[1, 2, 3] == 23.0
        assert a[1, 0, 1] == 13.0

    def test_getitem_int_on_rank_one(self):
        assert ops.arange(5)[3] == 3.0

    @pytest.mark.parametrize("key", [(2, 0), (0, 3), (-1, 0), (0,), 0])
    def test_getitem_rejects_invalid_coordinate(self, key):
        with pytest.raises(IndexError):
            ops.zeros((2, 3))[key]

    def test_len_is_first_extent(self):
        assert len(ops.zeros((4, 2))) == 4

    def test_iterates_first_axis(self):
        rows = list(ops.from_nested([[1, 2], [3, 4], [5, 6]]))

        assert rows == [ops.from_nested([1, 2]), ops.from_nested([3, 4]), ops.from_nested([5, 6])]

    def test_iterating_rank_one_yields_floats(self):
        assert list(ops.from_nested([1, 2])) == [1.0, 2.0]


# ============================================================================
# Tests for delegating methods
# ============================================================================


class TestMethods:
    def test_reshape_accepts_tuple_or_extents(self):
        a = ops.arange(6)

        assert a.reshape(2, 3) == a.reshape((2, 3))
        assert a.reshape(6) == a

    def test_flatten_and_copy(self):
        a = ops.from_nested([[1, 2], [3, 4]])

        assert a.flatten() == ops.from_nested([1, 2, 3, 4])
        assert a.copy() == a

    def test_reductions(self):
        a = ops.from_nested([[1, 2, 3], [4, 5, 6]])

        assert a.sum() == 21.0
        assert a.mean() == 3.5
        assert a.min() == 1.0
        assert a.max() == 6.0
        assert a.var() == pytest.approx(35 / 12)
        assert a.std(ddof=1) == pytest.approx(np.std(np.arange(1, 7), ddof=1))

    def test_dot_and_matmul(self):
        a = ops.from_nested([1, 2, 3])

        assert a.dot([4, 5, 6]) == 32.0
        assert a @ ops.from_nested([4, 5, 6]) == 32.0
        assert [4, 5, 6] @ a == 32.0
