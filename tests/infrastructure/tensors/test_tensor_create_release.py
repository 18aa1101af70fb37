import unittest

import numpy as np

from revgrad.domain._element_type import ElementType
from revgrad.domain._errors import (
    AllocationError,
    InvalidShapeError,
    TensorReleasedError,
    UnsupportedTypeError,
)
from revgrad.domain._operation import Operation
from revgrad.infrastructure.tensor._tensor import Tensor, release


class TestTensorCreate(unittest.TestCase):
    def test_create_copies_raw_data_and_infers_shape(self):
        raw = [[1.0, 2.0], [3.0, 4.0]]
        t = Tensor.create(raw, ElementType.FLOAT32)

        self.assertEqual(t.shape, (2, 2))
        self.assertEqual(t.rank, 2)
        self.assertEqual(t.element_count, 4)
        self.assertEqual(t.numel(), 4)
        self.assertEqual(t.dtype, np.float32)
        np.testing.assert_array_equal(t.to_numpy(), np.array(raw, dtype=np.float32))
        np.testing.assert_array_equal(t.data, np.array([1, 2, 3, 4], dtype=np.float32))

    def test_create_with_explicit_shape_reads_row_major(self):
        t = Tensor.create([1, 2, 3, 4, 5, 6], "int64", shape=(2, 3))
        np.testing.assert_array_equal(t.to_numpy(), [[1, 2, 3], [4, 5, 6]])
        self.assertIs(t.element_type, ElementType.INT64)

    def test_create_without_data_is_zero_filled(self):
        t = Tensor.create(None, "float64", (3,))
        np.testing.assert_array_equal(t.to_numpy(), np.zeros(3))

    def test_leaf_metadata(self):
        t = Tensor.create([1.0], "float32", (1,))
        self.assertTrue(t.is_leaf)
        self.assertIs(t.producing_operation, Operation.LEAF)
        self.assertEqual(t.operands, ())
        self.assertEqual(t.auxiliary_scalar, 0.0)

    def test_float_tracking_tensor_has_zeroed_gradient(self):
        t = Tensor((2, 3), "float32", requires_grad=True)
        self.assertTrue(t.requires_grad)
        np.testing.assert_array_equal(t.grad, np.zeros((2, 3), dtype=np.float32))

    def test_untracked_tensor_has_no_gradient(self):
        t = Tensor((2,), "float32")
        self.assertFalse(t.requires_grad)
        self.assertIsNone(t.grad)

    def test_integer_tensor_never_tracks_gradients(self):
        t = Tensor((2,), "int32", requires_grad=True)
        self.assertFalse(t.requires_grad)
        self.assertIsNone(t.grad)

        t.requires_grad = True
        self.assertFalse(t.requires_grad)

    def test_requires_grad_setter_allocates_and_drops_buffer(self):
        t = Tensor((2,), "float64")
        t.requires_grad = True
        np.testing.assert_array_equal(t.grad, [0.0, 0.0])
        t.requires_grad = False
        self.assertIsNone(t.grad)

    def test_grad_is_a_copy(self):
        t = Tensor((2,), "float64", requires_grad=True)
        g = t.grad
        g[0] = 5.0
        np.testing.assert_array_equal(t.grad, [0.0, 0.0])

    def test_item(self):
        self.assertEqual(Tensor.create([7], "int32").item(), 7)
        with self.assertRaises(ValueError):
            Tensor.create([1, 2], "int32").item()

    def test_zero_grad_keeps_buffer(self):
        t = Tensor((2,), "float32", requires_grad=True)
        t._accumulate_grad_(np.array([1.0, 2.0]))
        t.zero_grad()
        np.testing.assert_array_equal(t.grad, [0.0, 0.0])

    def test_invalid_shapes_rejected(self):
        for shape in [(), (0, 2), (2, -1), (2.5,), (True,), "ab"]:
            with self.subTest(shape=shape):
                with self.assertRaises(InvalidShapeError):
                    Tensor(shape, "float32")

    def test_raw_data_count_mismatch_rejected(self):
        with self.assertRaises(InvalidShapeError):
            Tensor.create([1.0, 2.0, 3.0], "float32", (2, 2))

    def test_ragged_raw_data_rejected(self):
        with self.assertRaises(InvalidShapeError):
            Tensor.create([[1.0, 2.0], [3.0]], "float32")
        with self.assertRaises(InvalidShapeError):
            Tensor.create([[1.0, 2.0], [3.0]], "float32", (3,))

    def test_unknown_element_type_rejected(self):
        with self.assertRaises(UnsupportedTypeError):
            Tensor((2,), "float16")

    def test_unobtainable_buffer_raises_allocation_error(self):
        with self.assertRaises(AllocationError) as ctx:
            Tensor((2**31, 2**31), "float64")
        self.assertEqual(ctx.exception.shape, (2**31, 2**31))

    def test_repr(self):
        t = Tensor((2, 2), "float32", requires_grad=True)
        r = repr(t)
        self.assertIn("shape=(2, 2)", r)
        self.assertIn("float32", r)
        self.assertIn("op=LEAF", r)


class TestTensorRelease(unittest.TestCase):
    def test_release_is_idempotent(self):
        t = Tensor((2,), "float32", requires_grad=True)
        release(t)
        release(t)
        self.assertTrue(t.is_released)
        self.assertIsNone(t.shape)
        self.assertIsNone(t.grad)

    def test_release_none_is_noop(self):
        release(None)

    def test_release_rejects_non_tensor(self):
        with self.assertRaises(TypeError):
            release([1, 2])

    def test_released_tensor_cannot_be_used(self):
        t = Tensor.create([1.0, 2.0], "float32")
        release(t)
        with self.assertRaises(TensorReleasedError):
            t.to_numpy()
        with self.assertRaises(TensorReleasedError):
            t.relu()
        with self.assertRaises(TensorReleasedError):
            _ = t.data

    def test_release_keeps_operands_alive(self):
        a = Tensor.create([1.0, 2.0], "float32", requires_grad=True)
        b = Tensor.create([3.0, 4.0], "float32")
        c = a + b
        release(c)

        np.testing.assert_array_equal(a.to_numpy(), [1.0, 2.0])
        np.testing.assert_array_equal(b.to_numpy(), [3.0, 4.0])
        self.assertFalse(a.is_released)
        self.assertEqual(c.operands, ())

    def test_released_repr(self):
        t = Tensor((1,), "int32")
        t.release()
        self.assertIn("released", repr(t))


if __name__ == "__main__":
    unittest.main()
