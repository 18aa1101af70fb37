import unittest
import warnings

import numpy as np

from revgrad.domain._operation import Operation
from revgrad.infrastructure.tensor._tensor import Tensor


class TestTensorPow(unittest.TestCase):
    def test_forward_and_auxiliary_scalar(self):
        x = Tensor.create([1.0, 2.0, 3.0], "float32")
        y = x ** 2
        np.testing.assert_allclose(y.to_numpy(), [1.0, 4.0, 9.0])
        self.assertIs(y.producing_operation, Operation.POW)
        self.assertEqual(y.auxiliary_scalar, 2.0)

    def test_integer_pow_truncates(self):
        x = Tensor.create([2, 3, 4], "int32")
        np.testing.assert_array_equal(x.pow(0.5).to_numpy(), [1, 1, 2])
        np.testing.assert_array_equal(x.pow(3).to_numpy(), [8, 27, 64])

    def test_integer_pow_saturates_out_of_range_results(self):
        x = Tensor.create([0, 2, -8], "int32")
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            inv = x.pow(-1)
            root = x.pow(0.5)
        info = np.iinfo(np.int32)
        np.testing.assert_array_equal(inv.to_numpy(), [info.max, 0, 0])
        np.testing.assert_array_equal(root.to_numpy(), [0, 1, 0])

        big = Tensor.create([3, -3], "int64").pow(100)
        info64 = np.iinfo(np.int64)
        np.testing.assert_array_equal(big.to_numpy(), [info64.max, info64.max])
        low = Tensor.create([-3], "int64").pow(99)
        np.testing.assert_array_equal(low.to_numpy(), [info64.min])

    def test_tensor_exponent_not_supported(self):
        x = Tensor.create([1.0], "float32")
        with self.assertRaises(TypeError):
            x ** x
        with self.assertRaises(TypeError):
            x.pow("2")

    def test_backward(self):
        x = Tensor.create([1.0, 2.0, 3.0], "float64", requires_grad=True)
        x.pow(3).sum().backward()
        np.testing.assert_allclose(x.grad, [3.0, 12.0, 27.0])


class TestTensorExp(unittest.TestCase):
    def test_integer_exp_saturates_on_overflow(self):
        x = Tensor.create([1, 100, -100], "int32")
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            y = x.exp()
        np.testing.assert_array_equal(y.to_numpy(), [2, np.iinfo(np.int32).max, 0])

    def test_forward_matches_numpy(self):
        x_np = np.array([[-1.0, 0.0, 1.5]], dtype=np.float32)
        y = Tensor.create(x_np, "float32").exp()
        np.testing.assert_allclose(y.to_numpy(), np.exp(x_np), rtol=1e-6)

    def test_integer_exp_truncates(self):
        y = Tensor.create([0, 1, 2], "int32").exp()
        self.assertEqual(y.to_numpy().dtype, np.int32)
        np.testing.assert_array_equal(y.to_numpy(), [1, 2, 7])

    def test_overflow_saturates(self):
        y = Tensor.create([1000.0], "float64").exp()
        self.assertTrue(np.isinf(y.to_numpy()[0]))

    def test_backward(self):
        x_np = np.array([0.0, 0.5, -1.0])
        x = Tensor.create(x_np, "float64", requires_grad=True)
        x.exp().sum().backward()
        np.testing.assert_allclose(x.grad, np.exp(x_np), rtol=1e-12)


if __name__ == "__main__":
    unittest.main()
