import unittest

import numpy as np

from revgrad.domain._element_type import ElementType
from revgrad.domain._errors import UnsupportedTypeError
from revgrad.domain._operation import Operation
from revgrad.infrastructure.tensor._tensor import Tensor


class TestTensorRelu(unittest.TestCase):
    def test_forward(self):
        y = Tensor.create([-1.0, 0.0, 2.0], "float32").relu()
        np.testing.assert_array_equal(y.to_numpy(), [0.0, 0.0, 2.0])

    def test_forward_integer(self):
        y = Tensor.create([-3, 0, 5], "int64").relu()
        np.testing.assert_array_equal(y.to_numpy(), [0, 0, 5])
        self.assertIs(y.element_type, ElementType.INT64)

    def test_backward_passes_gradient_where_input_non_negative(self):
        x = Tensor.create([-1.0, 0.0, 2.0], "float64", requires_grad=True)
        x.relu().sum().backward()
        np.testing.assert_array_equal(x.grad, [0.0, 1.0, 1.0])


class TestTensorLeakyRelu(unittest.TestCase):
    def test_forward_and_slope_recorded(self):
        y = Tensor.create([-2.0, 3.0], "float64").leaky_relu(0.1)
        np.testing.assert_allclose(y.to_numpy(), [-0.2, 3.0])
        self.assertIs(y.producing_operation, Operation.LEAKY_RELU)
        self.assertAlmostEqual(y.auxiliary_scalar, 0.1)

    def test_backward(self):
        x = Tensor.create([-2.0, 3.0], "float64", requires_grad=True)
        x.leaky_relu(0.1).sum().backward()
        np.testing.assert_allclose(x.grad, [0.1, 1.0])

    def test_rejects_integers(self):
        with self.assertRaises(UnsupportedTypeError) as ctx:
            Tensor.create([1, -1], "int32").leaky_relu(0.1)
        self.assertEqual(ctx.exception.op, "leaky_relu")


class TestTensorSigmoidTanh(unittest.TestCase):
    def test_sigmoid_of_zero(self):
        y = Tensor((3,), "float32").sigmoid()
        np.testing.assert_allclose(y.to_numpy(), [0.5, 0.5, 0.5])

    def test_sigmoid_matches_numpy(self):
        x_np = np.array([[-4.0, -1.0, 0.0, 1.0, 4.0]], dtype=np.float32)
        y = Tensor.create(x_np, "float32").sigmoid()
        np.testing.assert_allclose(y.to_numpy(), 1.0 / (1.0 + np.exp(-x_np)), rtol=1e-6)

    def test_sigmoid_extreme_inputs(self):
        y = Tensor.create([-1000.0, 1000.0], "float32").sigmoid().to_numpy()
        np.testing.assert_allclose(y, [0.0, 1.0])

    def test_integer_inputs_are_promoted(self):
        y32 = Tensor.create([0, 1], "int32").sigmoid()
        y64 = Tensor.create([0, 1], "int64").tanh()
        self.assertIs(y32.element_type, ElementType.FLOAT32)
        self.assertIs(y64.element_type, ElementType.FLOAT64)
        self.assertFalse(y32.requires_grad)
        np.testing.assert_allclose(y64.to_numpy(), np.tanh([0.0, 1.0]))

    def test_sigmoid_backward(self):
        x_np = np.array([-1.0, 0.0, 2.0])
        x = Tensor.create(x_np, "float64", requires_grad=True)
        x.sigmoid().sum().backward()
        s = 1.0 / (1.0 + np.exp(-x_np))
        np.testing.assert_allclose(x.grad, s * (1.0 - s), rtol=1e-12)

    def test_tanh_backward(self):
        x_np = np.array([-1.0, 0.0, 2.0])
        x = Tensor.create(x_np, "float64", requires_grad=True)
        x.tanh().sum().backward()
        np.testing.assert_allclose(x.grad, 1.0 - np.tanh(x_np) ** 2, rtol=1e-12)


class TestTensorSoftmax(unittest.TestCase):
    def test_large_equal_inputs(self):
        y = Tensor.create([1000.0, 1000.0, 1000.0], "float32").softmax()
        np.testing.assert_allclose(y.to_numpy(), [1 / 3, 1 / 3, 1 / 3], rtol=1e-6)

    def test_rows_normalized_independently(self):
        x_np = np.array([[1.0, 2.0, 3.0], [0.0, 0.0, 10.0]])
        y = Tensor.create(x_np, "float64").softmax().to_numpy()
        e = np.exp(x_np - x_np.max(axis=1, keepdims=True))
        np.testing.assert_allclose(y, e / e.sum(axis=1, keepdims=True), rtol=1e-12)
        np.testing.assert_allclose(y.sum(axis=1), [1.0, 1.0])

    def test_rejects_integers(self):
        with self.assertRaises(UnsupportedTypeError):
            Tensor.create([1, 2], "int32").softmax()

    def test_backward_matches_jacobian(self):
        x_np = np.array([0.2, -0.4, 1.0])
        w_np = np.array([1.0, 2.0, 3.0])
        x = Tensor.create(x_np, "float64", requires_grad=True)
        w = Tensor.create(w_np, "float64")
        (x.softmax() * w).sum().backward()

        y = np.exp(x_np) / np.exp(x_np).sum()
        jac = np.diag(y) - np.outer(y, y)
        np.testing.assert_allclose(x.grad, jac @ w_np, rtol=1e-10)


if __name__ == "__main__":
    unittest.main()
