import unittest

import numpy as np

from revgrad.domain._errors import ShapeMismatchError, UnsupportedTypeError
from revgrad.domain._operation import Operation
from revgrad.infrastructure._losses import MSEFn, mean_squared_error
from revgrad.infrastructure.tensor._tensor import Tensor


class TestMeanSquaredError(unittest.TestCase):
    def test_identical_inputs_give_zero(self):
        y = Tensor.create([[1.0, 2.0], [3.0, 4.0]], "float32")
        loss = mean_squared_error(y, y)
        self.assertEqual(loss.shape, (1,))
        self.assertEqual(loss.item(), 0.0)

    def test_halved_mean(self):
        y_true = Tensor.create([0.0, 0.0], "float64")
        y_pred = Tensor.create([1.0, 1.0], "float64")
        self.assertAlmostEqual(mean_squared_error(y_true, y_pred).item(), 0.5)

    def test_operand_order_is_prediction_first(self):
        y_true = Tensor.create([0.0], "float64")
        y_pred = Tensor.create([1.0], "float64", requires_grad=True)
        loss = mean_squared_error(y_true, y_pred)
        self.assertIs(loss.producing_operation, Operation.MSE)
        self.assertIs(loss.operands[0], y_pred)
        self.assertIs(loss.operands[1], y_true)

    def test_gradient_flows_to_prediction_only(self):
        y_true = Tensor.create([1.0, 2.0, 3.0], "float64", requires_grad=True)
        y_pred = Tensor.create([2.0, 2.0, 5.0], "float64", requires_grad=True)
        mean_squared_error(y_true, y_pred).backward()

        np.testing.assert_allclose(y_pred.grad, [1.0 / 3.0, 0.0, 2.0 / 3.0])
        np.testing.assert_array_equal(y_true.grad, [0.0, 0.0, 0.0])

    def test_rejects_integers(self):
        y = Tensor.create([1, 2], "int32")
        with self.assertRaises(UnsupportedTypeError):
            mean_squared_error(y, y)

    def test_rejects_shape_mismatch(self):
        with self.assertRaises(ShapeMismatchError):
            mean_squared_error(Tensor((2,), "float32"), Tensor((3,), "float32"))

    def test_rejects_non_tensors(self):
        with self.assertRaises(TypeError):
            mean_squared_error([1.0], Tensor((1,), "float32"))

    def test_function_metadata(self):
        self.assertIs(MSEFn.operation, Operation.MSE)


if __name__ == "__main__":
    unittest.main()
