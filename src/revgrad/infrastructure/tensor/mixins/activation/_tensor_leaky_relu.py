"""
Floating implementation of Tensor.leaky_relu.

No integral path is registered, so integer inputs raise
`UnsupportedTypeError`.
"""

import numpy as np

from ..._tensor_builder import tensor_control_path_manager, FLOATING
from ..._tensor_context import Context
from ..._backward_registry import backward_rule

from .....domain._operation import Operation
from .....domain._tensor import ITensor

from ._base import TensorMixinActivation as TMA


@tensor_control_path_manager(TMA, TMA.leaky_relu, FLOATING)
def tensor_leaky_relu(self: ITensor, negative_slope: float = 0.01) -> "ITensor":
    """
    Floating control path for the leaky rectified linear unit.

    Parameters
    ----------
    negative_slope : float
        Multiplier for negative inputs.
    """
    self._require_live("leaky_relu")
    slope = float(negative_slope)
    Tensor = type(self)

    x = self._view()
    values = np.where(x < 0, slope * x, x)
    ctx = Context(Operation.LEAKY_RELU, parents=(self,), auxiliary_scalar=slope)
    return Tensor._make_result(values, self.element_type, ctx)


@backward_rule(Operation.LEAKY_RELU)
def leaky_relu_backward(out: ITensor) -> None:
    (x,) = out.operands
    g = out._grad_view()
    x._accumulate_grad_(np.where(x._view() >= 0, g, out.auxiliary_scalar * g))
