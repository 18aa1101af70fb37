"""
Element-kind-specific implementations of Tensor.relu via control-path
dispatch.
"""

import numpy as np

from ..._tensor_builder import tensor_control_path_manager, FLOATING, INTEGRAL
from ..._tensor_context import Context
from ..._backward_registry import backward_rule

from .....domain._operation import Operation
from .....domain._tensor import ITensor

from ._base import TensorMixinActivation as TMA


@tensor_control_path_manager(TMA, TMA.relu, FLOATING)
@tensor_control_path_manager(TMA, TMA.relu, INTEGRAL)
def tensor_relu(self: ITensor) -> "ITensor":
    """
    Rectified linear unit for float and integer tensors.

    Returns
    -------
    ITensor
        Tensor of the input's shape and element type with negative values
        replaced by zero.
    """
    self._require_live("relu")
    Tensor = type(self)

    x = self._view()
    values = np.where(x < 0, np.zeros_like(x), x)
    ctx = Context(Operation.RELU, parents=(self,))
    return Tensor._make_result(values, self.element_type, ctx)


@backward_rule(Operation.RELU)
def relu_backward(out: ITensor) -> None:
    (x,) = out.operands
    g = out._grad_view()
    x._accumulate_grad_(np.where(x._view() >= 0, g, 0))
