"""
Element-kind-specific implementations of Tensor.sigmoid via control-path
dispatch.

Integer inputs produce a float result of the promoted type. The backward
rule reuses the forward output, ``dy/dx = y * (1 - y)``.
"""

import numpy as np

from ..._tensor_builder import tensor_control_path_manager, FLOATING, INTEGRAL
from ..._tensor_context import Context
from ..._backward_registry import backward_rule

from .....domain._operation import Operation
from .....domain._tensor import ITensor

from ._base import TensorMixinActivation as TMA


def _logistic(x: np.ndarray) -> np.ndarray:
    # exp(-x) overflows to inf for very negative x, which still yields 0
    with np.errstate(over="ignore"):
        return 1.0 / (1.0 + np.exp(-x))


@tensor_control_path_manager(TMA, TMA.sigmoid, FLOATING)
@tensor_control_path_manager(TMA, TMA.sigmoid, INTEGRAL)
def tensor_sigmoid(self: ITensor) -> "ITensor":
    """
    Logistic function for float tensors and promoted integer tensors.

    Returns
    -------
    ITensor
        Float tensor of the input's shape; values lie in ``(0, 1)``.
    """
    self._require_live("sigmoid")
    Tensor = type(self)

    result_type = self.element_type.promoted()
    x = self._view().astype(result_type.numpy_dtype, copy=False)
    ctx = Context(Operation.SIGMOID, parents=(self,))
    return Tensor._make_result(_logistic(x), result_type, ctx)


@backward_rule(Operation.SIGMOID)
def sigmoid_backward(out: ITensor) -> None:
    (x,) = out.operands
    y = out._view()
    x._accumulate_grad_(out._grad_view() * y * (1.0 - y))
