"""
Element-kind-specific implementations of Tensor.tanh via control-path
dispatch.
"""

import numpy as np

from ..._tensor_builder import tensor_control_path_manager, FLOATING, INTEGRAL
from ..._tensor_context import Context
from ..._backward_registry import backward_rule

from .....domain._operation import Operation
from .....domain._tensor import ITensor

from ._base import TensorMixinActivation as TMA


@tensor_control_path_manager(TMA, TMA.tanh, FLOATING)
@tensor_control_path_manager(TMA, TMA.tanh, INTEGRAL)
def tensor_tanh(self: ITensor) -> "ITensor":
    """
    Hyperbolic tangent for float tensors and promoted integer tensors.
    """
    self._require_live("tanh")
    Tensor = type(self)

    result_type = self.element_type.promoted()
    x = self._view().astype(result_type.numpy_dtype, copy=False)
    ctx = Context(Operation.TANH, parents=(self,))
    return Tensor._make_result(np.tanh(x), result_type, ctx)


@backward_rule(Operation.TANH)
def tanh_backward(out: ITensor) -> None:
    (x,) = out.operands
    y = out._view()
    x._accumulate_grad_(out._grad_view() * (1.0 - y * y))
