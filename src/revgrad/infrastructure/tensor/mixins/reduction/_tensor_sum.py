"""
Element-kind-specific implementations of Tensor.sum via control-path
dispatch.
"""

import numpy as np

from ..._tensor_builder import tensor_control_path_manager, FLOATING, INTEGRAL
from ..._tensor_context import Context
from ..._backward_registry import backward_rule

from .....domain._operation import Operation
from .....domain._tensor import ITensor

from ._base import TensorMixinReduction as TMR


@tensor_control_path_manager(TMR, TMR.sum, FLOATING)
@tensor_control_path_manager(TMR, TMR.sum, INTEGRAL)
def tensor_sum(self: ITensor) -> "ITensor":
    """
    Sum all elements into a ``(1,)`` tensor of the input's element type.

    Integer sums wrap on overflow.
    """
    self._require_live("sum")
    Tensor = type(self)

    total = np.sum(self._data, dtype=self.dtype)
    ctx = Context(Operation.SUM, parents=(self,))
    return Tensor._make_result(np.array([total]), self.element_type, ctx)


@backward_rule(Operation.SUM)
def sum_backward(out: ITensor) -> None:
    (x,) = out.operands
    g0 = out._grad_view()[0]
    x._accumulate_grad_(np.full(x.shape, g0, dtype=x.dtype))
