"""
Element-kind-specific implementations of Tensor subtraction via control-path
dispatch.
"""

from typing import Union

import numpy as np

from ..._tensor_builder import tensor_control_path_manager, FLOATING, INTEGRAL
from ..._tensor_context import Context
from ..._backward_registry import backward_rule

from .....domain._operation import Operation
from .....domain._tensor import ITensor

from ._base import TensorMixinArithmetic as TMA

Number = Union[int, float]


@tensor_control_path_manager(TMA, TMA.sub, FLOATING)
@tensor_control_path_manager(TMA, TMA.sub, INTEGRAL)
def tensor_sub(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """
    Elementwise subtraction ``self - other`` for float and integer tensors.
    """
    other_t = self._binary_operand("sub", other)
    Tensor = type(self)

    values = np.subtract(self._view(), other_t._view())
    ctx = Context(Operation.SUB, parents=(self, other_t))
    return Tensor._make_result(values, self.element_type, ctx)


@backward_rule(Operation.SUB)
def sub_backward(out: ITensor) -> None:
    a, b = out.operands
    g = out._grad_view()
    a._accumulate_grad_(g)
    b._accumulate_grad_(-g)
