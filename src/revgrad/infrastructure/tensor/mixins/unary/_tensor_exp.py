"""
Element-kind-specific implementations of Tensor.exp via control-path dispatch.

This module registers float and integer implementations of the elementwise
exponential. Both keep the input's element type; the integer kernel
computes in float64 and truncates.
"""

import numpy as np

from ..._tensor_builder import tensor_control_path_manager, FLOATING, INTEGRAL
from ..._tensor_context import Context
from ..._backward_registry import backward_rule

from .....domain._operation import Operation
from .....domain._tensor import ITensor

from ._base import TensorMixinUnary as TMU
from ._integral import saturate_to_integral


@tensor_control_path_manager(TMU, TMU.exp, FLOATING)
def tensor_exp_floating(self: ITensor) -> "ITensor":
    """
    Floating control path for elementwise exponential (Tensor.exp).

    Returns
    -------
    ITensor
        A tensor of the same shape as `self`, containing `exp(self)`
        elementwise. Overflow saturates to inf.
    """
    self._require_live("exp")
    Tensor = type(self)

    with np.errstate(over="ignore"):
        values = np.exp(self._view())
    ctx = Context(Operation.EXP, parents=(self,))
    return Tensor._make_result(values, self.element_type, ctx)


@tensor_control_path_manager(TMU, TMU.exp, INTEGRAL)
def tensor_exp_integral(self: ITensor) -> "ITensor":
    """
    Integral control path for elementwise exponential.

    ``exp(1)`` on an int32 tensor yields 2. Results too large for the type
    saturate to its maximum value.
    """
    self._require_live("exp")
    Tensor = type(self)

    with np.errstate(over="ignore", invalid="ignore"):
        values = np.exp(self._view().astype(np.float64))
    values = saturate_to_integral(values, self.dtype)
    ctx = Context(Operation.EXP, parents=(self,))
    return Tensor._make_result(values, self.element_type, ctx)


@backward_rule(Operation.EXP)
def exp_backward(out: ITensor) -> None:
    (x,) = out.operands
    with np.errstate(over="ignore"):
        local = np.exp(x._view())
    x._accumulate_grad_(out._grad_view() * local)
