"""
Element-kind-specific implementations of Tensor.pow via control-path dispatch.
"""

from typing import Union

import numpy as np

from ..._tensor_builder import tensor_control_path_manager, FLOATING, INTEGRAL
from ..._tensor_context import Context
from ..._backward_registry import backward_rule

from .....domain._operation import Operation
from .....domain._tensor import ITensor

from ._base import TensorMixinUnary as TMU
from ._integral import saturate_to_integral

Number = Union[int, float]


def _check_exponent(exponent) -> float:
    if isinstance(exponent, bool) or not isinstance(exponent, (int, float, np.number)):
        raise TypeError(f"pow expects a scalar exponent, got {type(exponent)!r}")
    return float(exponent)


@tensor_control_path_manager(TMU, TMU.pow, FLOATING)
def tensor_pow_floating(self: ITensor, exponent: Number) -> "ITensor":
    """
    Floating control path for elementwise power.

    Negative bases with fractional exponents produce nan, as in IEEE pow.
    """
    self._require_live("pow")
    e = _check_exponent(exponent)
    Tensor = type(self)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        values = np.power(self._view(), e)
    ctx = Context(Operation.POW, parents=(self,), auxiliary_scalar=e)
    return Tensor._make_result(values, self.element_type, ctx)


@tensor_control_path_manager(TMU, TMU.pow, INTEGRAL)
def tensor_pow_integral(self: ITensor, exponent: Number) -> "ITensor":
    """
    Integral control path for elementwise power.

    Computed in float64 and truncated toward zero into the input type.
    Results outside the type's range saturate to its bounds, so
    ``0 ** -1`` gives the maximum value; nan results become 0.
    """
    self._require_live("pow")
    e = _check_exponent(exponent)
    Tensor = type(self)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        values = np.power(self._view().astype(np.float64), e)
    values = saturate_to_integral(values, self.dtype)
    ctx = Context(Operation.POW, parents=(self,), auxiliary_scalar=e)
    return Tensor._make_result(values, self.element_type, ctx)


@backward_rule(Operation.POW)
def pow_backward(out: ITensor) -> None:
    (x,) = out.operands
    e = out.auxiliary_scalar
    with np.errstate(divide="ignore", invalid="ignore"):
        local = e * np.power(x._view(), e - 1.0)
    x._accumulate_grad_(out._grad_view() * local)
