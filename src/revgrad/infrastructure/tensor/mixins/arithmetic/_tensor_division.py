"""
Element-kind-specific implementations of Tensor division via control-path
dispatch.

This module registers two control paths for `TensorMixinArithmetic.div`:

- floating: IEEE true division; dividing by zero yields inf or nan
- integral: division truncating toward zero

NumPy's integer ``//`` floors, so the integral kernel corrects the quotient
wherever the remainder is non-zero and the operand signs differ. Integer
division by zero produces 0 (NumPy's convention) and a RuntimeWarning.
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
"""Scalar types accepted by Tensor arithmetic operators."""


def _truncating_divide(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Integer quotient rounded toward zero."""
    q = np.floor_divide(a, b)
    r = np.remainder(a, b)
    fix = (r != 0) & ((a < 0) != (b < 0))
    return q + fix.astype(q.dtype)


@tensor_control_path_manager(TMA, TMA.div, FLOATING)
def tensor_div_floating(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """
    Floating control path for elementwise true division.

    Parameters
    ----------
    self : ITensor
        Dividend.
    other : Union[ITensor, Number]
        Divisor. If a scalar, it is promoted to a tensor compatible with
        `self` via `_as_tensor_like`.

    Returns
    -------
    ITensor
        New tensor holding ``self / other``.

    Notes
    -----
    - Broadcasting is not supported; shapes must match.
    - Backward propagation follows elementwise division rules:
        * grad_a = grad_out / b
        * grad_b = -(grad_out * a) / (b * b)
    """
    other_t = self._binary_operand("div", other)
    Tensor = type(self)

    with np.errstate(divide="ignore", invalid="ignore"):
        values = np.divide(self._view(), other_t._view())
    ctx = Context(Operation.DIV, parents=(self, other_t))
    return Tensor._make_result(values, self.element_type, ctx)


@tensor_control_path_manager(TMA, TMA.div, INTEGRAL)
def tensor_div_integral(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """
    Integral control path for elementwise division, truncating toward zero.
    """
    other_t = self._binary_operand("div", other)
    Tensor = type(self)

    values = _truncating_divide(self._view(), other_t._view())
    ctx = Context(Operation.DIV, parents=(self, other_t))
    return Tensor._make_result(values, self.element_type, ctx)


@backward_rule(Operation.DIV)
def div_backward(out: ITensor) -> None:
    a, b = out.operands
    g = out._grad_view()
    bv = b._view()
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        if a.requires_grad:
            a._accumulate_grad_(g / bv)
        if b.requires_grad:
            b._accumulate_grad_(-(g * a._view()) / (bv * bv))
