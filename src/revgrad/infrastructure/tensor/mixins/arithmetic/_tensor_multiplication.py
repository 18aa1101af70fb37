"""
Element-kind-specific implementations of Tensor multiplication via
control-path dispatch.

The backward rule is the product rule: each operand receives the upstream
gradient scaled by the other operand's forward values.
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


@tensor_control_path_manager(TMA, TMA.mul, FLOATING)
@tensor_control_path_manager(TMA, TMA.mul, INTEGRAL)
def tensor_mul(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """
    Elementwise product for float and integer tensors.

    Parameters
    ----------
    self : ITensor
        Left-hand operand.
    other : Union[ITensor, Number]
        Right-hand operand. Scalars are promoted via `_as_tensor_like`.

    Returns
    -------
    ITensor
        New tensor holding ``self * other``.

    Notes
    -----
    Backward rule:
        ``grad_a += grad_out * b``
        ``grad_b += grad_out * a``
    """
    other_t = self._binary_operand("mul", other)
    Tensor = type(self)

    values = np.multiply(self._view(), other_t._view())
    ctx = Context(Operation.MUL, parents=(self, other_t))
    return Tensor._make_result(values, self.element_type, ctx)


@backward_rule(Operation.MUL)
def mul_backward(out: ITensor) -> None:
    a, b = out.operands
    g = out._grad_view()
    if a.requires_grad:
        a._accumulate_grad_(g * b._view())
    if b.requires_grad:
        b._accumulate_grad_(g * a._view())
