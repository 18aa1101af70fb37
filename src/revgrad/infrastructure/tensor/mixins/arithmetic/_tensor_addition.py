"""
Element-kind-specific implementations of Tensor addition via control-path
dispatch.

One NumPy kernel serves both kinds: integer addition wraps on overflow and
float addition follows IEEE semantics. The backward rule routes the
upstream gradient unchanged to every tracking operand.
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


@tensor_control_path_manager(TMA, TMA.add, FLOATING)
@tensor_control_path_manager(TMA, TMA.add, INTEGRAL)
def tensor_add(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """
    Elementwise addition for float and integer tensors.

    Parameters
    ----------
    self : ITensor
        Left-hand operand.
    other : Union[ITensor, Number]
        Right-hand operand. Scalars are promoted via `_as_tensor_like`.

    Returns
    -------
    ITensor
        New tensor holding ``self + other``.
    """
    other_t = self._binary_operand("add", other)
    Tensor = type(self)

    values = np.add(self._view(), other_t._view())
    ctx = Context(Operation.ADD, parents=(self, other_t))
    return Tensor._make_result(values, self.element_type, ctx)


@backward_rule(Operation.ADD)
def add_backward(out: ITensor) -> None:
    g = out._grad_view()
    for parent in out.operands:
        parent._accumulate_grad_(g)
