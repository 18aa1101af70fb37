"""
Matrix product of rank-2 tensors via control-path dispatch.

The product ``(m, l) x (l, n) -> (m, n)`` is computed with `numpy.matmul`
in the operands' element type, so integer products stay integer and wrap
on overflow.
"""

import logging

import numpy as np

from ..._tensor_builder import tensor_control_path_manager, FLOATING, INTEGRAL
from ..._tensor_context import Context
from ..._backward_registry import backward_rule
from ..._shape_and_indexing import require_matmul_compatible, require_same_type

from .....domain._operation import Operation
from .....domain._tensor import ITensor

from ._base import TensorMixinArithmetic as TMA

logger = logging.getLogger(__name__)


@tensor_control_path_manager(TMA, TMA.matmul, FLOATING)
@tensor_control_path_manager(TMA, TMA.matmul, INTEGRAL)
def tensor_matmul(self: ITensor, other: "ITensor") -> "ITensor":
    """
    Matrix product for float and integer tensors.

    Raises
    ------
    TypeError
        If `other` is not a tensor.
    UnsupportedTypeError
        If the element types differ.
    ShapeMismatchError
        If either operand is not rank 2 or the inner dimensions differ.
    """
    Tensor = type(self)
    if not isinstance(other, Tensor):
        raise TypeError(f"matmul expects a Tensor operand, got {type(other)!r}")
    self._require_live("matmul")
    other._require_live("matmul")
    require_same_type("matmul", self, other)
    m, l, n = require_matmul_compatible(self, other)
    logger.debug("matmul (%d, %d) x (%d, %d)", m, l, l, n)

    values = np.matmul(self._view(), other._view())
    ctx = Context(Operation.MATMUL, parents=(self, other))
    return Tensor._make_result(values, self.element_type, ctx, shape=(m, n))


@backward_rule(Operation.MATMUL)
def matmul_backward(out: ITensor) -> None:
    a, b = out.operands
    g = out._grad_view()
    if a.requires_grad:
        a._accumulate_grad_(g @ b._view().T)
    if b.requires_grad:
        b._accumulate_grad_(a._view().T @ g)
