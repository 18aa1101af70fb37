"""
Floating implementation of Tensor.softmax.

Rank-1 tensors are normalized as a whole; higher ranks are normalized
independently along the last axis. Integer tensors have no control path
and are rejected with `UnsupportedTypeError`.
"""

import numpy as np

from ..._tensor_builder import tensor_control_path_manager, FLOATING
from ..._tensor_context import Context
from ..._backward_registry import backward_rule

from .....domain._operation import Operation
from .....domain._tensor import ITensor

from ._base import TensorMixinActivation as TMA


def _stable_softmax(x: np.ndarray) -> np.ndarray:
    shifted = x - np.max(x, axis=-1, keepdims=True)
    e = np.exp(shifted)
    return e / np.sum(e, axis=-1, keepdims=True)


@tensor_control_path_manager(TMA, TMA.softmax, FLOATING)
def tensor_softmax(self: ITensor) -> "ITensor":
    """
    Floating control path for softmax.

    Returns
    -------
    ITensor
        Tensor of the input's shape whose rows (or whole vector) sum to 1.
    """
    self._require_live("softmax")
    Tensor = type(self)

    values = _stable_softmax(self._view())
    ctx = Context(Operation.SOFTMAX, parents=(self,))
    return Tensor._make_result(values, self.element_type, ctx)


@backward_rule(Operation.SOFTMAX)
def softmax_backward(out: ITensor) -> None:
    (x,) = out.operands
    y = out._view()
    g = out._grad_view()
    x._accumulate_grad_(y * (g - np.sum(g * y, axis=-1, keepdims=True)))
