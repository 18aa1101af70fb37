"""
Floating implementation of Tensor.mean.

Integer tensors have no control path and are rejected with
`UnsupportedTypeError`.
"""

import numpy as np

from ..._tensor_builder import tensor_control_path_manager, FLOATING
from ..._tensor_context import Context
from ..._backward_registry import backward_rule

from .....domain._operation import Operation
from .....domain._tensor import ITensor

from ._base import TensorMixinReduction as TMR


@tensor_control_path_manager(TMR, TMR.mean, FLOATING)
def tensor_mean(self: ITensor) -> "ITensor":
    """
    Average all elements into a ``(1,)`` tensor of the input's element type.
    """
    self._require_live("mean")
    Tensor = type(self)

    avg = np.sum(self._data, dtype=self.dtype) / self._data.size
    ctx = Context(Operation.MEAN, parents=(self,))
    return Tensor._make_result(np.array([avg]), self.element_type, ctx)


@backward_rule(Operation.MEAN)
def mean_backward(out: ITensor) -> None:
    (x,) = out.operands
    g0 = out._grad_view()[0]
    x._accumulate_grad_(np.full(x.shape, g0 / x.element_count, dtype=x.dtype))
