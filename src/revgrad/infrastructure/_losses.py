"""
Loss function primitives for revgrad.

Currently implemented losses:
- MSEFn : halved mean squared error

Design notes
------------
- Losses are implemented as `Function` subclasses rather than Tensor
  methods to emphasize their role as terminal nodes in the computation
  graph.
- The result is a ``(1,)`` tensor intended to be the final operation before
  invoking backpropagation.
- Targets are treated as constants: gradients flow to the predictions only,
  even when the target tensor tracks gradients.
"""

import logging

import numpy as np

from ..domain._errors import UnsupportedTypeError
from ..domain._function import Function
from ..domain._operation import Operation
from ._function import apply, register_function
from .tensor._tensor import Tensor, Context
from .tensor._shape_and_indexing import require_same_shape, require_same_type

logger = logging.getLogger(__name__)


@register_function
class MSEFn(Function):
    """
    Halved Mean Squared Error loss function.

    Computes the scalar loss:

        MSE(pred, target) = sum((pred - target)^2) / (2 * N)

    where N is the number of elements. The factor 1/2 cancels the 2 from
    differentiating the square.

    Operand order
    -------------
    The graph record stores ``(pred, target)``, in that order.

    Notes
    -----
    - Both inputs must be floating-point tensors of the same element type
      and shape.
    - Shape broadcasting is intentionally not supported.
    """

    operation = Operation.MSE

    @staticmethod
    def forward(ctx: Context, pred: Tensor, target: Tensor) -> Tensor:
        """
        Compute the halved Mean Squared Error.

        Parameters
        ----------
        ctx : Context
            Graph record for the result.
        pred : Tensor
            Predicted values.
        target : Tensor
            Ground-truth target values.

        Returns
        -------
        Tensor
            A ``(1,)`` tensor containing the loss.

        Raises
        ------
        UnsupportedTypeError
            If the inputs are integer tensors or their element types differ.
        ShapeMismatchError
            If the shapes differ.
        """
        for t in (pred, target):
            if not isinstance(t, Tensor):
                raise TypeError(f"mean_squared_error expects Tensors, got {type(t)!r}")
            t._require_live("mean_squared_error")
        require_same_type("mean_squared_error", pred, target)
        if not pred.element_type.is_floating:
            raise UnsupportedTypeError("mean_squared_error", pred.element_type)
        require_same_shape("mean_squared_error", pred, target)

        n = pred.element_count
        diff = pred._data - target._data
        loss = np.sum(diff * diff, dtype=pred.dtype) / (2.0 * n)

        ctx.parents = (pred, target)
        ctx.saved_meta["n"] = n
        return Tensor._make_result(np.array([loss]), pred.element_type, ctx)

    @staticmethod
    def backward(ctx: Context, out: Tensor) -> None:
        """
        Accumulate the gradient of the loss into the predictions.

        Notes
        -----
        Gradient formula:
            dMSE/dpred = (pred - target) / N

        scaled by the upstream scalar gradient.
        """
        pred, target = ctx.parents
        if not pred.requires_grad:
            return
        n = int(ctx.saved_meta["n"])
        g = float(out._grad[0])
        pred._accumulate_grad_((pred._data - target._data) * (g / n))


def mean_squared_error(y_true: Tensor, y_pred: Tensor) -> Tensor:
    """
    Halved mean squared error between targets and predictions.

    Parameters
    ----------
    y_true : Tensor
        Targets; never receives a gradient.
    y_pred : Tensor
        Predictions.

    Returns
    -------
    Tensor
        ``(1,)`` tensor holding ``sum((y_pred - y_true)^2) / (2N)``. Its
        operands are recorded as ``(y_pred, y_true)``.
    """
    out = apply(MSEFn, y_pred, y_true)
    logger.debug("mean_squared_error = %s", out._data[0])
    return out
