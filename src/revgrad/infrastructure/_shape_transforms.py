"""
Differentiable shape transforms: transpose, reshape and flatten.

Each transform is a `Function` whose result owns a fresh buffer holding the
input's elements in the new layout. Element addressing goes through the
row-major index helpers of `tensor._shape_and_indexing`:

- transpose (rank 2 only) sends position ``i`` of an ``(r, c)`` matrix to
  ``transposed_index(i, r, c)`` of the ``(c, r)`` result;
- reshape and flatten keep row-major order and only change the shape.

When the input tracks gradients, its current gradient is copied into the
result in the same layout at creation time, and backward maps the result's
gradient back onto the input layout.
"""

from typing import Sequence

import numpy as np

from ..domain._errors import InvalidShapeError
from ..domain._function import Function
from ..domain._operation import Operation
from ._function import apply, register_function
from .tensor._tensor import Tensor
from .tensor._tensor_context import Context
from .tensor._shape_and_indexing import (
    element_count,
    linear_index,
    matrix_view,
    transposed_index,
    validate_shape,
)


def _require_tensor(op: str, x) -> None:
    if not isinstance(x, Tensor):
        raise TypeError(f"{op} expects a Tensor, got {type(x)!r}")
    x._require_live(op)


def _carry_gradient(x: Tensor, out: Tensor, src: np.ndarray, dest: np.ndarray) -> None:
    """Copy the input gradient into the result's layout."""
    if out._grad is not None and x._grad is not None:
        out._grad[dest] = x._grad[src]


@register_function
class TransposeFn(Function):
    """
    Swap the two axes of a rank-2 tensor.

    Saved context
    -------------
    - `saved_meta`:
        - "source_shape": ``(rows, cols)`` of the input
    """

    operation = Operation.TRANSPOSE

    @staticmethod
    def forward(ctx: Context, x: Tensor) -> Tensor:
        """
        Transpose `x`.

        Raises
        ------
        InvalidShapeError
            If `x` is not rank 2.
        """
        _require_tensor("transpose", x)
        if x.rank != 2:
            raise InvalidShapeError(x.shape, "transpose requires a rank-2 tensor")
        rows, cols = x.shape

        positions = np.arange(rows * cols)
        src = linear_index(positions, rows, cols)
        dest = transposed_index(positions, rows, cols)
        values = np.empty_like(x._data)
        values[dest] = x._data[src]

        ctx.parents = (x,)
        ctx.saved_meta["source_shape"] = (rows, cols)
        out = Tensor._make_result(values, x.element_type, ctx, shape=(cols, rows))
        _carry_gradient(x, out, src, dest)
        return out

    @staticmethod
    def backward(ctx: Context, out: Tensor) -> None:
        (x,) = ctx.parents
        rows, cols = ctx.saved_meta["source_shape"]
        dest = transposed_index(np.arange(rows * cols), rows, cols)
        x._accumulate_grad_(out._grad[dest])


def _reshape_forward(ctx: Context, x: Tensor, shape: Sequence[int], op: str) -> Tensor:
    _require_tensor(op, x)
    new_shape = validate_shape(shape)
    n = x.element_count
    if element_count(new_shape) != n:
        raise InvalidShapeError(
            new_shape, f"cannot hold the {n} elements of a tensor of shape {x.shape}"
        )

    rows, cols = matrix_view(x.shape)
    positions = np.arange(n)
    src = linear_index(positions, rows, cols)
    values = x._data[src]

    ctx.parents = (x,)
    ctx.saved_meta["source_shape"] = x.shape
    out = Tensor._make_result(values, x.element_type, ctx, shape=new_shape)
    _carry_gradient(x, out, src, positions)
    return out


@register_function
class ReshapeFn(Function):
    """
    Reinterpret a tensor's elements under a new shape of equal element count.
    """

    operation = Operation.RESHAPE

    @staticmethod
    def forward(ctx: Context, x: Tensor, shape: Sequence[int]) -> Tensor:
        """
        Reshape `x` to `shape`.

        Raises
        ------
        InvalidShapeError
            If `shape` is invalid or holds a different number of elements.
        """
        return _reshape_forward(ctx, x, shape, "reshape")

    @staticmethod
    def backward(ctx: Context, out: Tensor) -> None:
        (x,) = ctx.parents
        x._accumulate_grad_(out._grad)


@register_function
class FlattenFn(Function):
    """
    Collapse every dimension into one: ``(d1, ..., dk) -> (d1*...*dk,)``.
    """

    operation = Operation.FLATTEN

    @staticmethod
    def forward(ctx: Context, x: Tensor) -> Tensor:
        _require_tensor("flatten", x)
        return _reshape_forward(ctx, x, (x.element_count,), "flatten")

    @staticmethod
    def backward(ctx: Context, out: Tensor) -> None:
        (x,) = ctx.parents
        x._accumulate_grad_(out._grad)


def transpose(x: Tensor) -> Tensor:
    """Return the transpose of a rank-2 tensor."""
    return apply(TransposeFn, x)


def reshape(x: Tensor, shape: Sequence[int]) -> Tensor:
    """Return `x` with its elements laid out under `shape`."""
    return apply(ReshapeFn, x, shape)


def flatten(x: Tensor) -> Tensor:
    """Return `x` as a rank-1 tensor."""
    return apply(FlattenFn, x)
