"""
Shape and index utilities.

Pure helpers shared by tensor construction, the forward operation catalogue
and the shape transforms:

- row-major element counting and linear-index arithmetic,
- shape validation for constructors,
- operand compatibility checks that fail fast with `ShapeMismatchError` or
  `UnsupportedTypeError` instead of truncating or broadcasting.

Every addressing helper goes through the same explicit row/column
decomposition of a flat position, even for tensors that are logically 1-D
or N-D; an N-D tensor is addressed as ``(count // last_dim, last_dim)``.
"""

from __future__ import annotations

import logging
import numbers
from typing import Any, Sequence

from ...domain._errors import (
    InvalidShapeError,
    ShapeMismatchError,
    UnsupportedTypeError,
)

logger = logging.getLogger(__name__)


def element_count(shape: Sequence[int]) -> int:
    """
    Return the number of elements described by `shape`.

    Parameters
    ----------
    shape : Sequence[int]
        Dimension sizes.

    Returns
    -------
    int
        Product of all dimension sizes (1 for an empty sequence).
    """
    n = 1
    for d in shape:
        n *= int(d)
    return n


def linear_index(flat_position: int, dim0: int, dim1: int) -> int:
    """
    Map a row-major flat position through a 2-D row/column decomposition.

    Parameters
    ----------
    flat_position : int
        Position in iteration order.
    dim0 : int
        Number of rows of the 2-D view.
    dim1 : int
        Number of columns of the 2-D view.

    Returns
    -------
    int
        Row-major offset ``row * dim1 + col``.
    """
    row = flat_position // dim1
    col = flat_position % dim1
    return row * dim1 + col


def transposed_index(flat_position: int, rows: int, cols: int) -> int:
    """
    Map a row-major position of a ``(rows, cols)`` matrix to its offset in
    the row-major buffer of the ``(cols, rows)`` transpose.
    """
    row = flat_position // cols
    col = flat_position % cols
    return col * rows + row


def matrix_view(shape: Sequence[int]) -> tuple[int, int]:
    """
    Return the ``(rows, cols)`` 2-D view used to address a tensor.

    Rank-1 tensors are viewed as a single row; higher ranks fold every
    leading dimension into the row count.
    """
    if len(shape) == 0:
        return 1, 1
    cols = int(shape[-1])
    return element_count(shape) // cols, cols


def shapes_equal(a: Sequence[int], b: Sequence[int]) -> bool:
    """Return True when `a` and `b` have the same rank and dimensions."""
    if len(a) != len(b):
        return False
    return all(int(x) == int(y) for x, y in zip(a, b))


def validate_shape(shape: Any) -> tuple[int, ...]:
    """
    Normalize and validate a constructor shape.

    Parameters
    ----------
    shape : Any
        A sequence of dimension sizes (an int is accepted as a 1-D shape).

    Returns
    -------
    tuple[int, ...]
        The shape as a tuple of Python ints.

    Raises
    ------
    InvalidShapeError
        If the shape is empty, not a sequence, or contains a non-integer or
        non-positive size.
    """
    if isinstance(shape, numbers.Integral):
        shape = (shape,)
    try:
        dims = tuple(shape)
    except TypeError:
        raise InvalidShapeError(shape, "expected a sequence of sizes") from None
    if len(dims) == 0:
        raise InvalidShapeError(shape, "shape must have at least one dimension")
    for d in dims:
        if isinstance(d, bool) or not isinstance(d, numbers.Integral):
            raise InvalidShapeError(shape, f"dimension {d!r} is not an integer")
        if d <= 0:
            raise InvalidShapeError(shape, f"dimension {d} is not positive")
    return tuple(int(d) for d in dims)


def require_same_type(op: str, a, b) -> None:
    """
    Raise `UnsupportedTypeError` unless `a` and `b` share an element type.
    """
    if a.element_type is not b.element_type:
        logger.debug(
            "%s rejected: element types %s and %s differ",
            op,
            a.element_type,
            b.element_type,
        )
        raise UnsupportedTypeError(op, f"{a.element_type} with {b.element_type}")


def require_same_shape(op: str, a, b) -> None:
    """
    Raise `ShapeMismatchError` unless `a` and `b` agree in rank and in every
    dimension. Shapes are never broadcast.
    """
    if not shapes_equal(a.shape, b.shape):
        logger.debug("%s rejected: shapes %s and %s differ", op, a.shape, b.shape)
        detail = "rank differs" if len(a.shape) != len(b.shape) else None
        raise ShapeMismatchError(op, a.shape, b.shape, detail)


def require_matmul_compatible(a, b) -> tuple[int, int, int]:
    """
    Validate operands of a matrix product.

    Returns
    -------
    tuple[int, int, int]
        ``(m, l, n)`` for ``(m, l) x (l, n)``.

    Raises
    ------
    ShapeMismatchError
        If either operand is not rank 2 or the inner dimensions differ.
    """
    if len(a.shape) != 2 or len(b.shape) != 2:
        raise ShapeMismatchError("matmul", a.shape, b.shape, "operands must be rank 2")
    m, l = a.shape
    l2, n = b.shape
    if l != l2:
        logger.debug("matmul rejected: inner dimensions %d and %d differ", l, l2)
        raise ShapeMismatchError("matmul", a.shape, b.shape, "inner dimensions differ")
    return m, l, n
