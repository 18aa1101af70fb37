"""
Concrete Tensor implementation (NumPy backend) and its autograd linkage.

This module provides the concrete `Tensor` that satisfies the domain-level
`ITensor` protocol. Storage is a flat, contiguous, row-major NumPy buffer
of `element_count` elements of the tensor's element type; floating-point
tensors that track gradients also own a gradient buffer of the same size.

Design notes
------------
- Automatic differentiation is expressed by attaching an optional `Context`
  to tensors produced by operations. The context records the producing
  operation, its operands and an auxiliary scalar; the traversal driver
  (`revgrad.infrastructure._autograd`) walks these links backward.
- Operand links are ordinary references held by the result. Releasing a
  result drops its own buffers and its context but never touches the
  operands.
- Operations live in mixins whose implementations are selected per element
  kind through the tensor control-path manager.
- Broadcasting is not implemented; binary ops require exact shape matches.
"""

from __future__ import annotations

import logging
import numbers
from typing import Any, Optional, Sequence, Union

import numpy as np

from ..._config import get_config
from ...domain._tensor import ITensor
from ...domain._element_type import ElementType
from ...domain._operation import Operation
from ...domain._errors import (
    AllocationError,
    InvalidShapeError,
    TensorReleasedError,
    UnsupportedTypeError,
)
from ._tensor_context import Context
from ._shape_and_indexing import element_count, validate_shape
from .mixins.arithmetic import TensorMixinArithmetic
from .mixins.unary import TensorMixinUnary
from .mixins.activation import TensorMixinActivation
from .mixins.reduction import TensorMixinReduction
from .mixins.memory import TensorMixinMemory

logger = logging.getLogger(__name__)

Number = Union[int, float]


class Tensor(
    TensorMixinArithmetic,
    TensorMixinUnary,
    TensorMixinActivation,
    TensorMixinReduction,
    TensorMixinMemory,
    ITensor,
):
    """
    Typed N-dimensional array with an optional gradient buffer.

    Parameters
    ----------
    shape : tuple[int, ...]
        Tensor shape. Must be non-empty with positive sizes.
    element_type : ElementType or str or numpy dtype, optional
        Element type. Defaults to the configured default (float32).
    requires_grad : bool, optional
        Whether this tensor's gradient buffer participates in accumulation.
        Always False for integer tensors. Defaults to False.
    ctx : Optional[Context], optional
        Graph record. Set by forward operations; None for leaves.

    Raises
    ------
    InvalidShapeError
        If `shape` is empty or has non-positive sizes.
    UnsupportedTypeError
        If `element_type` is not one of the four supported types.
    AllocationError
        If NumPy cannot allocate the data or gradient buffer.

    Notes
    -----
    - `_data` is a flat ndarray of dtype ``element_type.numpy_dtype``.
    - `_grad` is a flat ndarray of the same dtype, or None.
    """

    def __initialize_data(self) -> None:
        """
        Allocate zero-initialized data (and, when tracking, gradient)
        storage.

        Raises
        ------
        AllocationError
            If either buffer cannot be obtained. Nothing stays allocated.
        """
        n = element_count(self._shape)
        dtype = self._element_type.numpy_dtype
        try:
            self._data = np.zeros(n, dtype=dtype)
            self._grad = np.zeros(n, dtype=dtype) if self._requires_grad else None
        except (MemoryError, ValueError, OverflowError) as exc:
            self._data = None
            self._grad = None
            logger.debug(
                "allocation failed for shape=%s element_type=%s: %s",
                self._shape,
                self._element_type,
                exc,
            )
            raise AllocationError(self._shape, self._element_type) from exc

    def __init__(
        self,
        shape: Sequence[int],
        element_type: Any = None,
        *,
        requires_grad: bool = False,
        ctx: Optional[Context] = None,
    ) -> None:
        self._released = False
        self._shape = validate_shape(shape)
        if element_type is None:
            element_type = get_config().default_element_type
        self._element_type = ElementType.coerce(element_type)

        # --- autograd fields ---
        self._requires_grad: bool = bool(requires_grad) and self._element_type.is_floating
        self._ctx: Optional[Context] = ctx
        self.__initialize_data()

    @classmethod
    def create(
        cls,
        raw_data: Any = None,
        element_type: Any = None,
        shape: Optional[Sequence[int]] = None,
        requires_grad: bool = False,
    ) -> "Tensor":
        """
        Construct a leaf tensor, optionally initialized from raw data.

        Parameters
        ----------
        raw_data : array-like or None
            Values copied into the new buffer in row-major order. Any nested
            sequence or ndarray with the right number of elements works.
            None leaves the tensor zero-filled.
        element_type : ElementType or str or numpy dtype, optional
            Element type. Defaults to the configured default.
        shape : Sequence[int], optional
            Tensor shape. When omitted, it is taken from `raw_data`.
        requires_grad : bool, optional
            Whether to allocate and accumulate a gradient buffer.

        Returns
        -------
        Tensor
            The new leaf tensor.

        Raises
        ------
        InvalidShapeError
            If no shape can be determined, the shape is invalid, `raw_data`
            is a ragged nested sequence, or its element count does not match
            the shape.
        """
        arr = None
        if raw_data is not None:
            try:
                arr = np.asarray(raw_data)
            except ValueError as exc:
                raise InvalidShapeError(shape, "raw data is a ragged nested sequence") from exc
            if shape is None:
                shape = arr.shape if arr.ndim > 0 else (1,)
        if shape is None:
            raise InvalidShapeError(shape, "a shape is required without raw data")

        out = cls(shape, element_type, requires_grad=requires_grad)
        if arr is not None:
            out.copy_from_numpy(arr)
        logger.debug(
            "created leaf tensor shape=%s element_type=%s requires_grad=%s",
            out._shape,
            out._element_type,
            out._requires_grad,
        )
        return out

    @classmethod
    def _make_result(
        cls,
        values: np.ndarray,
        element_type: ElementType,
        ctx: Context,
        shape: Optional[Sequence[int]] = None,
    ) -> "Tensor":
        """
        Allocate the result of a forward operation and record its graph edge.

        The result tracks gradients when any operand recorded on `ctx` does.

        Parameters
        ----------
        values : np.ndarray
            Computed values, cast to `element_type` on copy.
        element_type : ElementType
            Element type of the result.
        ctx : Context
            Graph record (operation, parents, auxiliary scalar).
        shape : Sequence[int], optional
            Result shape; defaults to ``values.shape``.
        """
        requires_grad = any(p.requires_grad for p in ctx.parents)
        out = cls(
            values.shape if shape is None else shape,
            element_type,
            requires_grad=requires_grad,
            ctx=ctx,
        )
        out._data[...] = np.asarray(values).reshape(-1)
        return out

    # ----------------------------
    # Properties
    # ----------------------------
    def __repr__(self) -> str:
        """
        Return a short description of the tensor's metadata.
        """
        if self._released:
            return f"Tensor(<released>, element_type={self._element_type})"
        return (
            f"Tensor(shape={self._shape}, element_type={self._element_type}, "
            f"requires_grad={self._requires_grad}, op={self.producing_operation})"
        )

    def __str__(self) -> str:
        from .._formatting import format_tensor

        return format_tensor(self)

    @property
    def _state(self) -> str:
        """Element kind used for control-path dispatch."""
        return self._element_type.kind

    @property
    def element_type(self) -> ElementType:
        """
        Return the element type of this tensor.

        Returns
        -------
        ElementType
            Fixed at creation.
        """
        return self._element_type

    @property
    def dtype(self) -> np.dtype:
        """Return the NumPy dtype of the data buffer."""
        return self._element_type.numpy_dtype

    @property
    def shape(self) -> Optional[tuple[int, ...]]:
        """
        Return the tensor shape.

        Returns
        -------
        tuple[int, ...] or None
            The tensor's shape, or None after `release`.
        """
        return self._shape

    @property
    def rank(self) -> int:
        """Return the number of dimensions."""
        self._require_live("rank")
        return len(self._shape)

    @property
    def element_count(self) -> int:
        """Return the product of all dimension sizes."""
        self._require_live("element_count")
        return element_count(self._shape)

    def numel(self) -> int:
        """
        Return the total number of elements in the tensor.

        Returns
        -------
        int
            Product of all dimensions in the tensor shape.
        """
        return self.element_count

    @property
    def data(self) -> np.ndarray:
        """
        Return a copy of the flat row-major data buffer.

        Returns
        -------
        numpy.ndarray
            1-D array of `element_count` elements.
        """
        self._require_live("data")
        return self._data.copy()

    @property
    def grad(self) -> Optional[np.ndarray]:
        """
        Return the gradient associated with this tensor (if any).

        Returns
        -------
        Optional[numpy.ndarray]
            A copy of the gradient buffer in the tensor's shape, or None when
            the tensor does not track gradients.
        """
        if self._released or self._grad is None:
            return None
        return self._grad.reshape(self._shape).copy()

    @property
    def requires_grad(self) -> bool:
        """
        Indicate whether this tensor accumulates gradients.

        Returns
        -------
        bool
            True if the gradient buffer participates in backward passes.
        """
        return self._requires_grad

    @requires_grad.setter
    def requires_grad(self, value: bool) -> None:
        """
        Enable or disable gradient tracking.

        Enabling allocates a zeroed gradient buffer; disabling drops it.
        Integer tensors silently stay untracked.
        """
        self._require_live("requires_grad")
        value = bool(value) and self._element_type.is_floating
        if value and self._grad is None:
            try:
                self._grad = np.zeros_like(self._data)
            except MemoryError as exc:
                raise AllocationError(self._shape, self._element_type) from exc
        if not value:
            self._grad = None
        self._requires_grad = value

    @property
    def producing_operation(self) -> Operation:
        """Return the producing operation, `Operation.LEAF` for leaves."""
        return self._ctx.operation if self._ctx is not None else Operation.LEAF

    @property
    def operands(self) -> tuple["Tensor", ...]:
        """Return the operands recorded by the producing operation."""
        return tuple(self._ctx.parents) if self._ctx is not None else ()

    @property
    def auxiliary_scalar(self) -> float:
        """Return the operator constant recorded at forward time."""
        return self._ctx.auxiliary_scalar if self._ctx is not None else 0.0

    @property
    def is_leaf(self) -> bool:
        """True for tensors created directly rather than by an operation."""
        return self._ctx is None

    @property
    def is_released(self) -> bool:
        """True once `release` has dropped this tensor's buffers."""
        return self._released

    def _get_ctx(self) -> Optional[Context]:
        """
        Return the graph record attached to this tensor, if any.

        Notes
        -----
        Internal hook for backward rules and the traversal driver.
        """
        return self._ctx

    # ----------------------------
    # Internal helpers
    # ----------------------------
    def _require_live(self, op: str) -> None:
        """Raise `TensorReleasedError` if this tensor was released."""
        if self._released:
            raise TensorReleasedError(op)

    def _view(self) -> np.ndarray:
        """Return the live data buffer viewed in the tensor's shape."""
        return self._data.reshape(self._shape)

    def _grad_view(self) -> np.ndarray:
        """Return the live gradient buffer viewed in the tensor's shape."""
        return self._grad.reshape(self._shape)

    def _accumulate_grad_(self, delta: np.ndarray) -> None:
        """
        Add `delta` into the gradient buffer in place.

        No-op for tensors that do not track gradients. `delta` must hold
        `element_count` values in row-major order.
        """
        if not self._requires_grad or self._grad is None:
            return
        self._grad += np.asarray(delta).reshape(-1).astype(self._grad.dtype, copy=False)

    @staticmethod
    def _as_tensor_like(
        x: Union["Tensor", Number], like: "Tensor", op: str = "scalar lifting"
    ) -> "Tensor":
        """
        Convert an operand into a Tensor compatible with a reference tensor.

        If `x` is already a Tensor, it is returned as-is. If `x` is a Python
        or NumPy scalar, a constant tensor with the shape and element type of
        `like` is created and filled with it.
        An integer reference only accepts integral values; a float such as
        ``2.5`` is rejected instead of being truncated.

        Raises
        ------
        TypeError
            If `x` is neither a Tensor nor a real scalar.
        UnsupportedTypeError
            If `x` has a fractional or non-finite value and `like` holds
            integers.
        """
        if isinstance(x, Tensor):
            return x
        if isinstance(x, numbers.Real) and not isinstance(x, bool):
            like._require_live(op)
            if not like._element_type.is_floating and not isinstance(
                x, numbers.Integral
            ):
                if not float(x).is_integer():
                    raise UnsupportedTypeError(op, type(x).__name__)
            t = Tensor(like._shape, like._element_type, requires_grad=False)
            t._data.fill(x)
            return t
        raise TypeError(f"Unsupported operand type: {type(x)!r}")

    # ----------------------------
    # Data access
    # ----------------------------
    def copy_from_numpy(self, arr: Any) -> None:
        """
        Copy values into the data buffer in row-major order.

        Parameters
        ----------
        arr : array-like
            Values to copy; cast to this tensor's element type.

        Raises
        ------
        InvalidShapeError
            If `arr` does not hold exactly `element_count` elements.
        """
        self._require_live("copy_from_numpy")
        src = np.asarray(arr)
        if src.size != self._data.size:
            raise InvalidShapeError(
                self._shape,
                f"{src.size} values supplied for {self._data.size} elements",
            )
        self._data[...] = src.reshape(-1).astype(self._data.dtype, copy=False)

    def to_numpy(self) -> np.ndarray:
        """
        Return a copy of the data in the tensor's shape.

        Returns
        -------
        numpy.ndarray
            Array with shape `self.shape` and dtype `self.dtype`.
        """
        self._require_live("to_numpy")
        return self._view().copy()

    def item(self) -> Number:
        """
        Return the value of a single-element tensor as a Python scalar.

        Raises
        ------
        ValueError
            If the tensor holds more than one element.
        """
        self._require_live("item")
        if self._data.size != 1:
            raise ValueError(
                f"item() requires a single-element tensor, got shape {self._shape}"
            )
        return self._data[0].item()

    # ----------------------------
    # Autograd
    # ----------------------------
    def zero_grad(self) -> None:
        """
        Reset the gradient buffer to zeros.

        Notes
        -----
        The buffer itself is kept. Training loops typically call this
        before each backward pass because gradients accumulate.
        """
        if self._grad is not None:
            self._grad.fill(0)

    def backward(self, grad_out: Optional[Any] = None) -> None:
        """
        Backpropagate gradients from this tensor through the recorded graph.

        Parameters
        ----------
        grad_out : array-like, optional
            Seed gradient with this tensor's shape. Defaults to all ones.

        Notes
        -----
        See `revgrad.infrastructure._autograd.backward`.
        """
        from .._autograd import backward as _backward

        _backward(self, grad_out)

    def release(self) -> None:
        """
        Drop the data buffer, gradient buffer, shape and graph record.

        Operands are not released. Calling this twice is a no-op.
        """
        if self._released:
            return
        self._data = None
        self._grad = None
        self._shape = None
        self._ctx = None
        self._requires_grad = False
        self._released = True
        logger.debug("released tensor element_type=%s", self._element_type)


def release(tensor: Optional[Tensor]) -> None:
    """
    Release `tensor`'s owned buffers.

    Safe to call with None and on an already released tensor.
    """
    if tensor is None:
        return
    if not isinstance(tensor, Tensor):
        raise TypeError(f"release expects a Tensor, got {type(tensor)!r}")
    tensor.release()
