"""
Tensor interface definitions.

This module defines the domain-level interface for tensor-like objects using
structural typing. The interface captures the properties the forward
catalogue, the backward rules and the traversal driver rely on: typed
row-major storage, an optional gradient buffer, and provenance linkage to
the operands that produced the tensor.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

import numpy as np

from ._element_type import ElementType
from ._operation import Operation


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An `ITensor` is a dense, typed, row-major N-dimensional array that
    optionally owns a gradient buffer and records which operation and
    operands produced it.

    Notes
    -----
    - `operands` are back-references used only for graph traversal; a
      tensor never releases its operands.
    - `grad` is present only for floating-point tensors that track
      gradients.
    """

    @property
    def element_type(self) -> ElementType:
        """Return the fixed element type of the tensor."""
        ...

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the tensor shape."""
        ...

    @property
    def rank(self) -> int:
        """Return the number of dimensions."""
        ...

    @property
    def element_count(self) -> int:
        """Return the product of all dimension sizes."""
        ...

    @property
    def data(self) -> np.ndarray:
        """Return a copy of the flat row-major data buffer."""
        ...

    @property
    def grad(self) -> Optional[np.ndarray]:
        """Return a shaped copy of the gradient buffer, or None."""
        ...

    @property
    def requires_grad(self) -> bool:
        """Whether the gradient buffer participates in accumulation."""
        ...

    @property
    def producing_operation(self) -> Operation:
        """Return the operation tag, `Operation.LEAF` for leaves."""
        ...

    @property
    def operands(self) -> Sequence["ITensor"]:
        """Return the operands consumed by `producing_operation`."""
        ...

    @property
    def auxiliary_scalar(self) -> float:
        """Return the operator-specific constant recorded at forward time."""
        ...

    def to_numpy(self) -> np.ndarray:
        """Return a shaped copy of the data."""
        ...

    def zero_grad(self) -> None:
        """Reset the gradient buffer to zeros, keeping the allocation."""
        ...

    def backward(self, grad_out: Optional[np.ndarray] = None) -> None:
        """Backpropagate from this tensor through the recorded graph."""
        ...
