"""
Validation- and allocation-related exceptions for revgrad.

This module defines the error taxonomy raised by tensor construction, the
forward operation catalogue and the backward traversal. Every exception
carries the offending values as attributes so callers can report or
recover without parsing messages.

Forward operations validate their operands before allocating anything, so
any of these errors leaves previously created tensors untouched.
"""

from typing import Any, Optional, Sequence


class AllocationError(MemoryError):
    """
    Raised when a data or gradient buffer cannot be obtained.

    Attributes
    ----------
    shape : tuple[int, ...]
        Shape of the tensor whose buffers were being allocated.
    element_type : Any
        Element type requested for the buffer.
    """

    def __init__(self, shape: Sequence[int], element_type: Any) -> None:
        """
        Initialize the AllocationError.

        Parameters
        ----------
        shape : Sequence[int]
            Requested tensor shape.
        element_type : Any
            Requested element type.
        """
        super().__init__(
            f"Could not allocate a tensor of shape {tuple(shape)} "
            f"and element type {element_type}."
        )
        self.shape = tuple(shape)
        self.element_type = element_type


class UnsupportedTypeError(TypeError):
    """
    Raised when an operation is invoked on an element type outside its
    supported set (e.g., ``softmax`` on an integer tensor), or when a
    tensor is requested with an unknown element type.

    Attributes
    ----------
    op : str
        Name of the operation that was attempted.
    element_type : Any
        The rejected element type.
    """

    def __init__(self, op: str, element_type: Any) -> None:
        """
        Initialize the UnsupportedTypeError.

        Parameters
        ----------
        op : str
            Operation name (e.g., "softmax", "create").
        element_type : Any
            Element type that is not supported by `op`.
        """
        super().__init__(f"{op} is not implemented for element type '{element_type}'.")
        self.op = op
        self.element_type = element_type


class ShapeMismatchError(ValueError):
    """
    Raised when two operands disagree in rank or in any dimension where the
    operation requires agreement.

    Attributes
    ----------
    op : str
        Name of the operation that was attempted.
    shape_a : tuple[int, ...]
        Shape of the first operand.
    shape_b : tuple[int, ...]
        Shape of the second operand.
    """

    def __init__(
        self,
        op: str,
        shape_a: Sequence[int],
        shape_b: Sequence[int],
        detail: Optional[str] = None,
    ) -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        op : str
            Operation name.
        shape_a : Sequence[int]
            Shape of the first operand.
        shape_b : Sequence[int]
            Shape of the second operand.
        detail : Optional[str]
            Optional explanation appended to the message.
        """
        msg = f"Shape mismatch in {op}: {tuple(shape_a)} vs {tuple(shape_b)}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg + ".")
        self.op = op
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)


class InvalidShapeError(ValueError):
    """
    Raised when a shape is empty, contains non-positive sizes, or does not
    match the number of elements supplied for it.

    Attributes
    ----------
    shape : Any
        The rejected shape as given by the caller.
    """

    def __init__(self, shape: Any, reason: str) -> None:
        super().__init__(f"Invalid shape {shape!r}: {reason}.")
        self.shape = shape


class TensorReleasedError(RuntimeError):
    """
    Raised when a tensor is used after `release` dropped its buffers.
    """

    def __init__(self, op: str) -> None:
        super().__init__(f"{op} was called on a released tensor.")
        self.op = op
