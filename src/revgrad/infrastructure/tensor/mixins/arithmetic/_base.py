"""
Arithmetic mixin defining elementwise Tensor operators and the matrix product.

This module declares :class:`TensorMixinArithmetic`, an abstract mixin that
specifies the public API and mathematical semantics for elementwise
arithmetic and matrix multiplication on tensors.

The named methods (``add``, ``sub``, ``mul``, ``div``, ``matmul``) are
dispatch points: their float and integer kernels are registered elsewhere
through the control-path manager. Python operators are thin adapters over
the named methods.
"""

from typing import Union
from abc import ABC

from .....domain._tensor import ITensor
from ..._shape_and_indexing import require_same_shape, require_same_type

Number = Union[int, float]


class TensorMixinArithmetic(ABC):
    """
    Abstract mixin defining arithmetic operations for tensors.

    Notes
    -----
    - Operands must share element type and shape; nothing is broadcast.
    - Scalars are promoted to constant tensors matching the receiver's shape
      and element type before applying the operation. Such constants never
      track gradients.
    - Backward rules described in method docstrings are contractual and are
      registered alongside each kernel.
    """

    def _binary_operand(self: ITensor, op: str, other: Union["ITensor", Number]) -> "ITensor":
        """
        Lift and validate the right-hand operand of an elementwise op.

        Raises
        ------
        TensorReleasedError
            If either operand was released.
        UnsupportedTypeError
            If the element types differ.
        ShapeMismatchError
            If the shapes differ.
        """
        self._require_live(op)
        other_t = self._as_tensor_like(other, self, op)
        other_t._require_live(op)
        require_same_type(op, self, other_t)
        require_same_shape(op, self, other_t)
        return other_t

    def add(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise addition.

        Returns
        -------
        ITensor
            ``self + other`` with the operands' shape and element type.

        Notes
        -----
        Backward rule: each tracking operand receives ``grad_out``.
        """
        ...

    def sub(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise subtraction.

        Notes
        -----
        Backward rule: ``grad_a += grad_out``, ``grad_b -= grad_out``.
        """
        ...

    def mul(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise (Hadamard) product.

        Notes
        -----
        Backward rule: ``grad_a += grad_out * b``, ``grad_b += grad_out * a``.
        """
        ...

    def div(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise division.

        Float tensors follow IEEE semantics (division by zero gives inf or
        nan). Integer tensors truncate toward zero.

        Notes
        -----
        Backward rule:
            ``grad_a += grad_out / b``
            ``grad_b -= grad_out * a / b**2``
        """
        ...

    def matmul(self: ITensor, other: "ITensor") -> "ITensor":
        """
        Matrix product of two rank-2 tensors.

        Parameters
        ----------
        other : ITensor
            Right operand of shape ``(l, n)`` when ``self`` is ``(m, l)``.

        Returns
        -------
        ITensor
            Tensor of shape ``(m, n)`` and the operands' element type.

        Raises
        ------
        ShapeMismatchError
            If either operand is not rank 2 or the inner dimensions differ.

        Notes
        -----
        Backward rule: ``grad_A += G @ B.T``, ``grad_B += A.T @ G``.
        """
        ...

    def __add__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.add(other)

    def __radd__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other, self, "add").add(self)

    def __sub__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.sub(other)

    def __rsub__(self: ITensor, other: Number) -> "ITensor":
        """
        Right-hand subtraction (``other - self``), where `other` is a scalar.
        """
        return self._as_tensor_like(other, self, "sub").sub(self)

    def __mul__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.mul(other)

    def __rmul__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other, self, "mul").mul(self)

    def __truediv__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.div(other)

    def __rtruediv__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other, self, "div").div(self)

    def __matmul__(self: ITensor, other: "ITensor") -> "ITensor":
        return self.matmul(other)

    def __neg__(self: ITensor) -> "ITensor":
        """
        Elementwise negation, recorded as multiplication by ``-1``.
        """
        return self.mul(-1)
