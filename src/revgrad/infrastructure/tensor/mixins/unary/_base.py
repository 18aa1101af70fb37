"""
Unary operation mixin defining elementwise power and exponential APIs.

The mixin itself does not implement numerical kernels; float and integer
kernels are registered per element kind elsewhere.
"""

from abc import ABC
from typing import Union

from .....domain._tensor import ITensor

Number = Union[int, float]


class TensorMixinUnary(ABC):
    """
    Abstract mixin defining unary tensor operations.

    Notes
    -----
    Integer inputs are computed in double precision and truncated back to
    the input's integer type. Such results never track gradients.
    """

    def pow(self: ITensor, exponent: Number) -> "ITensor":
        """
        Raise every element to a scalar power.

        Parameters
        ----------
        exponent : int or float
            Scalar exponent, recorded as the result's auxiliary scalar.

        Returns
        -------
        ITensor
            Tensor with the same shape and element type as ``self``.

        Notes
        -----
        Backward rule:
            ``d(x**e)/dx = e * x**(e - 1)``
        """
        ...

    def exp(self: ITensor) -> "ITensor":
        """
        Compute the elementwise exponential of the tensor.

        Returns
        -------
        ITensor
            A tensor of the same shape and element type as ``self``.

        Notes
        -----
        Backward rule:
            ``d(exp(x)) / dx = exp(x)``, recomputed from the operand.
        """
        ...

    def __pow__(self: ITensor, exponent: Number) -> "ITensor":
        """Elementwise power with a scalar exponent (``x ** e``)."""
        if isinstance(exponent, bool) or not isinstance(exponent, (int, float)):
            return NotImplemented
        return self.pow(exponent)
