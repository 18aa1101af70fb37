"""
Activation mixin declaring the elementwise and row-wise activations of a
Tensor.
"""

from abc import ABC

from .....domain._tensor import ITensor


class TensorMixinActivation(ABC):
    """
    Abstract mixin defining activation functions.

    Notes
    -----
    Every activation returns a new tensor of the input's shape. Results of
    ``sigmoid`` and ``tanh`` on integer inputs carry the promoted float
    type (int32 -> float32, int64 -> float64).
    """

    def relu(self: ITensor) -> "ITensor":
        """
        Rectified linear unit, ``max(x, 0)``.

        Notes
        -----
        Backward rule: the upstream gradient passes where ``x >= 0``.
        """
        ...

    def leaky_relu(self: ITensor, negative_slope: float = 0.01) -> "ITensor":
        """
        Leaky rectified linear unit.

        Parameters
        ----------
        negative_slope : float
            Multiplier applied to negative inputs; recorded as the result's
            auxiliary scalar.

        Notes
        -----
        Backward rule: ``g`` where ``x >= 0`` and ``negative_slope * g``
        elsewhere.
        """
        ...

    def sigmoid(self: ITensor) -> "ITensor":
        """
        Logistic function ``1 / (1 + exp(-x))``.

        Notes
        -----
        Backward rule: ``g * y * (1 - y)`` with ``y`` the forward output.
        """
        ...

    def tanh(self: ITensor) -> "ITensor":
        """
        Hyperbolic tangent.

        Notes
        -----
        Backward rule: ``g * (1 - y**2)`` with ``y`` the forward output.
        """
        ...

    def softmax(self: ITensor) -> "ITensor":
        """
        Softmax over the whole vector for rank-1 input, row-wise over the
        last axis otherwise.

        The row maximum is subtracted before exponentiating, so large
        inputs such as ``[1000, 1000, 1000]`` give ``[1/3, 1/3, 1/3]``.

        Notes
        -----
        Backward rule (per row): ``y * (g - sum(g * y))``, the product with
        the softmax Jacobian ``diag(y) - y y^T``.
        """
        ...
