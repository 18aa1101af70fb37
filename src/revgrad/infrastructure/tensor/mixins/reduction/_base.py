"""
Reduction mixin declaring full-tensor reductions.
"""

from abc import ABC

from .....domain._tensor import ITensor


class TensorMixinReduction(ABC):
    """
    Abstract mixin defining reductions over all elements.

    Reductions always produce a single-element tensor of shape ``(1,)`` in
    the input's element type.
    """

    def sum(self: ITensor) -> "ITensor":
        """
        Sum of all elements.

        Notes
        -----
        Backward rule: every input element receives ``grad_out[0]``.
        """
        ...

    def mean(self: ITensor) -> "ITensor":
        """
        Arithmetic mean of all elements (float tensors only).

        Notes
        -----
        Backward rule: every input element receives ``grad_out[0] / N``.
        """
        ...
