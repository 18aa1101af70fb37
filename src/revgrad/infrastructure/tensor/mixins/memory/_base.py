"""
Memory/layout mixin delegating to the shape-transform functions.
"""

from abc import ABC
from typing import Sequence

from .....domain._tensor import ITensor


class TensorMixinMemory(ABC):
    """
    Mixin providing layout-changing Tensor methods.

    Every method returns a new tensor with its own buffer; the input is
    never aliased.
    """

    def transpose(self: ITensor) -> "ITensor":
        """
        Return the transpose of a rank-2 tensor.

        Raises
        ------
        InvalidShapeError
            If the tensor is not rank 2.
        """
        from ...._shape_transforms import transpose

        return transpose(self)

    @property
    def T(self: ITensor) -> "ITensor":
        """Alias of `transpose`."""
        return self.transpose()

    def reshape(self: ITensor, shape: Sequence[int]) -> "ITensor":
        """
        Return the tensor's elements laid out under `shape`.

        Parameters
        ----------
        shape : Sequence[int]
            Target shape; must hold the same number of elements.
        """
        from ...._shape_transforms import reshape

        return reshape(self, shape)

    def flatten(self: ITensor) -> "ITensor":
        """Return a rank-1 tensor with every element in row-major order."""
        from ...._shape_transforms import flatten

        return flatten(self)
