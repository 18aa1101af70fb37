"""
Memory/layout mixin for Tensor.

Exposes the differentiable shape transforms (``transpose``, ``reshape``,
``flatten``) as Tensor methods. The transforms themselves are `Function`
classes in `revgrad.infrastructure._shape_transforms`, shared by every
element kind.

Public API
----------
- ``TensorMixinMemory``
"""

from ._base import TensorMixinMemory

__all__ = [
    TensorMixinMemory.__name__,
]
