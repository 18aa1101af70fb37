"""
Reduction mixins and element-kind-specific implementations.

- ``sum``  : float and integer
- ``mean`` : float only

Both reduce every element to a tensor of shape ``(1,)``.

Public API
----------
- ``TensorMixinReduction``
"""

from ._tensor_sum import *
from ._tensor_mean import *
from ._base import TensorMixinReduction

__all__ = [
    TensorMixinReduction.__name__,
]
