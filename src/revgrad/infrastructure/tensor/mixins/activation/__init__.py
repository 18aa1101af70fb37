"""
Activation mixins and element-kind-specific implementations.

- ``relu``        : float and integer
- ``leaky_relu``  : float only
- ``sigmoid``     : float; integer inputs are promoted to float
- ``tanh``        : float; integer inputs are promoted to float
- ``softmax``     : float only, over the last axis

Kinds without a registered path raise `UnsupportedTypeError` before any
allocation.

Public API
----------
- ``TensorMixinActivation``
"""

from ._tensor_relu import *
from ._tensor_leaky_relu import *
from ._tensor_sigmoid import *
from ._tensor_tanh import *
from ._tensor_softmax import *
from ._base import TensorMixinActivation

__all__ = [
    TensorMixinActivation.__name__,
]
