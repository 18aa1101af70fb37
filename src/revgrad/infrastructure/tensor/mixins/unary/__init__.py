"""
Unary mixins and element-kind-specific implementations for Tensor operations.

This package aggregates unary Tensor operations and their concrete
control-path implementations:

- ``pow``  : elementwise power with a scalar exponent (also ``**``)
- ``exp``  : elementwise exponential

Concrete implementation modules are imported for their *side effects*:
registering control paths and backward rules.

Public API
----------
- ``TensorMixinUnary``
"""

from ._tensor_pow import *
from ._tensor_exp import *
from ._base import TensorMixinUnary

__all__ = [
    TensorMixinUnary.__name__,
]
