"""
Arithmetic mixins and element-kind-specific implementations for Tensor
operations.

This package aggregates arithmetic-related Tensor mixins and their concrete
control-path implementations, including:

- addition        (``add`` / ``__add__`` / ``__radd__``)
- subtraction     (``sub`` / ``__sub__`` / ``__rsub__``)
- multiplication  (``mul`` / ``__mul__`` / ``__rmul__``)
- division        (``div`` / ``__truediv__`` / ``__rtruediv__``)
- matrix product  (``matmul`` / ``__matmul__``)

Design notes
------------
- Concrete implementation modules are imported for their *side effects*:
  registering control paths with the tensor control-path manager and
  backward rules with the backward rule catalogue.
- These implementation modules are not part of the public API and should not
  be imported directly by users.

Public API
----------
Only the base mixin class is exported as part of the public interface:

- ``TensorMixinArithmetic``
"""

from ._tensor_addition import *
from ._tensor_subtraction import *
from ._tensor_multiplication import *
from ._tensor_division import *
from ._tensor_matmul import *
from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]
