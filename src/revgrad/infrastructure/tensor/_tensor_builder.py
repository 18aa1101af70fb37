"""
Tensor control-path manager for element-kind dispatch.

This module defines the shared control-path manager used to register and
resolve element-kind-specific implementations of Tensor methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"_state"``, which a Tensor resolves
to its element kind (``"floating"`` or ``"integral"``). The kernel for an
operation is therefore chosen once per call, never per element.

Typical usage
-------------
Kind-specific implementations register themselves using this manager:

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, FLOATING)
    def op_floating(self, ...): ...

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, INTEGRAL)
    def op_integral(self, ...): ...

An operation with no path registered for a kind raises
`UnsupportedTypeError` naming the operation and the tensor's element type.
"""

from ...domain._errors import UnsupportedTypeError
from ...domain.utils._control_path import create_path_builder

FLOATING = "floating"
INTEGRAL = "integral"


def _unsupported_element_type(method, tensor) -> UnsupportedTypeError:
    return UnsupportedTypeError(method.__name__, tensor.element_type)


# Control-path manager that dispatches Tensor methods based on `self._state`
tensor_control_path_manager = create_path_builder(
    "_state", default_trap=_unsupported_element_type
)
