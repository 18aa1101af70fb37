from ._errors import (
    AllocationError,
    InvalidShapeError,
    ShapeMismatchError,
    TensorReleasedError,
    UnsupportedTypeError,
)
from ._element_type import ElementType
from ._operation import Operation, MAX_OPERANDS

__all__ = [
    AllocationError.__name__,
    InvalidShapeError.__name__,
    ShapeMismatchError.__name__,
    TensorReleasedError.__name__,
    UnsupportedTypeError.__name__,
    ElementType.__name__,
    Operation.__name__,
    "MAX_OPERANDS",
]
