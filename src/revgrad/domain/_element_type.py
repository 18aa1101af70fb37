"""
Element type abstraction.

`ElementType` enumerates the four numeric kinds a tensor may hold and maps
each of them to its NumPy dtype. Element types are fixed at tensor
creation and never change afterwards.
"""

from enum import Enum
from typing import Any

import numpy as np

from ._errors import UnsupportedTypeError


class ElementType(Enum):
    """
    Enumeration of supported tensor element types.

    Attributes
    ----------
    FLOAT32 : ElementType
        32-bit IEEE floating point.
    FLOAT64 : ElementType
        64-bit IEEE floating point.
    INT32 : ElementType
        32-bit signed integer.
    INT64 : ElementType
        64-bit signed integer.
    """

    FLOAT32 = "float32"
    FLOAT64 = "float64"
    INT32 = "int32"
    INT64 = "int64"

    @property
    def numpy_dtype(self) -> np.dtype:
        """Return the NumPy dtype backing this element type."""
        return np.dtype(self.value)

    @property
    def is_floating(self) -> bool:
        """Return True for FLOAT32 and FLOAT64."""
        return self in (ElementType.FLOAT32, ElementType.FLOAT64)

    @property
    def kind(self) -> str:
        """
        Return the dispatch kind of this element type.

        Returns
        -------
        str
            ``"floating"`` for float types, ``"integral"`` for integer types.
            Kernels are registered per kind, not per concrete type.
        """
        return "floating" if self.is_floating else "integral"

    def promoted(self) -> "ElementType":
        """
        Return the floating type an integer result is promoted to.

        int32 promotes to float32 and int64 to float64; floating types are
        returned unchanged.
        """
        if self is ElementType.INT32:
            return ElementType.FLOAT32
        if self is ElementType.INT64:
            return ElementType.FLOAT64
        return self

    @classmethod
    def coerce(cls, value: Any) -> "ElementType":
        """
        Normalize a user-facing element type specification.

        Parameters
        ----------
        value : Any
            An `ElementType`, its string value (e.g. ``"float64"``), or a
            NumPy dtype / scalar type (e.g. ``np.int32``).

        Returns
        -------
        ElementType
            The matching element type.

        Raises
        ------
        UnsupportedTypeError
            If `value` does not name one of the four supported types.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                raise UnsupportedTypeError("create", value) from None
        try:
            name = np.dtype(value).name
        except TypeError:
            raise UnsupportedTypeError("create", value) from None
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedTypeError("create", value) from None

    def __str__(self) -> str:
        return self.value
