"""
Tensor factory functions.

Convenience constructors for leaf tensors. Element types default to the
configured default element type; random factories draw from
`numpy.random.default_rng`, seeded by the `seed` argument or, when it is
omitted, by the configured seed.
"""

from typing import Any, Optional, Sequence

import numpy as np

from .._config import get_config
from ..domain._element_type import ElementType
from ..domain._errors import UnsupportedTypeError
from .tensor._tensor import Tensor


def _resolve(element_type: Any) -> ElementType:
    if element_type is None:
        return get_config().default_element_type
    return ElementType.coerce(element_type)


def tensor(
    raw_data: Any = None,
    element_type: Any = None,
    shape: Optional[Sequence[int]] = None,
    requires_grad: bool = False,
) -> Tensor:
    """
    Create a leaf tensor; see `Tensor.create`.

    Examples
    --------
    >>> t = tensor([[1, 2], [3, 4]], "float32", requires_grad=True)
    >>> t.shape
    (2, 2)
    """
    return Tensor.create(raw_data, element_type, shape, requires_grad)


def zeros(shape: Sequence[int], element_type: Any = None, requires_grad: bool = False) -> Tensor:
    """Return a zero-filled leaf tensor."""
    return Tensor(shape, _resolve(element_type), requires_grad=requires_grad)


def ones(shape: Sequence[int], element_type: Any = None, requires_grad: bool = False) -> Tensor:
    """Return a leaf tensor filled with ones."""
    out = Tensor(shape, _resolve(element_type), requires_grad=requires_grad)
    out._data.fill(1)
    return out


def full(
    shape: Sequence[int],
    value: float,
    element_type: Any = None,
    requires_grad: bool = False,
) -> Tensor:
    """Return a leaf tensor with every element set to `value`."""
    out = Tensor(shape, _resolve(element_type), requires_grad=requires_grad)
    out._data.fill(value)
    return out


def eye(n: int, element_type: Any = None, requires_grad: bool = False) -> Tensor:
    """Return the ``(n, n)`` identity matrix."""
    out = Tensor((n, n), _resolve(element_type), requires_grad=requires_grad)
    out._data[:: n + 1] = 1
    return out


def _random(name: str, shape, element_type, requires_grad, seed, draw) -> Tensor:
    et = _resolve(element_type)
    if not et.is_floating:
        raise UnsupportedTypeError(name, et)
    out = Tensor(shape, et, requires_grad=requires_grad)
    rng = np.random.default_rng(seed if seed is not None else get_config().seed)
    out.copy_from_numpy(draw(rng, out.element_count))
    return out


def rand(
    shape: Sequence[int],
    element_type: Any = None,
    requires_grad: bool = False,
    seed: Optional[int] = None,
) -> Tensor:
    """
    Return a leaf tensor of samples from the uniform distribution on [0, 1).

    Raises
    ------
    UnsupportedTypeError
        For integer element types.
    """
    return _random("rand", shape, element_type, requires_grad, seed,
                   lambda rng, n: rng.random(n))


def randn(
    shape: Sequence[int],
    element_type: Any = None,
    requires_grad: bool = False,
    seed: Optional[int] = None,
) -> Tensor:
    """
    Return a leaf tensor of standard normal samples.

    Raises
    ------
    UnsupportedTypeError
        For integer element types.
    """
    return _random("randn", shape, element_type, requires_grad, seed,
                   lambda rng, n: rng.standard_normal(n))
