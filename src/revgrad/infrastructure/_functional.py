"""
Functional forms of the forward operation catalogue.

Each function checks that its tensor arguments are `Tensor` instances and
forwards to the matching Tensor method, so ``revgrad.add(a, b)`` and
``a.add(b)`` build the same graph. Element-kind dispatch, validation and
graph recording happen in the method.
"""

from typing import Union

from .tensor._tensor import Tensor

Number = Union[int, float]


def _require_tensor(op: str, *xs) -> None:
    for x in xs:
        if not isinstance(x, Tensor):
            raise TypeError(f"{op} expects Tensor operands, got {type(x)!r}")


def add(a: Tensor, b: Tensor) -> Tensor:
    """Elementwise ``a + b``."""
    _require_tensor("add", a, b)
    return a.add(b)


def sub(a: Tensor, b: Tensor) -> Tensor:
    """Elementwise ``a - b``."""
    _require_tensor("sub", a, b)
    return a.sub(b)


def mul(a: Tensor, b: Tensor) -> Tensor:
    """Elementwise ``a * b``."""
    _require_tensor("mul", a, b)
    return a.mul(b)


def divide(a: Tensor, b: Tensor) -> Tensor:
    """
    Elementwise ``a / b``.

    Integer tensors truncate toward zero.
    """
    _require_tensor("divide", a, b)
    return a.div(b)


def matmul(a: Tensor, b: Tensor) -> Tensor:
    """Matrix product of rank-2 tensors."""
    _require_tensor("matmul", a, b)
    return a.matmul(b)


def power(x: Tensor, exponent: Number) -> Tensor:
    """Elementwise ``x ** exponent`` for a scalar exponent."""
    _require_tensor("power", x)
    return x.pow(exponent)


def exp(x: Tensor) -> Tensor:
    _require_tensor("exp", x)
    return x.exp()


def relu(x: Tensor) -> Tensor:
    _require_tensor("relu", x)
    return x.relu()


def leaky_relu(slope: float, x: Tensor) -> Tensor:
    """
    Leaky ReLU with negative-side multiplier `slope`.

    The slope comes first to match the other scalar-parameter forms of the
    catalogue; float tensors only.
    """
    _require_tensor("leaky_relu", x)
    return x.leaky_relu(slope)


def sigmoid(x: Tensor) -> Tensor:
    _require_tensor("sigmoid", x)
    return x.sigmoid()


def tanh(x: Tensor) -> Tensor:
    _require_tensor("tanh", x)
    return x.tanh()


def softmax(x: Tensor) -> Tensor:
    """Softmax over a vector, or over the last axis of each row."""
    _require_tensor("softmax", x)
    return x.softmax()


def sum(x: Tensor) -> Tensor:
    """Sum of all elements as a ``(1,)`` tensor."""
    _require_tensor("sum", x)
    return x.sum()


def mean(x: Tensor) -> Tensor:
    """Mean of all elements as a ``(1,)`` tensor (float only)."""
    _require_tensor("mean", x)
    return x.mean()
