"""
revgrad: a minimal reverse-mode automatic differentiation engine over typed
dense tensors.

Typical use::

    import revgrad as rg

    x = rg.tensor([[1.0, 2.0], [3.0, 4.0]], "float64", requires_grad=True)
    w = rg.tensor([[0.5], [-0.5]], "float64", requires_grad=True)
    y = rg.tensor([[1.0], [0.0]], "float64")

    loss = rg.mean_squared_error(y, rg.sigmoid(rg.matmul(x, w)))
    loss.backward()
    print(w.grad)
"""

from ._config import RuntimeConfig, get_config, set_config
from ._logging import configure_logging, get_logger
from .domain import (
    AllocationError,
    ElementType,
    InvalidShapeError,
    Operation,
    ShapeMismatchError,
    TensorReleasedError,
    UnsupportedTypeError,
)
from .infrastructure.tensor import Tensor, Context, release
from .infrastructure._autograd import backward
from .infrastructure._factories import tensor, zeros, ones, full, eye, rand, randn
from .infrastructure._functional import (
    add,
    sub,
    mul,
    divide,
    matmul,
    power,
    exp,
    relu,
    leaky_relu,
    sigmoid,
    tanh,
    softmax,
    sum,
    mean,
)
from .infrastructure._losses import MSEFn, mean_squared_error
from .infrastructure._shape_transforms import (
    TransposeFn,
    ReshapeFn,
    FlattenFn,
    transpose,
    reshape,
    flatten,
)
from .infrastructure._formatting import format_tensor, print_tensor
from .infrastructure._gradcheck import numerical_gradient, check_gradients

FLOAT32 = ElementType.FLOAT32
FLOAT64 = ElementType.FLOAT64
INT32 = ElementType.INT32
INT64 = ElementType.INT64

get_logger()

__version__ = "0.1.0"
