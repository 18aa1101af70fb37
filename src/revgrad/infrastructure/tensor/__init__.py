from ._tensor import Tensor, release
from ._tensor_context import Context

__all__ = [
    Tensor.__name__,
    Context.__name__,
    release.__name__,
]
