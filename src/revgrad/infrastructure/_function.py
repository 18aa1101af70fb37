"""
Helpers for running `Function` subclasses inside the autograd graph.

A `Function` describes one kind of graph node through static ``forward``
and ``backward`` methods. This module wires such classes into the rest of
the system:

- `register_function` records ``Function.backward`` in the backward rule
  catalogue under the class's `operation` tag, so the traversal driver
  treats it like any built-in operation;
- `apply` builds the graph record for one call and runs ``forward``.
"""

from typing import Any, Type, TypeVar

from ..domain._function import Function
from .tensor._backward_registry import backward_rule
from .tensor._tensor_context import Context

F = TypeVar("F", bound=Type[Function])


def register_function(fn_cls: F) -> F:
    """
    Class decorator registering ``fn_cls.backward`` as a backward rule.

    Raises
    ------
    ValueError
        If another rule already claims ``fn_cls.operation``.
    """

    def _rule(out) -> None:
        fn_cls.backward(out._get_ctx(), out)

    _rule.__name__ = f"{fn_cls.__name__.lower()}_backward"
    backward_rule(fn_cls.operation)(_rule)
    return fn_cls


def apply(fn_cls: Type[Function], *inputs: Any):
    """
    Run ``fn_cls.forward`` with a fresh graph record.

    The record starts with no parents; ``forward`` stores the operands it
    consumed before allocating the result.
    """
    ctx = Context(fn_cls.operation, parents=())
    return fn_cls.forward(ctx, *inputs)
