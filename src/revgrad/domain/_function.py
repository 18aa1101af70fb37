"""
Autograd function interface definitions.

This module defines the abstract base class for differentiable operations
that are expressed as standalone `Function` classes rather than Tensor
methods (losses and shape transforms). Concrete subclasses implement the
forward computation and the matching gradient-accumulation rule.

Unlike function-level autograd systems that return gradients to an engine,
a revgrad backward rule adds its contribution straight into the gradient
buffers of the operands, because a tensor may feed several downstream
operations and every contribution must be summed.
"""

from abc import ABC, abstractmethod
from typing import Any, Union

from ._operation import Operation
from ._tensor import ITensor


class Function(ABC):
    """
    Abstract base class for differentiable operations.

    A `Function` represents one kind of node in the computation graph. It
    encapsulates both:
    - the forward computation, which validates operands, computes the
      result and records the graph edge on the given context,
    - the backward computation, which accumulates the local
      vector-Jacobian product into each tracking operand.

    Attributes
    ----------
    operation : Operation
        Tag stamped on results produced by this function. The backward
        traversal uses it to find `backward`.

    Notes
    -----
    Methods are static so the same `Function` class can serve any number
    of graphs; per-call state lives on the `ctx` object.
    """

    operation: Operation

    @staticmethod
    @abstractmethod
    def forward(ctx, *inputs: Union[ITensor, Any]) -> ITensor:
        """
        Perform the forward computation.

        Parameters
        ----------
        ctx : Context
            Graph record for the result. Implementations fill in parents
            and the auxiliary scalar.
        *inputs : ITensor or Any
            Operands and scalar parameters of the operation.

        Returns
        -------
        ITensor
            The result tensor.
        """
        ...

    @staticmethod
    @abstractmethod
    def backward(ctx, out: ITensor) -> None:
        """
        Accumulate gradients into the operands recorded on `ctx`.

        Parameters
        ----------
        ctx : Context
            The context populated during the forward pass.
        out : ITensor
            The result tensor; its gradient is the upstream sensitivity.
        """
        ...
