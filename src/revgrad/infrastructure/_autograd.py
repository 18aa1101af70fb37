"""
Reverse-mode traversal driver.

`backward` propagates gradients from a root tensor to every tensor that
contributed to it and tracks gradients:

1. Collect the tracking nodes reachable from the root in topological order
   (operands before results) with an iterative depth-first search. Shared
   subexpressions appear once.
2. Reset the gradient buffers of the intermediate (non-leaf) nodes. Leaf
   gradients are left alone so repeated passes accumulate into them.
3. Seed the root's gradient with `grad_out` (ones by default).
4. Visit nodes from the root toward the leaves and apply the backward rule
   of each node's producing operation exactly once, after every consumer
   of that node has contributed to its gradient.
"""

import logging
from typing import Any, List, Optional

import numpy as np

from ..domain._errors import ShapeMismatchError, UnsupportedTypeError
from .tensor._tensor import Tensor
from .tensor._backward_registry import get_backward_rule

logger = logging.getLogger(__name__)


def topological_order(root: Tensor) -> List[Tensor]:
    """
    Return the gradient-tracking nodes reachable from `root`, operands first.

    Operands that do not track gradients are skipped together with their
    subgraphs, which cannot contain tracking tensors.

    Raises
    ------
    TensorReleasedError
        If a node or one of its operands was released.
    """
    order: List[Tensor] = []
    visited = set()
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if id(node) in visited:
            continue
        node._require_live("backward")
        visited.add(id(node))
        stack.append((node, True))
        for parent in reversed(node.operands):
            parent._require_live("backward")
            if parent.requires_grad and id(parent) not in visited:
                stack.append((parent, False))
    return order


def _seed(root: Tensor, grad_out: Optional[Any]) -> np.ndarray:
    if grad_out is None:
        return np.ones(root.shape, dtype=root.dtype)
    if isinstance(grad_out, Tensor):
        grad_out = grad_out.to_numpy()
    seed = np.asarray(grad_out, dtype=root.dtype)
    if seed.shape != root.shape:
        raise ShapeMismatchError("backward", root.shape, seed.shape, "seed gradient")
    return seed


def backward(root: Tensor, grad_out: Optional[Any] = None) -> None:
    """
    Backpropagate gradients from `root` through its recorded graph.

    Parameters
    ----------
    root : Tensor
        Tensor to differentiate, typically a ``(1,)`` loss.
    grad_out : array-like or Tensor, optional
        Seed gradient of `root`'s shape. Defaults to all ones.

    Raises
    ------
    UnsupportedTypeError
        If `root` holds integers.
    ShapeMismatchError
        If `grad_out` does not match `root`'s shape.
    NotImplementedError
        If a node's operation has no backward rule.

    Notes
    -----
    Calling this on a root that does not track gradients does nothing.
    Leaf gradients accumulate across calls; use `zero_grad` between passes.
    """
    if not isinstance(root, Tensor):
        raise TypeError(f"backward expects a Tensor, got {type(root)!r}")
    root._require_live("backward")
    if not root.element_type.is_floating:
        raise UnsupportedTypeError("backward", root.element_type)
    if not root.requires_grad:
        logger.debug("backward called on a tensor that does not track gradients")
        return

    seed = _seed(root, grad_out)
    order = topological_order(root)
    for node in order:
        if not node.is_leaf:
            node.zero_grad()
    root._accumulate_grad_(seed)

    for node in reversed(order):
        if node.is_leaf:
            continue
        rule = get_backward_rule(node.producing_operation)
        rule(node)

    logger.debug("backward visited %d nodes", len(order))
