"""
Backward rule catalogue.

Maps each `Operation` tag to the function that accumulates the gradient of
a result produced by that operation into its operands. Forward
implementations register their rule next to the forward code with the
`backward_rule` decorator; the traversal driver looks rules up by the
result's `producing_operation`.
"""

import logging
from typing import Callable, Dict

from ...domain._operation import Operation

logger = logging.getLogger(__name__)

BackwardRule = Callable[["object"], None]

_RULES: Dict[Operation, BackwardRule] = {}


def backward_rule(operation: Operation) -> Callable[[BackwardRule], BackwardRule]:
    """
    Register the decorated function as the backward rule for `operation`.

    Raises
    ------
    ValueError
        If `operation` is `Operation.LEAF` or already has a rule.
    """

    def decorator(rule: BackwardRule) -> BackwardRule:
        if operation is Operation.LEAF:
            raise ValueError("Leaves have no backward rule.")
        if operation in _RULES:
            raise ValueError(f"A backward rule for {operation} is already registered.")
        _RULES[operation] = rule
        logger.debug("registered backward rule for %s", operation)
        return rule

    return decorator


def get_backward_rule(operation: Operation) -> BackwardRule:
    """
    Return the rule registered for `operation`.

    Raises
    ------
    NotImplementedError
        If no rule is registered.
    """
    try:
        return _RULES[operation]
    except KeyError:
        raise NotImplementedError(
            f"No backward rule is registered for {operation}."
        ) from None


def registered_operations() -> frozenset:
    """Return the operations that currently have a backward rule."""
    return frozenset(_RULES)
