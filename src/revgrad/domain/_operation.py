"""
Operation tags recorded on tensors produced by forward operations.

Each forward operation stamps its result with one `Operation` member; the
backward traversal uses the tag to select the matching gradient rule.
Tensors created directly by the caller carry `Operation.LEAF`.
"""

from enum import Enum


class Operation(Enum):
    """Tag identifying the forward operation that produced a tensor."""

    LEAF = "leaf"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    MATMUL = "matmul"
    DIV = "div"
    POW = "pow"
    EXP = "exp"
    RELU = "relu"
    LEAKY_RELU = "leaky_relu"
    SIGMOID = "sigmoid"
    TANH = "tanh"
    SOFTMAX = "softmax"
    SUM = "sum"
    MEAN = "mean"
    MSE = "mse"
    TRANSPOSE = "transpose"
    RESHAPE = "reshape"
    FLATTEN = "flatten"

    def __str__(self) -> str:
        return self.name


# Graph nodes never record more operands than this.
MAX_OPERANDS = 3
