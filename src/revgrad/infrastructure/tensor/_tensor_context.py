from typing import Any, Sequence
from dataclasses import dataclass, field

from ...domain._tensor import ITensor
from ...domain._operation import Operation, MAX_OPERANDS


@dataclass
class Context:
    """
    Graph record attached to a Tensor produced by an operation.

    A `Context` records what the backward traversal needs to apply the
    gradient rule of the producing operation.

    Attributes
    ----------
    operation : Operation
        Tag of the forward operation that produced the tensor.
    parents : Sequence[Tensor]
        The operands, in the order the operation consumed them. These are
        back-references only: releasing the result never releases them.
    auxiliary_scalar : float
        Operator constant reused during backward (power exponent,
        leaky-relu slope). 0.0 when unused.
    saved_meta : dict[str, Any]
        Non-tensor metadata required for backward (e.g., source shapes).

    Raises
    ------
    ValueError
        If more than `MAX_OPERANDS` parents are recorded.
    """

    operation: Operation
    parents: Sequence["ITensor"]
    auxiliary_scalar: float = 0.0
    saved_meta: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.parents = tuple(self.parents)
        if len(self.parents) > MAX_OPERANDS:
            raise ValueError(
                f"{self.operation} records {len(self.parents)} operands; "
                f"at most {MAX_OPERANDS} are supported."
            )
        self.auxiliary_scalar = float(self.auxiliary_scalar)
