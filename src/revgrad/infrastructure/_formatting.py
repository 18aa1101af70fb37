"""
Human-readable tensor formatting.

The layout lists the element type, the dimensions, the data and, for float
tensors, the gradient:

    Tensor {
      dtype: float32
      dims:  [2, 2]
      data:  [[1.0000, 2.0000],
              [3.0000, 4.0000]]

      grads: [[0.0000e+00, 0.0000e+00],
              [0.0000e+00, 0.0000e+00]]
    }

Tensors of rank above 2 are printed row by row through their 2-D view
``(count // last_dim, last_dim)``. Formatting only reads from the tensor.
"""

import sys
from typing import Callable, List, Optional, TextIO

import numpy as np

from .tensor._tensor import Tensor
from .tensor._shape_and_indexing import matrix_view

_DATA_PREFIX = "  data:  "
_GRAD_PREFIX = "  grads: "


def _format_block(
    flat: np.ndarray, shape, fmt: Callable[[object], str], prefix: str
) -> List[str]:
    if len(shape) == 1:
        return [prefix + "[" + ", ".join(fmt(v) for v in flat) + "]"]
    rows, cols = matrix_view(shape)
    indent = " " * (len(prefix) + 1)
    lines = []
    for r in range(rows):
        body = "[" + ", ".join(fmt(v) for v in flat[r * cols:(r + 1) * cols]) + "]"
        if r == 0:
            line = prefix + "[" + body
        else:
            line = indent + body
        line += "]" if r == rows - 1 else ","
        lines.append(line)
    return lines


def format_tensor(t: Tensor, precision: int = 4) -> str:
    """
    Render `t` in the multi-line layout shown in the module docstring.

    Parameters
    ----------
    t : Tensor
        Tensor to render.
    precision : int
        Digits after the decimal point for float values.

    Returns
    -------
    str
        The rendered text, without a trailing newline.
    """
    if t.is_released:
        return "Tensor { released }"

    et = t.element_type
    lines = [
        "Tensor {",
        f"  dtype: {et}",
        f"  dims:  [{', '.join(str(d) for d in t.shape)}]",
    ]
    if et.is_floating:
        lines += _format_block(t._data, t.shape, lambda v: f"{v:.{precision}f}", _DATA_PREFIX)
        lines.append("")
        if t._grad is None:
            lines.append(_GRAD_PREFIX + "None")
        else:
            lines += _format_block(
                t._grad, t.shape, lambda v: f"{v:.{precision}e}", _GRAD_PREFIX
            )
    else:
        lines += _format_block(t._data, t.shape, lambda v: str(int(v)), _DATA_PREFIX)
    lines.append("}")
    return "\n".join(lines)


def print_tensor(t: Tensor, file: Optional[TextIO] = None, precision: int = 4) -> None:
    """Write `format_tensor(t)` followed by a newline to `file` (stdout)."""
    stream = file if file is not None else sys.stdout
    stream.write(format_tensor(t, precision) + "\n")
