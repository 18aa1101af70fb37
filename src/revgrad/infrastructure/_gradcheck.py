"""
Finite-difference gradient checking.

`numerical_gradient` estimates ``d fn(*inputs) / d inputs[wrt]`` with
centered differences by perturbing the input's data buffer in place (and
restoring it). `check_gradients` compares those estimates with the
gradients produced by a backward pass.

`fn` must build a fresh graph on every call and return a single-element
tensor. Float64 inputs are recommended; float32 rounding dominates the
difference quotient for small steps.
"""

import logging
from typing import Callable, Sequence

import numpy as np

from .tensor._tensor import Tensor

logger = logging.getLogger(__name__)


def _scalar_output(fn: Callable[..., Tensor], inputs: Sequence[Tensor]) -> float:
    out = fn(*inputs)
    if out.element_count != 1:
        raise ValueError(
            f"gradient checking needs a single-element output, got shape {out.shape}"
        )
    return float(out._data[0])


def numerical_gradient(
    fn: Callable[..., Tensor],
    inputs: Sequence[Tensor],
    wrt: int,
    eps: float = 1e-6,
) -> np.ndarray:
    """
    Estimate the gradient of `fn` with respect to ``inputs[wrt]``.

    Parameters
    ----------
    fn : Callable[..., Tensor]
        Function of the input tensors returning a single-element tensor.
    inputs : Sequence[Tensor]
        Arguments passed to `fn`.
    wrt : int
        Index of the input to differentiate with respect to.
    eps : float
        Finite-difference step.

    Returns
    -------
    numpy.ndarray
        Array with the shape of ``inputs[wrt]``.
    """
    x = inputs[wrt]
    buf = x._data
    grad = np.zeros(buf.shape, dtype=np.float64)
    for i in range(buf.size):
        orig = buf[i]
        buf[i] = orig + eps
        f_plus = _scalar_output(fn, inputs)
        buf[i] = orig - eps
        f_minus = _scalar_output(fn, inputs)
        buf[i] = orig
        grad[i] = (f_plus - f_minus) / (2.0 * eps)
    return grad.reshape(x.shape)


def check_gradients(
    fn: Callable[..., Tensor],
    inputs: Sequence[Tensor],
    eps: float = 1e-6,
    atol: float = 1e-4,
    rtol: float = 1e-4,
) -> bool:
    """
    Compare backward-pass gradients with finite-difference estimates.

    Every input that tracks gradients is checked. Their gradient buffers are
    zeroed before the backward pass.

    Returns
    -------
    bool
        True if all checked inputs agree within tolerance. Mismatches are
        logged as warnings.
    """
    for x in inputs:
        x.zero_grad()
    fn(*inputs).backward()

    ok = True
    for i, x in enumerate(inputs):
        if not x.requires_grad:
            continue
        analytic = x.grad
        numeric = numerical_gradient(fn, inputs, i, eps)
        if not np.allclose(analytic, numeric, atol=atol, rtol=rtol):
            logger.warning(
                "gradient mismatch for input %d: max abs error %.3e",
                i,
                float(np.max(np.abs(analytic - numeric))),
            )
            ok = False
    return ok
