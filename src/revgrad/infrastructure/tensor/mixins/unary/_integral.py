"""
Conversion of float64 intermediate results back into integer buffers.

Integer `pow` and `exp` compute in float64. Truncated results that do not
fit the target type saturate to its bounds (``inf`` included) and ``nan``
becomes 0, so the integer result never depends on NumPy's undefined
float-to-int cast.
"""

import numpy as np


def saturate_to_integral(values: np.ndarray, dtype: np.dtype) -> np.ndarray:
    """
    Truncate `values` toward zero and cast them to the integer `dtype`.

    Parameters
    ----------
    values : np.ndarray
        Float64 results.
    dtype : np.dtype
        Target integer dtype (int32 or int64).

    Returns
    -------
    np.ndarray
        Array of `dtype`, clamped to ``[iinfo.min, iinfo.max]``.
    """
    info = np.iinfo(dtype)
    v = np.where(np.isnan(values), 0.0, np.trunc(values))
    high = v >= float(info.max)
    low = v <= float(info.min)
    out = np.where(high | low, 0.0, v).astype(dtype)
    out[high] = info.max
    out[low] = info.min
    return out
