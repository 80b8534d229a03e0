"""
Dispersion statistics over numeric sequences.

Population measures divide by ``n``; sample measures divide by ``n - 1``
(Bessel's correction). Every function returns 0.0 when fewer than two
values are supplied, instead of NaN or a division error.
"""

from typing import Sequence

import numpy as np

def _as_array(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float)

def variance(values: Sequence[float]) -> float:
    """Population variance.

    >>> variance([1, 2, 3, 4, 5])
    2.0
    """
    data = _as_array(values)
    if data.size < 2:
        return 0.0
    return float(np.var(data, ddof=0))

def sample_variance(values: Sequence[float]) -> float:
    """Sample variance (ddof=1); 2.5 for ``[1, 2, 3, 4, 5]``."""
    data = _as_array(values)
    if data.size < 2:
        return 0.0
    return float(np.var(data, ddof=1))

def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation; about 1.4142 for ``[1, 2, 3, 4, 5]``."""
    return float(np.sqrt(variance(values)))

def sample_standard_deviation(values: Sequence[float]) -> float:
    """Sample standard deviation; about 1.5811 for ``[1, 2, 3, 4, 5]``."""
    return float(np.sqrt(sample_variance(values)))
