"""Arithmetic and statistics helpers."""

from .arithmetic import (
    add, subtract, multiply, divide, absolute, maximum, minimum,
    square, cube, power, is_even, is_odd,
    average, total, max_in_array, min_in_array,
)
from .statistics import (
    variance, sample_variance, standard_deviation, sample_standard_deviation,
)

__all__ = [
    "add", "subtract", "multiply", "divide", "absolute", "maximum", "minimum",
    "square", "cube", "power", "is_even", "is_odd",
    "average", "total", "max_in_array", "min_in_array",
    "variance", "sample_variance", "standard_deviation", "sample_standard_deviation",
]
