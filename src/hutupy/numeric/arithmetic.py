"""Scalar arithmetic and reductions over numeric sequences."""

from typing import Optional, Sequence, TypeVar, Union

import numpy as np

Number = Union[int, float]
T = TypeVar("T", int, float)

def add(a: T, b: T) -> T:
    return a + b

def subtract(a: T, b: T) -> T:
    return a - b

def multiply(a: T, b: T) -> T:
    return a * b

def divide(a: Number, b: Number) -> Number:
    """Divide ``a`` by ``b``.

    Integer inputs use floor division so int in gives int out; a zero
    divisor raises ZeroDivisionError.
    """
    if isinstance(a, int) and isinstance(b, int):
        return a // b
    return a / b

def absolute(x: T) -> T:
    return -x if x < 0 else x

def maximum(a: T, b: T) -> T:
    return a if a > b else b

def minimum(a: T, b: T) -> T:
    return a if a < b else b

def square(x: T) -> T:
    return x * x

def cube(x: T) -> T:
    return x * x * x

def power(base: T, exponent: int) -> T:
    """Raise ``base`` to a non-negative integer power; ``power(x, 0) == 1``."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return base ** exponent

def is_even(n: int) -> bool:
    return n % 2 == 0

def is_odd(n: int) -> bool:
    return n % 2 != 0

def average(values: Sequence[float]) -> float:
    """Arithmetic mean, 0.0 for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))

def total(values: Sequence[T]) -> T:
    """Sum of the values, 0 for an empty sequence."""
    result = 0
    for value in values:
        result = result + value
    return result

def max_in_array(values: Sequence[T]) -> Optional[T]:
    if len(values) == 0:
        return None
    return max(values)

def min_in_array(values: Sequence[T]) -> Optional[T]:
    if len(values) == 0:
        return None
    return min(values)
