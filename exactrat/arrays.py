"""NumPy object arrays of :class:`~exactrat.rational.Rational` values."""
from __future__ import annotations

from typing import Any, Tuple, Union

import numpy as np

from .rational import Rational

_rationalize_elements = np.vectorize(Rational.rationalize, otypes=[object])


def as_rational_array(values: Any, *, copy: bool = True) -> np.ndarray:
    """Return a ``numpy.ndarray`` of :class:`Rational` values.

    ``values`` can be any iterable containing rational-like entries (integers,
    integer-valued floats, fraction or decimal text, ``Fraction`` or
    ``Rational``) or an existing NumPy array. When ``copy`` is ``False`` and
    ``values`` is already an object array holding only :class:`Rational`
    elements, the original array is returned.
    """

    if isinstance(values, np.ndarray):
        array = values.copy() if copy else values
        if array.dtype == object and all(isinstance(item, Rational) for item in array.flat):
            return array
        return _rationalize_elements(array)

    if isinstance(values, (list, tuple)):
        return _rationalize_elements(np.array(values, dtype=object))

    return as_rational_array(list(values), copy=copy)


def zeros(shape: Union[int, Tuple[int, ...]]) -> np.ndarray:
    """Return an array of the given shape filled with :attr:`Rational.zero`."""

    if isinstance(shape, int) and shape < 0:
        raise ValueError("length must be non-negative")
    return np.full(shape, Rational.zero, dtype=object)


def zeros_like(values: Any) -> np.ndarray:
    """Return a zero-filled array that matches the shape of ``values``."""

    return zeros(np.shape(values))


__all__ = ["as_rational_array", "zeros", "zeros_like"]
