"""A tensor is just an n-dimensional array of floats. numpy does the real work."""

from typing import Iterable

import numpy as np
from numpy import ndarray as Tensor


def as_tensor(values: Iterable[float]) -> Tensor:
    """Copy a sequence of numbers into a flat float tensor"""
    return np.array(list(values), dtype=float).reshape(-1)
