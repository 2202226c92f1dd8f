"""Shared storage and arithmetic for fields living on a Grid.

A field holds a (borrowed) reference to its Grid plus one or more dense
component arrays whose shapes are fixed at construction. Binary operations
between two fields require equal (nx, ny); operations against a real number
are applied elementwise to every component.
"""

from abc import ABC, abstractmethod
import numbers
from typing import Tuple

import numpy as np

from ..grid import Grid


class GridField(ABC):
    """Abstract base for Scalar and Flux.

    Subclasses allocate their component arrays in __init__ and expose them
    through ``components``. Everything else (shape checks, copy semantics,
    the arithmetic operators) is implemented here on top of that tuple.
    """

    # Make numpy defer to our reflected operators (np.float64(2) * f).
    __array_ufunc__ = None

    def __init__(self, grid: Grid):
        self.grid = grid
        self.nx = grid.nx
        self.ny = grid.ny

    @property
    @abstractmethod
    def components(self) -> Tuple[np.ndarray, ...]:
        """Component arrays, in a fixed order."""
        pass

    @property
    def dx(self) -> float:
        return self.grid.dx

    def check_extents(self, other: "GridField") -> None:
        """Raise ValueError unless ``other`` has the same (nx, ny) as self."""
        if (other.nx, other.ny) != (self.nx, self.ny):
            raise ValueError(
                f"{type(self).__name__} extents ({self.nx}, {self.ny}) do not match "
                f"{type(other).__name__} extents ({other.nx}, {other.ny})"
            )

    def copy(self):
        """Deep copy on the same grid."""
        new = type(self)(self.grid)
        for dst, src in zip(new.components, self.components):
            dst[...] = src
        return new

    def assign(self, other):
        """Copy the values of ``other`` into self (extents must match)."""
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Cannot assign {type(other).__name__} to {type(self).__name__}"
            )
        self.check_extents(other)
        for dst, src in zip(self.components, other.components):
            dst[...] = src
        return self

    def fill(self, value: float):
        for arr in self.components:
            arr.fill(value)
        return self

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _apply_inplace(self, other, ufunc):
        if isinstance(other, type(self)):
            self.check_extents(other)
            for arr, arr_other in zip(self.components, other.components):
                ufunc(arr, arr_other, out=arr)
        elif isinstance(other, numbers.Real):
            for arr in self.components:
                ufunc(arr, other, out=arr)
        else:
            return NotImplemented
        return self

    def _apply(self, other, ufunc):
        if not isinstance(other, (type(self), numbers.Real)):
            return NotImplemented
        return self.copy()._apply_inplace(other, ufunc)

    def __iadd__(self, other):
        return self._apply_inplace(other, np.add)

    def __isub__(self, other):
        return self._apply_inplace(other, np.subtract)

    def __imul__(self, other):
        return self._apply_inplace(other, np.multiply)

    def __itruediv__(self, other):
        return self._apply_inplace(other, np.divide)

    def __add__(self, other):
        return self._apply(other, np.add)

    def __sub__(self, other):
        return self._apply(other, np.subtract)

    def __mul__(self, other):
        return self._apply(other, np.multiply)

    def __truediv__(self, other):
        return self._apply(other, np.divide)

    def __neg__(self):
        result = self.copy()
        for arr in result.components:
            np.negative(arr, out=arr)
        return result

    def __radd__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self + other

    def __rsub__(self, other):
        # a - f == -(f - a)
        if not isinstance(other, numbers.Real):
            return NotImplemented
        result = -self
        result += other
        return result

    def __rmul__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self * other

    def __rtruediv__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        result = self.copy()
        for arr in result.components:
            np.divide(other, arr, out=arr)
        return result
