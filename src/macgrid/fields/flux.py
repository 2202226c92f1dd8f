"""Edge-centred flux field on the staggered grid.

Two components with different shapes:

- X-flux through vertical edges, shape (nx+1, ny), located at (i, j+1/2)
- Y-flux through horizontal edges, shape (nx, ny+1), located at (i+1/2, j)

Values are fluxes (velocity times edge length), so they already carry a
factor of dx.
"""

from typing import Tuple

import numpy as np

from ..grid import Grid
from .base import GridField

# Component indices
X, Y = 0, 1


class Flux(GridField):
    """Normal fluxes through the cell edges of a Grid, indexed as q[X, i, j]."""

    def __init__(self, grid: Grid):
        super().__init__(grid)
        self.x = np.zeros((self.nx + 1, self.ny))
        self.y = np.zeros((self.nx, self.ny + 1))

    @classmethod
    def from_arrays(cls, grid: Grid, x_values, y_values) -> "Flux":
        q = cls(grid)
        for dst, src in ((q.x, x_values), (q.y, y_values)):
            src = np.asarray(src, dtype=float)
            if src.shape != dst.shape:
                raise ValueError(
                    f"Flux component shape {src.shape} does not match expected {dst.shape}"
                )
            dst[...] = src
        return q

    @property
    def components(self) -> Tuple[np.ndarray, ...]:
        return (self.x, self.y)

    def component(self, direction: int) -> np.ndarray:
        if direction == X:
            return self.x
        if direction == Y:
            return self.y
        raise IndexError(f"Flux component must be X ({X}) or Y ({Y}), got {direction}")

    def _locate(self, index) -> Tuple[np.ndarray, int, int]:
        direction, i, j = index
        arr = self.component(direction)
        n_i, n_j = arr.shape
        if not (0 <= i < n_i and 0 <= j < n_j):
            raise IndexError(
                f"Flux index ({direction}, {i}, {j}) out of range for component shape {arr.shape}"
            )
        return arr, i, j

    def __getitem__(self, index) -> float:
        arr, i, j = self._locate(index)
        return arr[i, j]

    def __setitem__(self, index, value: float) -> None:
        arr, i, j = self._locate(index)
        arr[i, j] = value

    def x_flux_coordinates(self) -> Tuple[np.ndarray, np.ndarray]:
        """Midpoints of the vertical edges, each of shape (nx+1, ny)."""
        x = self.grid.x_edge(np.arange(self.nx + 1))
        y = self.grid.y_center(np.arange(self.ny))
        return np.meshgrid(x, y, indexing="ij")

    def y_flux_coordinates(self) -> Tuple[np.ndarray, np.ndarray]:
        """Midpoints of the horizontal edges, each of shape (nx, ny+1)."""
        x = self.grid.x_center(np.arange(self.nx))
        y = self.grid.y_edge(np.arange(self.ny + 1))
        return np.meshgrid(x, y, indexing="ij")

    def __repr__(self) -> str:
        return f"Flux(nx={self.nx}, ny={self.ny}, dx={self.dx:g})"
