"""Uniform rectangular grid descriptor for the staggered (MAC) layout.

Node (i, j) sits at (x_offset + i*dx, y_offset + j*dx) for 0 <= i <= nx,
0 <= j <= ny. X-fluxes live on vertical edges (i, j+1/2), Y-fluxes on
horizontal edges (i+1/2, j).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Grid:
    """Immutable (nx, ny, dx) descriptor shared by every field built on it."""

    nx: int
    ny: int
    length: float
    x_offset: float = 0.0
    y_offset: float = 0.0

    dx: float = field(init=False)

    def __post_init__(self) -> None:
        if self.nx < 2 or self.ny < 2:
            raise ValueError(
                f"Grid needs at least 2 cells per direction, got nx={self.nx}, ny={self.ny}"
            )
        if self.length <= 0:
            raise ValueError(f"Grid length must be positive, got {self.length}")
        # frozen dataclass: bypass __setattr__ for the derived spacing
        object.__setattr__(self, "dx", self.length / self.nx)

    @property
    def shape(self) -> Tuple[int, int]:
        """Shape of the node lattice, (nx+1, ny+1)."""
        return (self.nx + 1, self.ny + 1)

    @property
    def interior_shape(self) -> Tuple[int, int]:
        return (self.nx - 1, self.ny - 1)

    def x_edge(self, i) -> float:
        return self.x_offset + i * self.dx

    def y_edge(self, j) -> float:
        return self.y_offset + j * self.dx

    def x_center(self, i) -> float:
        return self.x_offset + (i + 0.5) * self.dx

    def y_center(self, j) -> float:
        return self.y_offset + (j + 0.5) * self.dx

    def node_coordinates(self) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Return (X, Y) node positions, each of shape (nx+1, ny+1)."""
        x = self.x_edge(np.arange(self.nx + 1))
        y = self.y_edge(np.arange(self.ny + 1))
        return np.meshgrid(x, y, indexing="ij")
