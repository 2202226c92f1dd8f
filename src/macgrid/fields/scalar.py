"""Node-centred scalar field on a (nx+1) x (ny+1) lattice.

Besides elementwise arithmetic (see GridField), a Scalar provides operator
members that overwrite ``self`` with the result of a discrete operator, so a
time-stepping loop can reuse the same storage at every step:

>>> gamma = Scalar(grid)
>>> gamma.curl(q)                 # vorticity of a Flux
>>> psi = Scalar(grid)
>>> psi.laplacian_inverse(gamma)  # fast Poisson solve
"""

from typing import Tuple

import numpy as np

from ..grid import Grid
from .base import GridField


class Scalar(GridField):
    """Scalar values at the nodes of a Grid.

    Parameters
    ----------
    grid : Grid
        Grid supplying (nx, ny, dx). The field keeps a reference to it and
        never changes its extents afterwards.
    """

    def __init__(self, grid: Grid):
        super().__init__(grid)
        self.data = np.zeros((self.nx + 1, self.ny + 1))

    @classmethod
    def from_array(cls, grid: Grid, values) -> "Scalar":
        """Build a Scalar on ``grid`` holding a copy of ``values``."""
        f = cls(grid)
        values = np.asarray(values, dtype=float)
        if values.shape != f.data.shape:
            raise ValueError(
                f"Array shape {values.shape} does not match node lattice {f.data.shape}"
            )
        f.data[...] = values
        return f

    @property
    def components(self) -> Tuple[np.ndarray, ...]:
        return (self.data,)

    @property
    def interior(self) -> np.ndarray:
        """View of the (nx-1) x (ny-1) interior nodes."""
        return self.data[1:-1, 1:-1]

    def _check_index(self, index) -> Tuple[int, int]:
        i, j = index
        if not (0 <= i <= self.nx and 0 <= j <= self.ny):
            raise IndexError(
                f"Scalar index ({i}, {j}) out of range for extents ({self.nx}, {self.ny})"
            )
        return i, j

    def __getitem__(self, index) -> float:
        return self.data[self._check_index(index)]

    def __setitem__(self, index, value: float) -> None:
        self.data[self._check_index(index)] = value

    def zero_boundary(self) -> "Scalar":
        """Set the four outer rows/columns to exactly 0.0."""
        self.data[0, :] = 0.0
        self.data[-1, :] = 0.0
        self.data[:, 0] = 0.0
        self.data[:, -1] = 0.0
        return self

    def __repr__(self) -> str:
        return f"Scalar(nx={self.nx}, ny={self.ny}, dx={self.dx:g})"

    # ------------------------------------------------------------------
    # Operator members: set self to op(argument) and return self
    # ------------------------------------------------------------------

    def curl(self, q) -> "Scalar":
        """Set self to the discrete curl of Flux ``q``."""
        from ..operators.vector_ops import curl

        curl(q, out=self)
        return self

    def divergence(self, q) -> "Scalar":
        """Set self to the discrete divergence of Flux ``q``."""
        from ..operators.vector_ops import divergence

        divergence(q, out=self)
        return self

    def sin_transform(self, f: "Scalar", normalize: bool = False) -> "Scalar":
        """Set self to the discrete sine transform of ``f``."""
        from ..operators.sine_transform import sin_transform

        sin_transform(f, normalize=normalize, out=self)
        return self

    def sin_transform_inv(self, f: "Scalar") -> "Scalar":
        """Set self to the inverse (normalized) discrete sine transform of ``f``."""
        from ..operators.sine_transform import sin_transform_inv

        sin_transform_inv(f, out=self)
        return self

    def laplacian(self, f: "Scalar") -> "Scalar":
        from ..operators.sine_transform import laplacian

        laplacian(f, out=self)
        return self

    def laplacian_inverse(self, f: "Scalar") -> "Scalar":
        """Set self to the solution s of laplacian(s) = f with s = 0 on the boundary."""
        from ..operators.sine_transform import laplacian_inverse

        laplacian_inverse(f, out=self)
        return self

    def dot(self, f: "Scalar") -> float:
        """Return the grid-weighted inner product of self and ``f``."""
        from ..operators.vector_ops import inner_product

        return inner_product(self, f)
