"""Per-point vector quantities (e.g. forces) on immersed boundary points."""

import numpy as np

from .flux import X, Y


class BoundaryVector:
    """X/Y values at ``num_points`` boundary points, indexed as f[X, k]."""

    def __init__(self, num_points: int):
        if num_points < 0:
            raise ValueError(f"num_points must be non-negative, got {num_points}")
        self.data = np.zeros((2, num_points))

    @classmethod
    def from_components(cls, x_values, y_values) -> "BoundaryVector":
        x_values = np.asarray(x_values, dtype=float)
        y_values = np.asarray(y_values, dtype=float)
        if x_values.shape != y_values.shape or x_values.ndim != 1:
            raise ValueError(
                f"Expected two 1D arrays of equal length, got {x_values.shape} and {y_values.shape}"
            )
        f = cls(len(x_values))
        f.data[X] = x_values
        f.data[Y] = y_values
        return f

    @property
    def num_points(self) -> int:
        return self.data.shape[1]

    def _check_index(self, index):
        direction, k = index
        if direction not in (X, Y) or not (0 <= k < self.num_points):
            raise IndexError(
                f"BoundaryVector index ({direction}, {k}) out of range for {self.num_points} points"
            )
        return direction, k

    def __getitem__(self, index) -> float:
        return self.data[self._check_index(index)]

    def __setitem__(self, index, value: float) -> None:
        self.data[self._check_index(index)] = value

    def __len__(self) -> int:
        return self.num_points
