"""Shared fixtures: small grids and a seeded random generator."""

import numpy as np
import pytest

from macgrid import Flux, Grid, Scalar


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def unit_grid():
    """4x4 cells with dx = 1."""
    return Grid(nx=4, ny=4, length=4.0)


@pytest.fixture
def grid():
    """Non-square grid with dx = 0.125."""
    return Grid(nx=16, ny=12, length=2.0, x_offset=-1.0, y_offset=-0.75)


@pytest.fixture
def random_flux(grid, rng):
    q = Flux(grid)
    q.x[...] = rng.standard_normal(q.x.shape)
    q.y[...] = rng.standard_normal(q.y.shape)
    return q


@pytest.fixture
def random_scalar(grid, rng):
    """Random values on every node, including the boundary."""
    return Scalar.from_array(grid, rng.standard_normal(grid.shape))


@pytest.fixture
def dirichlet_scalar(grid, rng):
    """Random interior values, exactly zero on the boundary."""
    f = Scalar(grid)
    f.interior[...] = rng.standard_normal(f.interior.shape)
    return f
