"""Tests for the Grid descriptor and the Scalar / Flux / BoundaryVector containers.

Run with: uv run pytest tests/test_fields.py -v
"""

import dataclasses

import numpy as np
import pytest

from macgrid import BoundaryVector, Flux, Grid, Scalar, X, Y


class TestGrid:
    """Test grid construction and coordinate mapping."""

    def test_spacing(self):
        grid = Grid(nx=8, ny=4, length=2.0)
        assert grid.dx == 0.25
        assert grid.shape == (9, 5)
        assert grid.interior_shape == (7, 3)

    def test_too_few_cells(self):
        """A sine transform needs at least one interior node per direction."""
        with pytest.raises(ValueError):
            Grid(nx=1, ny=4, length=1.0)
        with pytest.raises(ValueError):
            Grid(nx=4, ny=1, length=1.0)

    def test_non_positive_length(self):
        with pytest.raises(ValueError):
            Grid(nx=4, ny=4, length=0.0)

    def test_immutable(self, grid):
        with pytest.raises(dataclasses.FrozenInstanceError):
            grid.nx = 3

    def test_hashable_and_equal(self):
        a = Grid(nx=4, ny=6, length=1.0)
        b = Grid(nx=4, ny=6, length=1.0)
        assert a == b
        assert hash(a) == hash(b)

    def test_coordinates(self, grid):
        assert np.isclose(grid.x_edge(0), -1.0)
        assert np.isclose(grid.x_edge(grid.nx), 1.0)
        assert np.isclose(grid.y_center(0), -0.75 + 0.0625)
        X_nodes, Y_nodes = grid.node_coordinates()
        assert X_nodes.shape == grid.shape
        assert np.isclose(X_nodes[3, 5], grid.x_edge(3))
        assert np.isclose(Y_nodes[3, 5], grid.y_edge(5))


class TestScalarAlgebra:
    """Test elementwise arithmetic on Scalars."""

    @pytest.fixture
    def positive_scalar(self, grid, rng):
        return Scalar.from_array(grid, rng.uniform(1.0, 2.0, grid.shape))

    def test_allocation(self, grid):
        f = Scalar(grid)
        assert f.data.shape == (grid.nx + 1, grid.ny + 1)
        assert f.interior.shape == (grid.nx - 1, grid.ny - 1)
        assert np.all(f.data == 0.0)

    def test_field_field_operators(self, random_scalar, positive_scalar):
        f, g = random_scalar, positive_scalar
        assert np.allclose((f + g).data, f.data + g.data)
        assert np.allclose((f - g).data, f.data - g.data)
        assert np.allclose((f * g).data, f.data * g.data)
        assert np.allclose((f / g).data, f.data / g.data)

    def test_field_number_operators_both_sides(self, random_scalar, positive_scalar):
        f, g = random_scalar, positive_scalar
        a = 2.5
        assert np.allclose((f + a).data, (a + f).data)
        assert np.allclose((f * a).data, (a * f).data)
        assert np.allclose((a - f).data, (-(f - a)).data)
        assert np.allclose((f / a).data, f.data / a)
        assert np.allclose((a / g).data, a / g.data)

    def test_numpy_scalar_on_left(self, random_scalar):
        """numpy scalars defer to the field's reflected operators."""
        result = np.float64(3.0) * random_scalar
        assert isinstance(result, Scalar)
        assert np.allclose(result.data, 3.0 * random_scalar.data)

    def test_binary_operators_do_not_modify_operands(self, random_scalar, positive_scalar):
        before = random_scalar.data.copy()
        _ = random_scalar + positive_scalar
        _ = 1.0 - random_scalar
        assert np.array_equal(random_scalar.data, before)

    def test_inplace_operators(self, random_scalar, positive_scalar):
        f = random_scalar.copy()
        h = f
        h += positive_scalar
        h -= 1.0
        h *= 2.0
        h /= positive_scalar
        assert h is f
        expected = (random_scalar.data + positive_scalar.data - 1.0) * 2.0 / positive_scalar.data
        assert np.allclose(f.data, expected)

    def test_negation(self, random_scalar):
        assert np.array_equal((-random_scalar).data, -random_scalar.data)

    def test_copy_is_deep(self, random_scalar):
        g = random_scalar.copy()
        g[1, 1] = 100.0
        assert random_scalar[1, 1] != 100.0
        assert g.grid is random_scalar.grid

    def test_assign_and_fill(self, grid, random_scalar):
        g = Scalar(grid)
        g.assign(random_scalar)
        assert np.array_equal(g.data, random_scalar.data)
        assert g.data is not random_scalar.data
        g.fill(3.0)
        assert np.all(g.data == 3.0)

    def test_mismatched_extents(self, grid):
        f = Scalar(grid)
        g = Scalar(Grid(nx=grid.nx, ny=grid.ny + 1, length=2.0))
        with pytest.raises(ValueError):
            f + g
        with pytest.raises(ValueError):
            f *= g
        with pytest.raises(ValueError):
            f.assign(g)

    def test_mixing_with_flux_is_type_error(self, grid):
        with pytest.raises(TypeError):
            Scalar(grid) + Flux(grid)
        with pytest.raises(TypeError):
            Scalar(grid).assign(Flux(grid))

    def test_from_array_shape_check(self, grid):
        with pytest.raises(ValueError):
            Scalar.from_array(grid, np.zeros((grid.nx, grid.ny)))


class TestScalarIndexing:
    """Test bounds-checked (i, j) access."""

    def test_read_write(self, unit_grid):
        f = Scalar(unit_grid)
        f[2, 3] = 5.0
        assert f[2, 3] == 5.0
        assert f.data[2, 3] == 5.0

    def test_corners_are_valid(self, unit_grid):
        f = Scalar(unit_grid)
        f[0, 0] = 1.0
        f[4, 4] = 2.0
        assert f[4, 4] == 2.0

    @pytest.mark.parametrize("index", [(5, 0), (0, 5), (-1, 0), (0, -1)])
    def test_out_of_range(self, unit_grid, index):
        f = Scalar(unit_grid)
        with pytest.raises(IndexError):
            f[index]
        with pytest.raises(IndexError):
            f[index] = 1.0


class TestFlux:
    """Test the two-component edge container."""

    def test_component_shapes(self, grid):
        q = Flux(grid)
        assert q.x.shape == (grid.nx + 1, grid.ny)
        assert q.y.shape == (grid.nx, grid.ny + 1)
        assert q.component(X) is q.x
        assert q.component(Y) is q.y

    def test_indexing(self, unit_grid):
        q = Flux(unit_grid)
        q[X, 4, 3] = 1.5
        q[Y, 3, 4] = -2.0
        assert q.x[4, 3] == 1.5
        assert q[Y, 3, 4] == -2.0

    @pytest.mark.parametrize("index", [(X, 4, 4), (X, 5, 0), (Y, 4, 0), (Y, 0, 5), (X, -1, 0), (2, 0, 0)])
    def test_out_of_range(self, unit_grid, index):
        q = Flux(unit_grid)
        with pytest.raises(IndexError):
            q[index]

    def test_arithmetic(self, grid, rng):
        q = Flux.from_arrays(grid, rng.standard_normal((17, 12)), rng.standard_normal((16, 13)))
        p = Flux.from_arrays(grid, rng.standard_normal((17, 12)), rng.standard_normal((16, 13)))
        r = 2.0 * q - p / 4.0
        assert np.allclose(r.x, 2.0 * q.x - p.x / 4.0)
        assert np.allclose(r.y, 2.0 * q.y - p.y / 4.0)
        assert np.allclose((1.0 - q).y, -(q - 1.0).y)

    def test_from_arrays_shape_check(self, grid):
        with pytest.raises(ValueError):
            Flux.from_arrays(grid, np.zeros((grid.nx, grid.ny)), np.zeros((grid.nx, grid.ny + 1)))

    def test_edge_coordinates(self, grid):
        q = Flux(grid)
        xs, ys = q.x_flux_coordinates()
        assert xs.shape == q.x.shape
        assert np.isclose(xs[2, 3], grid.x_edge(2))
        assert np.isclose(ys[2, 3], grid.y_center(3))
        xs, ys = q.y_flux_coordinates()
        assert ys.shape == q.y.shape
        assert np.isclose(xs[2, 3], grid.x_center(2))
        assert np.isclose(ys[2, 3], grid.y_edge(3))


class TestBoundaryVector:
    """Test the per-point boundary container."""

    def test_from_components(self):
        f = BoundaryVector.from_components([1.0, 2.0, 3.0], [0.5, 0.5, -1.0])
        assert f.num_points == 3
        assert len(f) == 3
        assert f[X, 1] == 2.0
        assert f[Y, 2] == -1.0

    def test_out_of_range(self):
        f = BoundaryVector(2)
        with pytest.raises(IndexError):
            f[X, 2]
        with pytest.raises(IndexError):
            f[3, 0]

    def test_mismatched_components(self):
        with pytest.raises(ValueError):
            BoundaryVector.from_components([1.0, 2.0], [1.0])
