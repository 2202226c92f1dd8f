"""Tests for the verification run and its configuration dataclasses.

Run with: uv run pytest tests/test_verification.py -v
"""

import numpy as np
import pytest

from macgrid import Grid, Metrics, Parameters
from macgrid import verification
from macgrid.verification import run_verification


class TestParameters:
    """Test the configuration dataclass."""

    def test_build_grid(self):
        params = Parameters(nx=8, ny=6, length=2.0, x_offset=1.0)
        grid = params.build_grid()
        assert grid == Grid(nx=8, ny=6, length=2.0, x_offset=1.0)
        assert grid.dx == 0.25

    def test_to_mlflow_skips_unset(self):
        params = Parameters()
        logged = params.to_mlflow()
        assert "fft_workers" not in logged
        assert logged["nx"] == 64

    def test_to_dataframe(self):
        df = Parameters(nx=8).to_dataframe()
        assert len(df) == 1
        assert df["nx"].iloc[0] == 8


class TestMetrics:
    """Test the results dataclass."""

    def test_to_mlflow(self):
        metrics = Metrics(adjoint_defect=1e-15, passed=True)
        logged = metrics.to_mlflow()
        assert logged["passed"] == 1
        assert logged["adjoint_defect"] == 1e-15
        assert "sin_transform_error" not in logged  # unset values are inf


class TestVerification:
    """Test the operator identity checks."""

    def test_random_fields(self, grid, rng):
        f = verification.random_interior_scalar(grid, rng)
        assert np.all(f.data[0, :] == 0.0)
        assert np.all(f.data[:, -1] == 0.0)
        q = verification.random_flux(grid, rng)
        assert np.any(q.x != 0.0)

    def test_adjoint_defect(self, grid, rng):
        q = verification.random_flux(grid, rng)
        f = verification.random_interior_scalar(grid, rng)
        assert verification.adjoint_defect(q, f) < 1e-12

    @pytest.mark.parametrize("nx, ny", [(8, 8), (16, 10), (33, 17)])
    def test_run_passes(self, nx, ny):
        metrics = run_verification(Parameters(nx=nx, ny=ny, length=1.0, seed=7))
        assert metrics.passed
        assert metrics.uniform_flow_vorticity == 0.0
        assert metrics.adjoint_defect < 1e-12
        assert metrics.sin_transform_error < 1e-12
        assert metrics.laplacian_inverse_error < 1e-10
        assert metrics.projection_divergence < 1e-9

    def test_run_reports_failure(self):
        """A zero tolerance cannot be met by round-off sized defects."""
        metrics = run_verification(Parameters(nx=8, ny=8, tolerance=0.0))
        assert not metrics.passed
