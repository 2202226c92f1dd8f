"""Operator identity checks on random fields.

Each check returns a non-negative defect that vanishes (to rounding) when
the discrete operators are consistent. ``run_verification`` collects them
into a Metrics dataclass.
"""

import logging
import time

import numpy as np

from .datastructures import Metrics, Parameters
from .fields import Flux, Scalar
from .grid import Grid
from .operators import (
    curl,
    divergence,
    inner_product,
    laplacian,
    laplacian_inverse,
    project,
    sin_transform,
    sin_transform_inv,
)

log = logging.getLogger(__name__)


def random_flux(grid: Grid, rng: np.random.Generator) -> Flux:
    q = Flux(grid)
    q.x[...] = rng.standard_normal(q.x.shape)
    q.y[...] = rng.standard_normal(q.y.shape)
    return q


def random_interior_scalar(grid: Grid, rng: np.random.Generator) -> Scalar:
    """Random Scalar with exactly zero boundary values."""
    f = Scalar(grid)
    f.interior[...] = rng.standard_normal(f.interior.shape)
    return f


def adjoint_defect(q: Flux, f: Scalar) -> float:
    """Relative mismatch between <curl q, f> and <q, curl f>."""
    lhs = inner_product(curl(q), f)
    rhs = inner_product(q, curl(f))
    scale = max(abs(lhs), abs(rhs), 1e-300)
    return abs(lhs - rhs) / scale


def sin_transform_error(f: Scalar, workers=None) -> float:
    f_back = sin_transform_inv(sin_transform(f, workers=workers), workers=workers)
    return float(np.max(np.abs(f_back.interior - f.interior)))


def laplacian_inverse_error(f: Scalar, workers=None) -> float:
    f_back = laplacian_inverse(laplacian(f), workers=workers)
    return float(np.max(np.abs(f_back.data - f.data)))


def run_verification(params: Parameters) -> Metrics:
    """Run every identity check on the grid described by ``params``."""
    grid = params.build_grid()
    rng = np.random.default_rng(params.seed)
    log.info(f"Verifying operators on {grid.nx}x{grid.ny} grid, dx={grid.dx:.4e}")

    time_start = time.time()

    q = random_flux(grid, rng)
    f = random_interior_scalar(grid, rng)

    metrics = Metrics()
    metrics.adjoint_defect = adjoint_defect(q, f)
    metrics.sin_transform_error = sin_transform_error(f, params.fft_workers)
    metrics.laplacian_inverse_error = laplacian_inverse_error(f, params.fft_workers)

    q_div_free = project(q)
    metrics.projection_divergence = float(np.max(np.abs(divergence(q_div_free).data)))
    metrics.projection_vorticity_error = float(
        np.max(np.abs((curl(q_div_free) - curl(q)).data)) * grid.dx * grid.dx
    )

    uniform = Flux(grid)
    uniform.x.fill(1.0)
    metrics.uniform_flow_vorticity = float(np.max(np.abs(curl(uniform).data)))

    metrics.wall_time_seconds = time.time() - time_start

    defects = {
        k: v for k, v in metrics.to_mlflow().items() if k not in ("wall_time_seconds", "passed")
    }
    failed = [k for k, v in defects.items() if v > params.tolerance]
    metrics.passed = not failed
    for name, value in defects.items():
        log.info(f"  {name}: {value:.3e}")
    if failed:
        log.warning(f"Checks above tolerance {params.tolerance:.1e}: {', '.join(failed)}")
    return metrics
