"""Data structures for run configuration and verification results.

             Params (input/config)         Metrics (output/results)
             ─────────────────────         ────────────────────────
Global       Parameters                    Metrics
             nx, ny, length, workers...    adjoint defect, round-trip errors...
"""

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from .grid import Grid


# ============================================================================
# Parameters (Input Configuration) - logged to MLflow as params
# ============================================================================


@dataclass
class Parameters:
    """Grid and solver settings for a verification run."""

    name: str = "macgrid"
    nx: int = 64
    ny: int = 64
    length: float = 1.0
    x_offset: float = 0.0
    y_offset: float = 0.0
    fft_workers: Optional[int] = None
    seed: int = 0
    tolerance: float = 1e-10

    def build_grid(self) -> Grid:
        return Grid(
            nx=self.nx,
            ny=self.ny,
            length=self.length,
            x_offset=self.x_offset,
            y_offset=self.y_offset,
        )

    def to_mlflow(self) -> dict:
        """Convert to MLflow-compatible params dict."""
        return {
            k: (int(v) if isinstance(v, bool) else v)
            for k, v in self.__dict__.items()
            if v is not None
        }

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame([self.to_mlflow()])


# ============================================================================
# Metrics (Output Results) - logged to MLflow as metrics
# ============================================================================


@dataclass
class Metrics:
    """Operator identity defects measured on one grid (all should be ~0)."""

    adjoint_defect: float = float("inf")  # |<curl q, f> - <q, curl f>| / scale
    sin_transform_error: float = float("inf")  # max |DST^-1(DST f) - f|
    laplacian_inverse_error: float = float("inf")  # max |L^-1(L f) - f|
    projection_divergence: float = float("inf")  # max |div(project(q))|
    projection_vorticity_error: float = float("inf")  # max |curl(project(q)) - curl(q)|
    uniform_flow_vorticity: float = float("inf")  # max |curl(uniform q)|
    wall_time_seconds: float = 0.0
    passed: bool = False

    def to_mlflow(self) -> dict:
        """Convert to MLflow-compatible dict (bools as int, skip inf)."""
        return {
            k: (int(v) if isinstance(v, bool) else v)
            for k, v in self.__dict__.items()
            if v != float("inf")
        }

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame([self.to_mlflow()])
