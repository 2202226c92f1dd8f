"""Staggered-grid operators (curl, divergence, products) and the DST Poisson solver."""

from .vector_ops import (
    curl,
    divergence,
    inner_product,
    x_sum,
    y_sum,
    compute_net_force,
    flux_to_x_velocity,
    flux_to_y_velocity,
    flux_to_velocity,
    x_velocity_to_flux,
    y_velocity_to_flux,
    velocity_to_flux,
    cross_product,
    project,
)
from .sine_transform import (
    TransformWorkspace,
    sin_transform,
    sin_transform_inv,
    laplacian_eigenvalues,
    laplacian,
    laplacian_inverse,
)

__all__ = [
    # Vector operations
    "curl",
    "divergence",
    "inner_product",
    "x_sum",
    "y_sum",
    "compute_net_force",
    "flux_to_x_velocity",
    "flux_to_y_velocity",
    "flux_to_velocity",
    "x_velocity_to_flux",
    "y_velocity_to_flux",
    "velocity_to_flux",
    "cross_product",
    "project",
    # Spectral Poisson solver
    "TransformWorkspace",
    "sin_transform",
    "sin_transform_inv",
    "laplacian_eigenvalues",
    "laplacian",
    "laplacian_inverse",
]
