"""Discrete vector calculus on a staggered (MAC) grid.

Node-centred Scalars and edge-centred Fluxes on a uniform Grid, the
operators a projection-method flow solver composes every time step (curl,
divergence, inner and cross products, velocity/flux conversions) and a
direct Poisson solver based on the type-I discrete sine transform.

Example
-------
>>> from macgrid import Grid, Flux, Scalar, curl, laplacian_inverse
>>>
>>> grid = Grid(nx=64, ny=64, length=1.0)
>>> q = Flux(grid)
>>> gamma = curl(q)
>>> psi = -laplacian_inverse(gamma)
>>> q_div_free = curl(psi)
"""

from .grid import Grid
from .datastructures import Parameters, Metrics
from .fields import GridField, Scalar, Flux, BoundaryVector, X, Y
from .operators import (
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
    TransformWorkspace,
    sin_transform,
    sin_transform_inv,
    laplacian_eigenvalues,
    laplacian,
    laplacian_inverse,
)

__all__ = [
    # Grid and configuration
    "Grid",
    "Parameters",
    "Metrics",
    # Fields
    "GridField",
    "Scalar",
    "Flux",
    "BoundaryVector",
    "X",
    "Y",
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
