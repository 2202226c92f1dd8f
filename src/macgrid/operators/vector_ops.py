"""Differential and algebraic operators on the staggered grid.

Curl, divergence, inner products, cross products and velocity/flux
conversions composing Scalar (node) and Flux (edge) fields.

The node curl of a Flux and the edge curl of a Scalar are discrete adjoints
with respect to the two inner products defined here:

    inner_product(curl(q), f) == inner_product(q, curl(f))

for every Flux q and every Scalar f vanishing on the boundary. The
trapezoidal weights in inner_product are what make this hold exactly.
"""

from functools import lru_cache
from typing import Optional, Tuple, Union

import numpy as np

from ..fields import BoundaryVector, Flux, Scalar, X, Y
from .kernels import (
    curl_flux_kernel,
    curl_scalar_kernel,
    divergence_kernel,
    flux_to_x_velocity_kernel,
    flux_to_y_velocity_kernel,
    x_velocity_to_flux_kernel,
    y_velocity_to_flux_kernel,
)


def _result(out, template, cls):
    """Return ``out`` (checked against ``template``) or a fresh ``cls`` field."""
    if out is None:
        return cls(template.grid)
    if not isinstance(out, cls):
        raise TypeError(f"Expected output of type {cls.__name__}, got {type(out).__name__}")
    template.check_extents(out)
    return out


@lru_cache(maxsize=32)
def _trapezoid_weights(n: int) -> np.ndarray:
    """Weights 1/2, 1, ..., 1, 1/2 for the n+1 points of [0, n]."""
    w = np.ones(n + 1)
    w[0] = w[-1] = 0.5
    w.setflags(write=False)
    return w


# =============================================================================
# Curl and divergence
# =============================================================================


def curl(field: Union[Flux, Scalar], out=None):
    """Discrete curl on the staggered grid.

    Parameters
    ----------
    field : Flux or Scalar
        - Flux q: returns the node Scalar
          ``(qY(i,j) - qY(i-1,j) - qX(i,j) + qX(i,j-1)) / dx^2`` on interior
          nodes, exactly 0 on the boundary.
        - Scalar f: returns the Flux ``qX(i,j) = f(i,j+1) - f(i,j)``,
          ``qY(i,j) = f(i,j) - f(i+1,j)`` (no dx scaling).
    out : Scalar or Flux, optional
        Preallocated result with matching extents.

    Returns
    -------
    Scalar or Flux
    """
    if isinstance(field, Flux):
        gamma = _result(out, field, Scalar)
        curl_flux_kernel(field.x, field.y, gamma.data, 1.0 / (field.dx * field.dx))
        return gamma
    if isinstance(field, Scalar):
        q = _result(out, field, Flux)
        curl_scalar_kernel(field.data, q.x, q.y)
        return q
    raise TypeError(f"curl is defined for Flux and Scalar, got {type(field).__name__}")


def divergence(q: Flux, out: Optional[Scalar] = None) -> Scalar:
    """Node divergence of a Flux.

    Centred difference of the node velocities from flux_to_velocity,
    ``(u(i+1,j) - u(i-1,j) + v(i,j+1) - v(i,j-1)) / (2 dx)``, on interior
    nodes; boundary nodes are exactly 0. The divergence of curl(f) vanishes.
    """
    if not isinstance(q, Flux):
        raise TypeError(f"divergence is defined for Flux, got {type(q).__name__}")
    f = _result(out, q, Scalar)
    divergence_kernel(q.x, q.y, f.data, 1.0 / (4.0 * q.dx * q.dx))
    return f


# =============================================================================
# Inner products and sums
# =============================================================================


def inner_product(a, b) -> float:
    """Grid-weighted inner product of two Scalars or of two Fluxes.

    Scalars: trapezoidal weights over the node lattice (interior 1, edge 1/2,
    corner 1/4), multiplied by dx^2.

    Fluxes: trapezoidal weights along the direction each component varies in
    (half weight at i=0, nx for X-fluxes and at j=0, ny for Y-fluxes). Not
    multiplied by dx^2, since fluxes already carry that factor.
    """
    if isinstance(a, Scalar) and isinstance(b, Scalar):
        a.check_extents(b)
        wx = _trapezoid_weights(a.nx)
        wy = _trapezoid_weights(a.ny)
        ip = wx @ (a.data * b.data) @ wy
        return float(ip * a.dx * a.dx)
    if isinstance(a, Flux) and isinstance(b, Flux):
        a.check_extents(b)
        ip_x = _trapezoid_weights(a.nx) @ (a.x * b.x).sum(axis=1)
        ip_y = (a.y * b.y).sum(axis=0) @ _trapezoid_weights(a.ny)
        return float(ip_x + ip_y)
    raise TypeError(
        f"inner_product needs two Scalars or two Fluxes, got "
        f"{type(a).__name__} and {type(b).__name__}"
    )


def x_sum(q: Flux) -> float:
    """Unweighted sum of the X-fluxes."""
    return float(q.x.sum())


def y_sum(q: Flux) -> float:
    """Unweighted sum of the Y-fluxes."""
    return float(q.y.sum())


def compute_net_force(f: BoundaryVector) -> Tuple[float, float]:
    """Total (x, y) force summed over all boundary points."""
    return float(f.data[X].sum()), float(f.data[Y].sum())


# =============================================================================
# Velocity <-> flux conversions
# =============================================================================


def flux_to_x_velocity(q: Flux, out: Optional[Scalar] = None) -> Scalar:
    """u-velocity at nodes from the X-fluxes.

    Averages the two adjacent X-fluxes and divides by dx; at j=0 and j=ny
    only one flux is available and is used alone (one-sided).
    """
    u = _result(out, q, Scalar)
    flux_to_x_velocity_kernel(q.x, u.data, 1.0 / (2.0 * q.dx))
    return u


def flux_to_y_velocity(q: Flux, out: Optional[Scalar] = None) -> Scalar:
    """v-velocity at nodes from the Y-fluxes (one-sided at i=0 and i=nx)."""
    v = _result(out, q, Scalar)
    flux_to_y_velocity_kernel(q.y, v.data, 1.0 / (2.0 * q.dx))
    return v


def flux_to_velocity(q: Flux) -> Tuple[Scalar, Scalar]:
    """Node velocities (u, v) from a Flux."""
    return flux_to_x_velocity(q), flux_to_y_velocity(q)


def x_velocity_to_flux(u: Scalar, q: Flux) -> Flux:
    """Write X-fluxes ``(u(i,j) + u(i,j+1)) * dx/2`` into ``q``.

    The Y-component of ``q`` is left untouched.
    """
    u.check_extents(q)
    x_velocity_to_flux_kernel(u.data, q.x, u.dx / 2.0)
    return q


def y_velocity_to_flux(v: Scalar, q: Flux) -> Flux:
    """Write Y-fluxes ``(v(i,j) + v(i+1,j)) * dx/2`` into ``q``.

    The X-component of ``q`` is left untouched.
    """
    v.check_extents(q)
    y_velocity_to_flux_kernel(v.data, q.y, v.dx / 2.0)
    return q


def velocity_to_flux(u: Scalar, v: Scalar, out: Optional[Flux] = None) -> Flux:
    u.check_extents(v)
    q = _result(out, u, Flux)
    x_velocity_to_flux(u, q)
    y_velocity_to_flux(v, q)
    return q


# =============================================================================
# Cross products
# =============================================================================


def cross_product(q: Flux, other: Union[Scalar, Flux]):
    """Cross product of a Flux with a Scalar or with another Flux.

    - ``q x f = (f v, -f u)`` returned as a Flux, where (u, v) are the node
      velocities of q.
    - ``q1 x q2 = u1 v2 - u2 v1`` returned as a node Scalar.
    """
    if not isinstance(q, Flux):
        raise TypeError(f"cross_product expects a Flux first, got {type(q).__name__}")
    if isinstance(other, Scalar):
        q.check_extents(other)
        u, v = flux_to_velocity(q)
        u *= other
        u *= -1
        v *= other
        return velocity_to_flux(v, u)  # (f v, -f u)

    if isinstance(other, Flux):
        q.check_extents(other)
        u = flux_to_x_velocity(q)
        v = flux_to_y_velocity(other)
        f = u * v  # u1 v2
        flux_to_x_velocity(other, out=u)
        flux_to_y_velocity(q, out=v)
        f -= u * v  # u1 v2 - u2 v1
        return f

    raise TypeError(
        f"cross_product is defined for Flux x Scalar and Flux x Flux, got Flux x {type(other).__name__}"
    )


# =============================================================================
# Projection
# =============================================================================


def project(q: Flux) -> Flux:
    """Discretely divergence-free flux with the same interior vorticity as ``q``.

    Solves -laplacian(s) = curl(q) for the streamfunction s (s = 0 on the
    boundary) and returns curl(s).
    """
    from .sine_transform import laplacian_inverse

    streamfunction = -laplacian_inverse(curl(q))
    return curl(streamfunction)
