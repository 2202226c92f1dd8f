"""Numba JIT-compiled loop kernels for the staggered-grid operators.

These are the inner loops behind vector_ops and sine_transform. They work on
raw numpy arrays (no field objects) and write into preallocated outputs:

- Node arrays have shape (nx+1, ny+1)
- X-flux arrays have shape (nx+1, ny)
- Y-flux arrays have shape (nx, ny+1)
"""

import numpy as np
from numba import njit


@njit(cache=True)
def _zero_boundary(f: np.ndarray):
    nxp1, nyp1 = f.shape
    for j in range(nyp1):
        f[0, j] = 0.0
        f[nxp1 - 1, j] = 0.0
    for i in range(nxp1):
        f[i, 0] = 0.0
        f[i, nyp1 - 1] = 0.0


@njit(cache=True)
def curl_flux_kernel(qx: np.ndarray, qy: np.ndarray, out: np.ndarray, by_dx2: float):
    """Node curl of a flux: (qY(i,j) - qY(i-1,j) - qX(i,j) + qX(i,j-1)) / dx^2.

    Interior nodes only; all boundary nodes are set to 0. Compiled without
    fastmath so the sum is evaluated left to right, as written.
    """
    nx = qx.shape[0] - 1
    ny = qx.shape[1]
    for i in range(1, nx):
        for j in range(1, ny):
            out[i, j] = (qy[i, j] - qy[i - 1, j] - qx[i, j] + qx[i, j - 1]) * by_dx2
    _zero_boundary(out)


@njit(cache=True)
def curl_scalar_kernel(f: np.ndarray, qx: np.ndarray, qy: np.ndarray):
    """Edge curl of a node field (no dx scaling).

    qX(i,j) = f(i,j+1) - f(i,j),  qY(i,j) = f(i,j) - f(i+1,j)
    """
    nx = f.shape[0] - 1
    ny = f.shape[1] - 1
    for i in range(nx + 1):
        for j in range(ny):
            qx[i, j] = f[i, j + 1] - f[i, j]
    for i in range(nx):
        for j in range(ny + 1):
            qy[i, j] = f[i, j] - f[i + 1, j]


@njit(cache=True, fastmath=True)
def divergence_kernel(qx: np.ndarray, qy: np.ndarray, out: np.ndarray, scale: float):
    """Node divergence of a flux, centred difference of the node velocities.

    Equivalent to (u(i+1,j) - u(i-1,j) + v(i,j+1) - v(i,j-1)) / (2 dx) with
    u, v from flux_to_x_velocity_kernel / flux_to_y_velocity_kernel, which
    gives ``scale = 1 / (4 dx^2)``. Boundary nodes are set to 0.
    """
    nx = qx.shape[0] - 1
    ny = qx.shape[1]
    for i in range(1, nx):
        for j in range(1, ny):
            du = qx[i + 1, j] + qx[i + 1, j - 1] - qx[i - 1, j] - qx[i - 1, j - 1]
            dv = qy[i, j + 1] + qy[i - 1, j + 1] - qy[i, j - 1] - qy[i - 1, j - 1]
            out[i, j] = (du + dv) * scale
    _zero_boundary(out)


@njit(cache=True, fastmath=True)
def laplacian_kernel(f: np.ndarray, out: np.ndarray, by_dx2: float):
    """5-point Laplacian at interior nodes with homogeneous Dirichlet values.

    Boundary nodes of ``f`` are read as 0, so this is exactly the operator
    diagonalised by the DST-I of the interior. Boundary of ``out`` set to 0.
    """
    nx = f.shape[0] - 1
    ny = f.shape[1] - 1
    for i in range(1, nx):
        for j in range(1, ny):
            left = f[i - 1, j] if i > 1 else 0.0
            right = f[i + 1, j] if i < nx - 1 else 0.0
            down = f[i, j - 1] if j > 1 else 0.0
            up = f[i, j + 1] if j < ny - 1 else 0.0
            out[i, j] = (right + left + up + down - 4.0 * f[i, j]) * by_dx2
    _zero_boundary(out)


@njit(cache=True, fastmath=True)
def flux_to_x_velocity_kernel(qx: np.ndarray, u: np.ndarray, one_over_2dx: float):
    """Average X-fluxes onto nodes; one-sided (doubled sample) at j=0 and j=ny."""
    nx = qx.shape[0] - 1
    ny = qx.shape[1]
    for i in range(nx + 1):
        for j in range(1, ny):
            u[i, j] = (qx[i, j] + qx[i, j - 1]) * one_over_2dx
        u[i, 0] = qx[i, 0] * 2.0 * one_over_2dx
        u[i, ny] = qx[i, ny - 1] * 2.0 * one_over_2dx


@njit(cache=True, fastmath=True)
def flux_to_y_velocity_kernel(qy: np.ndarray, v: np.ndarray, one_over_2dx: float):
    """Average Y-fluxes onto nodes; one-sided (doubled sample) at i=0 and i=nx."""
    nx = qy.shape[0]
    ny = qy.shape[1] - 1
    for j in range(ny + 1):
        for i in range(1, nx):
            v[i, j] = (qy[i, j] + qy[i - 1, j]) * one_over_2dx
        v[0, j] = qy[0, j] * 2.0 * one_over_2dx
        v[nx, j] = qy[nx - 1, j] * 2.0 * one_over_2dx


@njit(cache=True, fastmath=True)
def x_velocity_to_flux_kernel(u: np.ndarray, qx: np.ndarray, dx_over_2: float):
    nx = u.shape[0] - 1
    ny = u.shape[1] - 1
    for i in range(nx + 1):
        for j in range(ny):
            qx[i, j] = (u[i, j] + u[i, j + 1]) * dx_over_2


@njit(cache=True, fastmath=True)
def y_velocity_to_flux_kernel(v: np.ndarray, qy: np.ndarray, dx_over_2: float):
    nx = v.shape[0] - 1
    ny = v.shape[1] - 1
    for i in range(nx):
        for j in range(ny + 1):
            qy[i, j] = (v[i, j] + v[i + 1, j]) * dx_over_2
