"""Discrete sine transform and fast Laplacian inverse for node Scalars.

The 5-point Laplacian with homogeneous Dirichlet boundary values is
diagonalised by the type-I discrete sine transform (DST-I) of the
(nx-1) x (ny-1) interior nodes. Mode (k, l), 1 <= k < nx, 1 <= l < ny, has
eigenvalue

    lambda_kl = -(4 / dx^2) * (sin^2(pi k / (2 nx)) + sin^2(pi l / (2 ny)))

which is strictly negative, so the inverse is

    forward DST  ->  divide by lambda_kl  ->  normalized inverse DST

The unnormalized DST-I applied twice scales by (2 nx)(2 ny), hence the
normalization factor 1 / (4 nx ny).
"""

from contextlib import ExitStack
from functools import lru_cache
import logging
from typing import Optional

import numpy as np
import scipy.fft

from ..fields import Scalar
from ..grid import Grid
from .kernels import laplacian_kernel

log = logging.getLogger(__name__)


class TransformWorkspace:
    """Scratch buffer and FFT worker setting scoped to one transform call.

    Use as a context manager. The buffer and the ``scipy.fft.set_workers``
    context are acquired on entry and released on exit, also when the body
    raises.

    Parameters
    ----------
    nx, ny : int
        Grid extents; the buffer holds the (nx-1) x (ny-1) interior.
    workers : int, optional
        Number of FFT workers (scipy convention, -1 for all CPUs).
        Defaults to the current scipy.fft setting.
    """

    def __init__(self, nx: int, ny: int, workers: Optional[int] = None):
        self.shape = (nx - 1, ny - 1)
        self.workers = workers
        self.buffer = None
        self._resources = None

    def __enter__(self) -> "TransformWorkspace":
        workers = self.workers if self.workers is not None else scipy.fft.get_workers()
        with ExitStack() as stack:
            stack.enter_context(scipy.fft.set_workers(workers))
            self.buffer = np.empty(self.shape)
            self._resources = stack.pop_all()
        log.debug(f"Acquired DST workspace {self.shape} with {workers} worker(s)")
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            self._resources.__exit__(exc_type, exc, tb)
        finally:
            self._resources = None
            self.buffer = None
        return False

    def execute(self) -> np.ndarray:
        """Unnormalized 2D DST-I of the buffer contents."""
        return scipy.fft.dstn(self.buffer, type=1, overwrite_x=True)


def sin_transform(
    f: Scalar,
    normalize: bool = False,
    workers: Optional[int] = None,
    out: Optional[Scalar] = None,
) -> Scalar:
    """2D DST-I of the interior nodes of ``f``.

    Parameters
    ----------
    f : Scalar
        Input field; boundary values are ignored.
    normalize : bool
        If True, divide by 4*nx*ny so that applying the transform twice
        (once with, once without normalization) is the identity.
    workers : int, optional
        FFT workers for this call.
    out : Scalar, optional
        Preallocated result; may be ``f`` itself.

    Returns
    -------
    Scalar
        Transformed field, exactly 0 on the boundary.
    """
    if out is None:
        out = Scalar(f.grid)
    elif out is not f:
        f.check_extents(out)

    with TransformWorkspace(f.nx, f.ny, workers) as ws:
        ws.buffer[...] = f.interior
        out.interior[...] = ws.execute()
    out.zero_boundary()

    if normalize:
        out *= 1.0 / (2 * f.nx * 2 * f.ny)
    return out


def sin_transform_inv(
    f: Scalar,
    normalize: bool = True,
    workers: Optional[int] = None,
    out: Optional[Scalar] = None,
) -> Scalar:
    """Inverse DST-I; DST-I is its own inverse up to the 1/(4 nx ny) factor."""
    return sin_transform(f, normalize=normalize, workers=workers, out=out)


@lru_cache(maxsize=16)
def laplacian_eigenvalues(grid: Grid) -> np.ndarray:
    """Eigenvalues of the Dirichlet 5-point Laplacian in the DST-I basis.

    Returns
    -------
    np.ndarray
        Read-only array of shape (nx-1, ny-1); entry [k-1, l-1] belongs to
        mode (k, l). All entries are strictly negative.
    """
    k = np.arange(1, grid.nx)
    l = np.arange(1, grid.ny)
    scale = -4.0 / (grid.dx * grid.dx)
    lam_x = scale * np.sin(np.pi * k / (2 * grid.nx)) ** 2
    lam_y = scale * np.sin(np.pi * l / (2 * grid.ny)) ** 2
    eigenvalues = lam_x[:, np.newaxis] + lam_y[np.newaxis, :]
    eigenvalues.setflags(write=False)
    log.debug(
        f"Built Laplacian eigenvalue table {eigenvalues.shape}, "
        f"range [{eigenvalues.min():.3e}, {eigenvalues.max():.3e}]"
    )
    return eigenvalues


def laplacian(f: Scalar, out: Optional[Scalar] = None) -> Scalar:
    """5-point Laplacian of ``f`` at interior nodes; boundary set to 0.

    Boundary values of ``f`` are read as 0 (homogeneous Dirichlet), so that
    ``laplacian_inverse(laplacian(f))`` returns ``f`` with its boundary zeroed.
    """
    if out is None:
        out = Scalar(f.grid)
    elif out is f:
        return out.assign(laplacian(f))
    else:
        f.check_extents(out)
    laplacian_kernel(f.data, out.data, 1.0 / (f.dx * f.dx))
    return out


def laplacian_inverse(
    f: Scalar, workers: Optional[int] = None, out: Optional[Scalar] = None
) -> Scalar:
    """Solve laplacian(s) = f on the interior with s = 0 on the boundary.

    Boundary values of ``f`` are ignored. ``out`` may be ``f`` itself; the
    solve then runs without allocating a new field.
    """
    s = sin_transform(f, workers=workers, out=out)
    s.interior[...] /= laplacian_eigenvalues(f.grid)
    sin_transform_inv(s, workers=workers, out=s)
    return s.zero_boundary()
