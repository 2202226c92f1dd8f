"""Field containers: node Scalars, edge Fluxes and boundary-point vectors."""

from .base import GridField
from .scalar import Scalar
from .flux import Flux, X, Y
from .boundary_vector import BoundaryVector

__all__ = [
    "GridField",
    "Scalar",
    "Flux",
    "X",
    "Y",
    "BoundaryVector",
]
