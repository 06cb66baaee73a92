# -*- coding: utf-8 -*-
# usvg-scenes/scene/model.py

"""
Project: usvg-scenes
Date: 3/2/2026

Purpose:
--------
In-memory scene model handed to renderers: diffusion curves, Poisson curves and gradient
meshes plus the image size they were authored for. Every record is an immutable value
built once by the readers.

Array conventions:
------------------
- points       : (N, 2) float64, columns (x, y)
- colors       : (N, 3) float64, columns (r, g, b) in [0, 1]
- color points : (N, 4) float64, columns (r, g, b, t) with t in [0, 1]

Notes:
------
- Arrays are copied on construction and flagged read-only.
- Equality is field-by-field (exact array equality, NaN equal to NaN), so loading the same document twice
  yields equal scenes.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Tuple
import numpy as np

__all__ = [
    "BoundaryCondition",
    "DiffusionCurve",
    "PoissonCurve",
    "GradientMesh",
    "Scene",
]


class BoundaryCondition(Enum):
    """Constraint applied at a curve side when solving the diffusion equation."""
    NEUMANN = "Neumann"
    DIRICHLET = "Dirichlet"


def _frozen(values, ncols: int, name: str) -> np.ndarray:
    """
    Copy `values` into a read-only (N, ncols) float64 array.

    Raises
    ------
    ValueError
        If the data cannot be shaped as (N, ncols).
    """
    arr = np.array(values, dtype=np.float64)
    if arr.size == 0:
        arr = arr.reshape(0, ncols)
    if arr.ndim != 2 or arr.shape[1] != ncols:
        raise ValueError("Expected (N,{}) array for {}, got shape {}.".format(ncols, name, arr.shape))
    arr.flags.writeable = False
    return arr


def _records_equal(a, b) -> bool:
    if type(a) is not type(b):
        return NotImplemented
    for f in fields(a):
        va = getattr(a, f.name)
        vb = getattr(b, f.name)
        if isinstance(va, np.ndarray):
            if not np.array_equal(va, vb, equal_nan=True):
                return False
        elif va != vb:
            return False
    return True


@dataclass(frozen=True, eq=False)
class DiffusionCurve:
    """
    Curve with independent color gradients along its left and right sides.

    Attributes
    ----------
    control_points : np.ndarray
        (N, 2) control polyline.
    colors_left, colors_right : np.ndarray
        (M, 4) color samples (r, g, b, t), kept in document order.
    boundary_left, boundary_right : BoundaryCondition
        Per-side boundary condition (Dirichlet unless the document says Neumann).
    """
    control_points: np.ndarray
    colors_left: np.ndarray
    colors_right: np.ndarray
    boundary_left: BoundaryCondition = BoundaryCondition.DIRICHLET
    boundary_right: BoundaryCondition = BoundaryCondition.DIRICHLET

    def __post_init__(self):
        object.__setattr__(self, "control_points", _frozen(self.control_points, 2, "control_points"))
        object.__setattr__(self, "colors_left", _frozen(self.colors_left, 4, "colors_left"))
        object.__setattr__(self, "colors_right", _frozen(self.colors_right, 4, "colors_right"))

    def __eq__(self, other):
        return _records_equal(self, other)


@dataclass(frozen=True, eq=False)
class PoissonCurve:
    """
    Curve carrying Laplacian weights at parameter locations instead of colors.
    `weights` shares the (M, 4) color-point layout.
    """
    control_points: np.ndarray
    weights: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "control_points", _frozen(self.control_points, 2, "control_points"))
        object.__setattr__(self, "weights", _frozen(self.weights, 4, "weights"))

    def __eq__(self, other):
        return _records_equal(self, other)


@dataclass(frozen=True, eq=False)
class GradientMesh:
    """
    Regular grid of control points with position, color and optional tangents.

    Attributes
    ----------
    num_rows, num_cols : int
        Patch counts; the lattice holds (num_rows+1)*(num_cols+1) vertices.
    positions : np.ndarray
        (V, 2) row-major vertex positions.
    colors : np.ndarray
        (V, 3) vertex colors.
    tangents_u, tangents_v : np.ndarray
        (V, 2) tangents, or both (0, 2) when the mesh carries none.
    """
    num_rows: int
    num_cols: int
    positions: np.ndarray
    colors: np.ndarray
    tangents_u: np.ndarray = field(default_factory=lambda: np.empty((0, 2)))
    tangents_v: np.ndarray = field(default_factory=lambda: np.empty((0, 2)))

    def __post_init__(self):
        object.__setattr__(self, "positions", _frozen(self.positions, 2, "positions"))
        object.__setattr__(self, "colors", _frozen(self.colors, 3, "colors"))
        object.__setattr__(self, "tangents_u", _frozen(self.tangents_u, 2, "tangents_u"))
        object.__setattr__(self, "tangents_v", _frozen(self.tangents_v, 2, "tangents_v"))

        n = self.positions.shape[0]
        if self.colors.shape[0] != n:
            raise ValueError("Mesh has {} positions but {} colors.".format(n, self.colors.shape[0]))
        nu, nv = self.tangents_u.shape[0], self.tangents_v.shape[0]
        if (nu, nv) != (0, 0) and (nu, nv) != (n, n):
            raise ValueError(
                "Mesh tangents must be absent together or match the {} positions "
                "(got U={}, V={}).".format(n, nu, nv)
            )

    def __eq__(self, other):
        return _records_equal(self, other)

    @property
    def vertex_count(self) -> int:
        """Number of lattice vertices, (rows+1)*(cols+1)."""
        return (self.num_rows + 1) * (self.num_cols + 1)

    @property
    def has_tangents(self) -> bool:
        return self.tangents_u.shape[0] > 0


@dataclass(frozen=True, eq=False)
class Scene:
    """Vector graphics scene: image size plus the three primitive collections."""
    width: int = 0
    height: int = 0
    diffusion_curves: Tuple[DiffusionCurve, ...] = ()
    poisson_curves: Tuple[PoissonCurve, ...] = ()
    gradient_meshes: Tuple[GradientMesh, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "diffusion_curves", tuple(self.diffusion_curves))
        object.__setattr__(self, "poisson_curves", tuple(self.poisson_curves))
        object.__setattr__(self, "gradient_meshes", tuple(self.gradient_meshes))

    def __eq__(self, other):
        return _records_equal(self, other)

    @property
    def is_empty(self) -> bool:
        return not (self.diffusion_curves or self.poisson_curves or self.gradient_meshes)
