# -*- coding: utf-8 -*-
# usvg-scenes/scene/readers/curves.py

"""
Project: usvg-scenes
Date: 3/2/2026

Purpose:
--------
Assemble diffusion curves and Poisson curves from their XML elements.

Main Tasks:
-----------
   1) Diffusion curve: control points, left/right color points, per-side boundary condition.
   2) Poisson curve: control points and Laplacian weights (no sides, no boundary).
   3) Curve sets: walk the `nb_curves` consecutive curve elements of a set.

Notes:
------
- `swap` is the legacy-layout switch: x/y and R/B are exchanged at read time, and the two
  sides (colors and boundary conditions) are exchanged after reading.
- Poisson control points are never swapped.
"""

from typing import List, Tuple
import xml.etree.ElementTree as ET
import numpy as np

from ..model import BoundaryCondition, DiffusionCurve, PoissonCurve
from ._attrs import query_int, read_records, require_child
from .primitives import read_color_points, read_points

__all__ = [
    "parse_boundary",
    "read_diffusion_curve",
    "read_diffusion_curves",
    "read_poisson_curve",
    "read_poisson_curves",
]


def parse_boundary(color_set: ET.Element) -> BoundaryCondition:
    """`boundary="Neumann"` selects Neumann; anything else, or no attribute, is Dirichlet."""
    if color_set.get("boundary") == BoundaryCondition.NEUMANN.value:
        return BoundaryCondition.NEUMANN
    return BoundaryCondition.DIRICHLET


def _read_side(
    curve_el: ET.Element, side: str, index: int, swap: bool
) -> Tuple[BoundaryCondition, np.ndarray]:
    # side: "left" | "right"
    count = query_int(curve_el, "nb_{}_colors".format(side))
    color_set = require_child(
        curve_el,
        "{}_colors_set".format(side),
        "{} colors of diffusion curve {}".format(side, index),
    )
    boundary = parse_boundary(color_set)
    colors = read_color_points(color_set, "{}_color".format(side), count, swap=swap)
    return boundary, colors


def read_diffusion_curve(
    curve_el: ET.Element,
    index: int,
    *,
    swap: bool = False,
    image_size: Tuple[int, int] = (0, 0),
) -> DiffusionCurve:
    """
    Build one DiffusionCurve from a `curve` element.

    Parameters
    ----------
    curve_el : ET.Element
        The `curve` element.
    index : int
        Position of the curve within its set (used in error messages).
    swap : bool
        Legacy layout: swap x/y, R/B, and the left/right sides.
    image_size : (int, int)
        (width, height) of the scene.

    Raises
    ------
    MissingSection
        If `control_points_set`, `left_colors_set` or `right_colors_set` is absent.
    MissingElement
        If a declared-count sequence runs short.
    """
    num_points = query_int(curve_el, "nb_control_points")
    point_set = require_child(
        curve_el, "control_points_set", "control points of diffusion curve {}".format(index)
    )
    control_points = read_points(
        point_set, "control_point", num_points, swap=swap, image_size=image_size
    )

    boundary_left, colors_left = _read_side(curve_el, "left", index, swap)
    boundary_right, colors_right = _read_side(curve_el, "right", index, swap)

    # Legacy files describe the sides mirrored
    if swap:
        colors_left, colors_right = colors_right, colors_left
        boundary_left, boundary_right = boundary_right, boundary_left

    return DiffusionCurve(
        control_points=control_points,
        colors_left=colors_left,
        colors_right=colors_right,
        boundary_left=boundary_left,
        boundary_right=boundary_right,
    )


def read_poisson_curve(
    curve_el: ET.Element, index: int, *, image_size: Tuple[int, int] = (0, 0)
) -> PoissonCurve:
    """Build one PoissonCurve from a `poisson_curve` element."""
    num_points = query_int(curve_el, "nb_control_points")
    point_set = require_child(
        curve_el, "control_points_set", "control points of Poisson curve {}".format(index)
    )
    control_points = read_points(point_set, "control_point", num_points, image_size=image_size)

    num_weights = query_int(curve_el, "nb_weights")
    weight_set = require_child(curve_el, "weights_set", "weights of Poisson curve {}".format(index))
    weights = read_color_points(weight_set, "weight", num_weights)

    return PoissonCurve(control_points=control_points, weights=weights)


def read_diffusion_curves(
    set_el: ET.Element, *, swap: bool = False, image_size: Tuple[int, int] = (0, 0)
) -> List[DiffusionCurve]:
    """Read the `nb_curves` consecutive `curve` children of a curve set."""
    return read_records(
        set_el, "nb_curves", "curve", "curve",
        lambda el, i: read_diffusion_curve(el, i, swap=swap, image_size=image_size),
    )


def read_poisson_curves(
    set_el: ET.Element, *, image_size: Tuple[int, int] = (0, 0)
) -> List[PoissonCurve]:
    """Read the `nb_curves` consecutive `poisson_curve` children of a Poisson curve set."""
    return read_records(
        set_el, "nb_curves", "poisson_curve", "curve",
        lambda el, i: read_poisson_curve(el, i, image_size=image_size),
    )
