# -*- coding: utf-8 -*-
# usvg-scenes/scene/readers/meshes.py

"""
Project: usvg-scenes
Date: 3/2/2026

Purpose:
--------
Assemble gradient meshes from `mesh` elements and enforce the count-vs-dimension
consistency of the lattice.

Main Tasks:
-----------
   1) Read rows/cols and the `normalized` flag; expected vertex count is (R+1)*(C+1).
   2) Cross-check `nb_positions` and `nb_colors` against it (CountMismatch otherwise).
   3) Read positions (image-scaled when normalized) and colors (never swapped).
   4) Read optional U/V tangents from `pos_tangent_set` with the position count/scaling.
"""

from typing import List, Tuple
import xml.etree.ElementTree as ET
import numpy as np

from ..errors import CountMismatch
from ..model import GradientMesh
from ._attrs import query_bool, query_int, read_records, require_child
from .primitives import read_colors, read_points

__all__ = ["read_gradient_mesh", "read_gradient_meshes"]


def _check_count(declared: int, expected: int, what: str, index: int) -> None:
    if declared != expected:
        raise CountMismatch(
            "Number of {} does not match the mesh size in mesh {}".format(what, index),
            {"declared": declared, "expected": expected, "tag": "nb_{}".format(what)},
        )


def read_gradient_mesh(
    mesh_el: ET.Element, index: int, *, image_size: Tuple[int, int] = (0, 0)
) -> GradientMesh:
    """
    Build one GradientMesh from a `mesh` element.

    Parameters
    ----------
    mesh_el : ET.Element
        The `mesh` element.
    index : int
        Position of the mesh within its set (used in error messages).
    image_size : (int, int)
        (width, height) of the scene, used when the mesh is `normalized`.

    Raises
    ------
    CountMismatch
        If `nb_positions` or `nb_colors` differs from (nb_rows+1)*(nb_cols+1).
    MissingSection
        If `position_set` or `color_set` is absent.
    MissingElement
        If a sequence runs short, including tangents when `pos_tangent_set` exists.
    """
    num_rows = query_int(mesh_el, "nb_rows")
    num_cols = query_int(mesh_el, "nb_cols")
    is_normalized = query_bool(mesh_el, "normalized")
    expected = (num_rows + 1) * (num_cols + 1)

    # -------------------- positions
    num_positions = query_int(mesh_el, "nb_positions")
    _check_count(num_positions, expected, "positions", index)
    position_set = require_child(mesh_el, "position_set", "positions of mesh {}".format(index))
    positions = read_points(
        position_set, "position", num_positions,
        is_normalized=is_normalized, image_size=image_size,
    )

    # -------------------- colors
    num_colors = query_int(mesh_el, "nb_colors")
    _check_count(num_colors, expected, "colors", index)
    color_set = require_child(mesh_el, "color_set", "colors of mesh {}".format(index))
    colors = read_colors(color_set, "color", num_colors)

    # -------------------- optional tangents
    tangents_u = np.empty((0, 2))
    tangents_v = np.empty((0, 2))
    tangent_set = mesh_el.find("pos_tangent_set")
    if tangent_set is not None:
        tangents_u = read_points(
            tangent_set, "positionU", num_positions,
            is_normalized=is_normalized, image_size=image_size,
        )
        tangents_v = read_points(
            tangent_set, "positionV", num_positions,
            is_normalized=is_normalized, image_size=image_size,
        )

    return GradientMesh(
        num_rows=num_rows,
        num_cols=num_cols,
        positions=positions,
        colors=colors,
        tangents_u=tangents_u,
        tangents_v=tangents_v,
    )


def read_gradient_meshes(
    set_el: ET.Element, *, image_size: Tuple[int, int] = (0, 0)
) -> List[GradientMesh]:
    """Read the `nb_meshes` consecutive `mesh` children of a mesh set."""
    return read_records(
        set_el, "nb_meshes", "mesh", "mesh",
        lambda el, i: read_gradient_mesh(el, i, image_size=image_size),
    )
