# -*- coding: utf-8 -*-
# usvg-scenes/scene/stats/report.py

"""
Project: usvg-scenes
Date: 3/4/2026

Purpose:
--------
Compact, structured summary of a loaded Scene, ready for logging or export (CSV/JSON):
image size, per-primitive counts and sample totals, boundary conditions, and the
bounding box of all geometry.

Summary layout:
---------------
    {
      "image":            {"width": int, "height": int},
      "diffusion_curves": {"count", "control_points", "colors_left", "colors_right",
                           "neumann_sides"},
      "poisson_curves":   {"count", "control_points", "weights"},
      "gradient_meshes":  {"count", "vertices", "with_tangents"},
      "bbox":             [xmin, xmax, ymin, ymax] or None for a geometry-free scene,
    }
"""

from typing import Any, Dict, List, Optional
import numpy as np

from ..model import BoundaryCondition, Scene

__all__ = ["summarize", "bounding_box"]


def bounding_box(scene: Scene) -> Optional[List[float]]:
    """
    (xmin, xmax, ymin, ymax) over curve control points and mesh positions.
    Tangents are directions, not positions, and are left out.
    """
    blocks = [c.control_points for c in scene.diffusion_curves]
    blocks += [c.control_points for c in scene.poisson_curves]
    blocks += [m.positions for m in scene.gradient_meshes]
    blocks = [b for b in blocks if b.shape[0]]
    if not blocks:
        return None
    pts = np.vstack(blocks)
    return [
        float(np.min(pts[:, 0])), float(np.max(pts[:, 0])),
        float(np.min(pts[:, 1])), float(np.max(pts[:, 1])),
    ]


def summarize(scene: Scene) -> Dict[str, Any]:
    """
    Build the summary dictionary for `scene`.

    Parameters
    ----------
    scene : Scene
        Loaded scene.

    Returns
    -------
    Dict[str, Any]
        Plain Python scalars/lists only (JSON-serializable as is).
    """
    dcs = scene.diffusion_curves
    pcs = scene.poisson_curves
    meshes = scene.gradient_meshes

    neumann = sum(
        (c.boundary_left is BoundaryCondition.NEUMANN) + (c.boundary_right is BoundaryCondition.NEUMANN)
        for c in dcs
    )

    return {
        "image": {"width": int(scene.width), "height": int(scene.height)},
        "diffusion_curves": {
            "count": len(dcs),
            "control_points": sum(c.control_points.shape[0] for c in dcs),
            "colors_left": sum(c.colors_left.shape[0] for c in dcs),
            "colors_right": sum(c.colors_right.shape[0] for c in dcs),
            "neumann_sides": int(neumann),
        },
        "poisson_curves": {
            "count": len(pcs),
            "control_points": sum(c.control_points.shape[0] for c in pcs),
            "weights": sum(c.weights.shape[0] for c in pcs),
        },
        "gradient_meshes": {
            "count": len(meshes),
            "vertices": sum(m.positions.shape[0] for m in meshes),
            "with_tangents": sum(1 for m in meshes if m.has_tangents),
        },
        "bbox": bounding_box(scene),
    }
