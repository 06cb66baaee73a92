# -*- coding: utf-8 -*-
# usvg-scenes/scene/readers/__init__.py

"""
Project: usvg-scenes
Date: 3/2/2026

Readers Subpackage:
-------------------
Element-level readers that turn scene XML elements into model records.

Modules:
--------
- primitives: Fixed-length sequences of points, colors and color points, with image
              scaling, x/y and R/B swapping, and parameter (`globalID`) normalization.

- curves:     Diffusion curves (two sides + boundary conditions) and Poisson curves.

- meshes:     Gradient meshes with the (rows+1)*(cols+1) count cross-check and
              optional tangents.

- _attrs:     Shared attribute queries and child/set walking helpers.

Notes:
------
- Readers raise SceneError subclasses at the first failure; nothing is recovered here.
"""

from .primitives import read_points, read_colors, read_color_points
from .curves import (
    read_diffusion_curve,
    read_diffusion_curves,
    read_poisson_curve,
    read_poisson_curves,
)
from .meshes import read_gradient_mesh, read_gradient_meshes

__all__ = [
    "read_points", "read_colors", "read_color_points",
    "read_diffusion_curve", "read_diffusion_curves",
    "read_poisson_curve", "read_poisson_curves",
    "read_gradient_mesh", "read_gradient_meshes",
]
