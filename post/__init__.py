# -*- coding: utf-8 -*-
# usvg-scenes/post/__init__.py

"""
Project: usvg-scenes
Date: 3/5/2026

Modules:
--------
- plot_scene:  Wireframe preview of loaded scenes (curves, Poisson curves, mesh lattices).
               Wraps matplotlib; headless-safe backend selection.
"""

__all__ = ["plot_scene"]
