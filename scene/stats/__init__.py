# -*- coding: utf-8 -*-
# usvg-scenes/scene/stats/__init__.py

"""
Project: usvg-scenes
Date: 3/4/2026

Modules:
--------
- report:  Scene → summary dict (counts, sample totals, boundary conditions, bbox).
- export:  summary dict → JSON / flat key,value CSV.
"""

__all__ = ["report", "export"]
