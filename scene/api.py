# -*- coding: utf-8 -*-
# usvg-scenes/scene/api.py

"""
Project: usvg-scenes
Date: 3/4/2026

Purpose
-------
Thin, import-only façade for scene workflows: load one document, load several, or
load-and-summarize for quick inspection.

Notes
-----
- Detailed behavior lives in `loader`, `dialects` and `readers`.
- Every helper is all-or-nothing: the first failure propagates as a SceneError.
"""

from typing import Any, Dict, Iterable, List

from .loader import SceneLoader
from .model import Scene
from .stats.report import summarize

__all__ = ["load_scene", "load_scenes", "describe"]


def load_scene(filename: str, *, encoding: str = "utf-8") -> Scene:
    """
    Load one scene document.

    Args
    ----
    filename : str
        Path to a `.xml` (or `.xml.gz`) scene document.
    encoding : str, optional
        Text encoding of the document (default: "utf-8").

    Returns
    -------
    Scene
        Fully-populated scene.
    """
    return SceneLoader(filename, encoding=encoding).load()


def load_scenes(filenames: Iterable[str], *, encoding: str = "utf-8") -> List[Scene]:
    """Load several documents independently, in order; the first failure aborts."""
    return [load_scene(f, encoding=encoding) for f in filenames]


def describe(filename: str, *, encoding: str = "utf-8") -> Dict[str, Any]:
    """Load a document and return its summary dictionary."""
    return summarize(load_scene(filename, encoding=encoding))
