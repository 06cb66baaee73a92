# -*- coding: utf-8 -*-
# usvg-scenes/scene/loader.py

"""
Project: usvg-scenes
Date: 3/3/2026

Purpose:
--------
Top-level scene loading: read the document, pick the dialect from its first line, and
run the dialect parser to produce one fully-populated Scene, or fail as a whole.

Pipeline:
---------
read_document() → (marker, root) → get_dialect(marker) → dialect.parse(root) → Scene

Notes:
------
- One load, one outcome: the first SceneError aborts the load and reaches the caller with
  the source path merged into its context (the original error is chained as __cause__).
- Loads share no state; independent threads may load independent documents.
"""

import logging
import os
from typing import Any, Dict, Optional
import xml.etree.ElementTree as ET

from .dialects import get_dialect
from .errors import SceneError
from .formats import parse_document, read_document
from .model import Scene

logger = logging.getLogger(__name__)

__all__ = ["SceneLoader", "parse_scene", "build_scene"]


def build_scene(marker: str, root: ET.Element, source: str = "<string>") -> Scene:
    """
    Dispatch an already-parsed document to its dialect.

    Raises
    ------
    SceneError
        UnrecognizedDialect for an unknown marker, or the first parse failure;
        either way with `path=source` in its context.
    """
    try:
        dialect = get_dialect(marker)
        scene = dialect.parse(root)
    except SceneError as exc:
        raise exc.with_context(path=source) from exc

    logger.info(
        "[SceneLoader] Loaded '%s' (%s): %dx%d, %d diffusion curve(s), "
        "%d Poisson curve(s), %d gradient mesh(es).",
        source, dialect.name, scene.width, scene.height,
        len(scene.diffusion_curves), len(scene.poisson_curves), len(scene.gradient_meshes),
    )
    return scene


def parse_scene(text: str, source: str = "<string>") -> Scene:
    """
    Load a scene from a document held in memory.

    Parameters
    ----------
    text : str
        Whole document; its first line selects the dialect.
    source : str
        Label used in error context and logs.
    """
    marker, root = parse_document(text, source=source)
    return build_scene(marker, root, source=source)


class SceneLoader:
    """
    File-bound scene loader.

    Parameters
    ----------
    filename : str
        Path to the scene document (`.xml`, or `.xml.gz`).
    encoding : str
        Text encoding of the document.

    Attributes
    ----------
    name : str
        Basename without extension(s).
    scene : Optional[Scene]
        Loaded scene, set by `load()`.
    """

    def __init__(self, filename: str, encoding: str = "utf-8"):
        self.filename = filename
        self.encoding = encoding
        base = os.path.basename(filename)
        if base.lower().endswith(".gz"):
            base = base[:-3]
        self.name = os.path.splitext(base)[0]
        self.scene: Optional[Scene] = None

    def load(self) -> Scene:
        """
        Read, dispatch and parse the document into `self.scene`.

        Raises
        ------
        ResourceUnavailable, MalformedDocument, UnrecognizedDialect,
        MissingSection, MissingElement, CountMismatch
        """
        marker, root = read_document(self.filename, encoding=self.encoding)
        self.scene = build_scene(marker, root, source=self.filename)
        return self.scene

    def summary(self) -> Dict[str, Any]:
        """Summary of the loaded scene (see `scene.stats.report.summarize`)."""
        if self.scene is None:
            raise ValueError("[SceneLoader] No scene loaded. Call `.load()` first.")
        from .stats.report import summarize
        return summarize(self.scene)
