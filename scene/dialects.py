# -*- coding: utf-8 -*-
# usvg-scenes/scene/dialects.py

"""
Project: usvg-scenes
Date: 3/3/2026

Purpose:
--------
Closed set of document dialects behind one parse contract, plus the routing that picks
a dialect from the document's first line. Selection happens once, before any element
traversal.

Dialects:
---------
| First line                | Dialect   | Root container                          | Swap |
|---------------------------|-----------|-----------------------------------------|------|
| <!DOCTYPE SceneXML>       | unified   | `scene` with optional curve_set,        | no   |
|                           |           | poisson_curve_set, mesh_set children    |      |
| <!DOCTYPE CurveSetXML>    | curve-set | document root is the curve set          | x/y, |
|                           |           |                                         | R/B  |

Notes:
------
- The curve-set dialect stores axes and red/blue channels transposed and mirrors the
  curve sides; it is read with swapping enabled.
- Failures inside a section are re-raised with the section tag in their context.
"""

from abc import ABC, abstractmethod
import logging
from typing import Callable, Dict, List, Tuple, TypeVar
import xml.etree.ElementTree as ET

from .errors import MissingSection, SceneError, UnrecognizedDialect
from .model import Scene
from .readers._attrs import query_int
from .readers.curves import read_diffusion_curves, read_poisson_curves
from .readers.meshes import read_gradient_meshes

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "Dialect",
    "UnifiedDialect",
    "CurveSetDialect",
    "DIALECTS",
    "get_dialect",
]


def _image_size(element: ET.Element) -> Tuple[int, int]:
    return query_int(element, "image_width"), query_int(element, "image_height")


def _read_section(tag: str, reader: Callable[..., List[T]], element: ET.Element, **kwargs) -> List[T]:
    try:
        records = reader(element, **kwargs)
    except SceneError as exc:
        raise exc.with_context(section=tag) from exc
    logger.debug("[%s] %d record(s) read", tag, len(records))
    return records


class Dialect(ABC):
    """
    One scene document dialect.

    Attributes
    ----------
    name : str
        Short identifier used in logs.
    marker : str
        Exact first line that selects this dialect.
    """
    name = ""
    marker = ""

    @abstractmethod
    def parse(self, root: ET.Element) -> Scene:
        """
        Build a Scene from the document root element.

        Raises
        ------
        SceneError
            First failure encountered; no partial scene is returned.
        """


class UnifiedDialect(Dialect):
    """`scene` root with independent, optional curve / Poisson / mesh sections."""
    name = "unified"
    marker = "<!DOCTYPE SceneXML>"

    def parse(self, root: ET.Element) -> Scene:
        if root.tag != "scene":
            raise MissingSection("Cannot find scene in XML file", {"tag": "scene", "found": root.tag})

        width, height = _image_size(root)
        size = (width, height)

        diffusion_curves = []
        curve_set = root.find("curve_set")
        if curve_set is not None:
            diffusion_curves = _read_section(
                "curve_set", read_diffusion_curves, curve_set, swap=False, image_size=size
            )

        poisson_curves = []
        poisson_set = root.find("poisson_curve_set")
        if poisson_set is not None:
            poisson_curves = _read_section(
                "poisson_curve_set", read_poisson_curves, poisson_set, image_size=size
            )

        gradient_meshes = []
        mesh_set = root.find("mesh_set")
        if mesh_set is not None:
            gradient_meshes = _read_section("mesh_set", read_gradient_meshes, mesh_set, image_size=size)

        return Scene(
            width=width,
            height=height,
            diffusion_curves=diffusion_curves,
            poisson_curves=poisson_curves,
            gradient_meshes=gradient_meshes,
        )


class CurveSetDialect(Dialect):
    """Legacy curve-only files: the root element is the curve set, stored transposed."""
    name = "curve-set"
    marker = "<!DOCTYPE CurveSetXML>"
    swap = True

    def parse(self, root: ET.Element) -> Scene:
        width, height = _image_size(root)
        diffusion_curves = _read_section(
            root.tag, read_diffusion_curves, root, swap=self.swap, image_size=(width, height)
        )
        return Scene(width=width, height=height, diffusion_curves=diffusion_curves)


DIALECTS: Dict[str, Dialect] = {
    d.marker: d for d in (UnifiedDialect(), CurveSetDialect())
}


def get_dialect(marker: str) -> Dialect:
    """
    Route a document's first line to its dialect.

    Raises
    ------
    UnrecognizedDialect
        If `marker` is not one of the known first lines.
    """
    dialect = DIALECTS.get(marker)
    if dialect is None:
        raise UnrecognizedDialect(
            "Unrecognized DOCTYPE in XML",
            {"marker": marker, "known": sorted(DIALECTS)},
        )
    return dialect
