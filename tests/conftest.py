"""Shared fixtures: small scene documents built from XML snippets."""
from __future__ import annotations

import gzip
import xml.etree.ElementTree as ET

import pytest

UNIFIED = "<!DOCTYPE SceneXML>"
LEGACY = "<!DOCTYPE CurveSetXML>"


@pytest.fixture()
def element():
    """Parse an XML snippet into an Element."""
    def _element(xml: str) -> ET.Element:
        return ET.fromstring(xml)
    return _element


@pytest.fixture()
def unified_doc():
    """Wrap section XML into a unified-dialect document."""
    def _doc(body: str = "", width: int = 200, height: int = 100) -> str:
        return '{}\n<scene image_width="{}" image_height="{}">\n{}\n</scene>\n'.format(
            UNIFIED, width, height, body
        )
    return _doc


@pytest.fixture()
def write_doc(tmp_path):
    """Write a document to tmp_path (gzip-compressed when the name ends in .gz)."""
    def _write(text: str, name: str = "scene.xml") -> str:
        path = tmp_path / name
        if name.endswith(".gz"):
            with gzip.open(str(path), "wt", encoding="utf-8", newline="") as f:
                f.write(text)
        else:
            with open(str(path), "w", encoding="utf-8", newline="") as f:
                f.write(text)
        return str(path)
    return _write


@pytest.fixture()
def diffusion_curve_xml():
    """One `curve` element with one control point and one color per side."""
    def _curve(
        x: float = 3, y: float = 5,
        left: str = 'R="255" G="0" B="0" globalID="0"',
        right: str = 'r="0" g="1" b="0" globalID="0"',
        left_boundary: str = "",
        right_boundary: str = "",
    ) -> str:
        lb = ' boundary="{}"'.format(left_boundary) if left_boundary else ""
        rb = ' boundary="{}"'.format(right_boundary) if right_boundary else ""
        return (
            '<curve nb_control_points="1" nb_left_colors="1" nb_right_colors="1">'
            '<control_points_set><control_point x="{x}" y="{y}"/></control_points_set>'
            '<left_colors_set{lb}><left_color {left}/></left_colors_set>'
            '<right_colors_set{rb}><right_color {right}/></right_colors_set>'
            '</curve>'
        ).format(x=x, y=y, left=left, right=right, lb=lb, rb=rb)
    return _curve
