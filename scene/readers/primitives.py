# -*- coding: utf-8 -*-
# usvg-scenes/scene/readers/primitives.py

"""
Project: usvg-scenes
Date: 3/2/2026

Purpose:
--------
Read fixed-length homogeneous sequences of sibling elements (points, colors, colors at a
parameter location) into NumPy arrays and apply the format-normalization rules uniformly.

Main Tasks:
-----------
   1) read_points:       (N, 2) from `x`/`y`, optional image scaling and x/y swap.
   2) read_colors:       (N, 3) from `R`/`G`/`B` (0..255) or `r`/`g`/`b` (0..1), optional R/B swap.
   3) read_color_points: (N, 4) colors plus `globalID` as t, with a sequence-wide
                         rescale of t when any value exceeds 1.

Notes:
------
- Normalized points scale x by the image HEIGHT and y by the image WIDTH. This matches
  the scene files in the wild; do not "fix" it.
- The uppercase/lowercase choice is made per channel, by attribute presence.
- Order is kept as read; parameter values are never sorted.
"""

from typing import Tuple
import xml.etree.ElementTree as ET
import numpy as np

from ._attrs import iter_children, query_float

__all__ = ["read_points", "read_colors", "read_color_points", "decode_channels", "CHANNEL_SCALE"]

# Uppercase channels are stored in 0..255
CHANNEL_SCALE = 255.0

_CHANNELS = (("R", "r"), ("G", "g"), ("B", "b"))


def decode_channels(element: ET.Element, swap: bool = False) -> Tuple[float, float, float]:
    """
    Decode one (r, g, b) triple from `element`.

    For each channel independently: if the uppercase attribute is present its value is
    divided by 255, otherwise the lowercase attribute is taken as-is (0.0 if absent).

    Parameters
    ----------
    element : ET.Element
        Color-carrying element.
    swap : bool
        Exchange the first and third channel after decoding.
    """
    rgb = []
    for upper, lower in _CHANNELS:
        if element.get(upper) is not None:
            rgb.append(query_float(element, upper) / CHANNEL_SCALE)
        else:
            rgb.append(query_float(element, lower))
    if swap:
        rgb[0], rgb[2] = rgb[2], rgb[0]
    return rgb[0], rgb[1], rgb[2]


def read_points(
    parent: ET.Element,
    child_tag: str,
    count: int,
    *,
    is_normalized: bool = False,
    swap: bool = False,
    image_size: Tuple[int, int] = (0, 0),
) -> np.ndarray:
    """
    Read `count` consecutive `child_tag` siblings as 2D points.

    Parameters
    ----------
    parent : ET.Element
        Container element.
    child_tag : str
        Tag of the point elements (e.g., "control_point", "position").
    count : int
        Declared number of points.
    is_normalized : bool
        Coordinates are in [0, 1]: x is scaled by image height, y by image width.
    swap : bool
        Exchange x and y (after scaling).
    image_size : (int, int)
        (width, height) of the scene image.

    Returns
    -------
    np.ndarray
        (count, 2) float64 array.

    Raises
    ------
    MissingElement
        If the first sibling is absent or the siblings run out before `count`.
    """
    width, height = image_size
    rows = []
    for child in iter_children(parent, child_tag, count):
        x = query_float(child, "x")
        y = query_float(child, "y")
        if is_normalized:
            x *= height
            y *= width
        rows.append((y, x) if swap else (x, y))
    return np.asarray(rows, dtype=np.float64).reshape(-1, 2)


def read_colors(parent: ET.Element, child_tag: str, count: int, *, swap: bool = False) -> np.ndarray:
    """
    Read `count` consecutive `child_tag` siblings as (r, g, b) colors in [0, 1].

    Returns
    -------
    np.ndarray
        (count, 3) float64 array.
    """
    rows = [decode_channels(child, swap) for child in iter_children(parent, child_tag, count)]
    return np.asarray(rows, dtype=np.float64).reshape(-1, 3)


def read_color_points(parent: ET.Element, child_tag: str, count: int, *, swap: bool = False) -> np.ndarray:
    """
    Read `count` consecutive `child_tag` siblings as (r, g, b, t) color points.

    `t` comes from `globalID`. After the whole sequence is read, if the largest t
    above 1 is M, every t is divided by M; sequences already within [0, 1] are untouched.

    Returns
    -------
    np.ndarray
        (count, 4) float64 array.
    """
    rows = []
    for child in iter_children(parent, child_tag, count):
        r, g, b = decode_channels(child, swap)
        rows.append((r, g, b, query_float(child, "globalID")))
    out = np.asarray(rows, dtype=np.float64).reshape(-1, 4)

    t = out[:, 3]
    over = t[t > 1.0]
    if over.size:
        out[:, 3] = t / over.max()
    return out
