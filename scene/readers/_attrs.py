# -*- coding: utf-8 -*-
# usvg-scenes/scene/readers/_attrs.py

"""
Project: usvg-scenes
Date: 3/2/2026

Purpose:
--------
Shared attribute and child-lookup helpers for the element readers, so that every reader
applies the same defaulting rules to the scene documents.

Main Tasks:
-----------
   1) Query int / float / bool attributes, falling back to a default when the attribute
      is absent or unparsable.
   2) Locate a required child container, raising MissingSection.
   3) Iterate the first `count` siblings with a given tag, raising MissingElement when
      they run out.
   4) Walk a record set (curves, meshes) and tag failures with the record index.
"""

import re
from typing import Callable, Iterator, List, Optional, TypeVar
import xml.etree.ElementTree as ET

from ..errors import MissingElement, MissingSection, SceneError

T = TypeVar("T")

# Leading integer of a token, the way a "%d" scan reads it ("12px" -> 12)
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
# Leading float of a token, the way a "%lf" scan reads it ("0.5px" -> 0.5)
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def query_int(element: ET.Element, name: str, default: int = 0) -> int:
    """
    Integer attribute `name`, or `default` if absent/unparsable.
    A float spelling ("3.0") and trailing garbage ("3px") are accepted.
    """
    raw = element.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return int(float(raw))
    except (ValueError, OverflowError):
        pass
    m = _INT_PREFIX.match(raw)
    return int(m.group(1)) if m else default


def query_float(element: ET.Element, name: str, default: float = 0.0) -> float:
    """
    Float attribute `name`, or `default` if absent/unparsable.
    Trailing garbage after a leading number is ignored ("0.5px" -> 0.5).
    """
    raw = element.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        pass
    m = _FLOAT_PREFIX.match(raw)
    return float(m.group(1)) if m else default


def query_bool(element: ET.Element, name: str, default: bool = False) -> bool:
    """Boolean attribute: 'true'/'false' (any case) or an integer; else `default`."""
    raw = element.get(name)
    if raw is None:
        return default
    token = raw.strip().lower()
    if token == "true":
        return True
    if token == "false":
        return False
    try:
        return int(token) != 0
    except ValueError:
        return default


def require_child(parent: ET.Element, tag: str, what: str) -> ET.Element:
    """
    Return the first child `tag` of `parent`.

    Raises
    ------
    MissingSection
        If `parent` has no such child; `what` names the missing data in the message
        (e.g., "left colors of diffusion curve 3").
    """
    child = parent.find(tag)
    if child is None:
        raise MissingSection("Cannot read {}".format(what), {"tag": tag})
    return child


def iter_children(parent: ET.Element, tag: str, count: int) -> Iterator[ET.Element]:
    """
    Yield the first `count` children of `parent` named `tag`, in document order.

    The first `tag` child must exist even when `count` is 0.

    Raises
    ------
    MissingElement
        If there is no `tag` child at all, or fewer than `count` of them.
    """
    siblings = parent.iterfind(tag)
    first: Optional[ET.Element] = next(siblings, None)
    if first is None:
        raise MissingElement("Cannot read {}".format(tag), {"tag": tag, "index": 0})

    current = first
    for i in range(count):
        if current is None:
            raise MissingElement("Cannot read {} {}".format(tag, i), {"tag": tag, "index": i})
        yield current
        current = next(siblings, None)


def read_records(
    set_el: ET.Element,
    count_attr: str,
    tag: str,
    record: str,
    build: Callable[[ET.Element, int], T],
) -> List[T]:
    """
    Build one record per `tag` child of a set element, honouring the declared count.

    Parameters
    ----------
    set_el : ET.Element
        Set container (e.g., `curve_set`, `mesh_set`).
    count_attr : str
        Attribute holding the declared record count (e.g., "nb_curves").
    tag : str
        Record element tag (e.g., "curve").
    record : str
        Context key for the record index in errors (e.g., "curve", "mesh").
    build : Callable[[ET.Element, int], T]
        Builds a record from its element and index.

    Raises
    ------
    SceneError
        The first failure, with the record index merged into its context.
    """
    count = query_int(set_el, count_attr)
    if count <= 0:
        return []

    out: List[T] = []
    for i, element in enumerate(iter_children(set_el, tag, count)):
        try:
            out.append(build(element, i))
        except SceneError as exc:
            raise exc.with_context(**{record: i}) from exc
    return out
