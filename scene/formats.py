# -*- coding: utf-8 -*-
# usvg-scenes/scene/formats.py

"""
Project: usvg-scenes
Date: 3/3/2026

Purpose
-------
Document access for scene files: open plain or gzip-compressed text, pull out the
marker line that selects the dialect, and parse the XML into an element tree.

Main Tasks
----------
    1. `open_text(path)` opens `.gz` and plain files as text streams.
    2. `marker_line(text)` returns the first line verbatim (line ending removed).
    3. `parse_document(text)` / `read_document(path)` return (marker, root element),
       mapping I/O and syntax failures onto ResourceUnavailable / MalformedDocument.

Notes
-----
- The marker is taken from the raw text, before any XML parsing: the DOCTYPE
  name is not exposed by ElementTree.
"""

import gzip
import io
import zlib
from typing import IO, Tuple
import xml.etree.ElementTree as ET

from .errors import MalformedDocument, ResourceUnavailable

__all__ = ["open_text", "marker_line", "parse_document", "read_document"]


def open_text(path: str, encoding: str = "utf-8") -> IO[str]:
    """
    Open a text file, transparently supporting gzip-compressed inputs.
    Undecodable bytes become U+FFFD; only numeric attributes and tag names are read.

    Raises
    ------
    FileNotFoundError, PermissionError, OSError
        Propagated from the underlying open.
    """
    if path.lower().endswith(".gz"):
        return io.TextIOWrapper(
            gzip.open(path, "rb"), encoding=encoding, errors="replace", newline=""
        )
    return open(path, "r", encoding=encoding, errors="replace", newline="")


def marker_line(text: str) -> str:
    """First line of `text` without its '\\n' or '\\r\\n' terminator."""
    return text.split("\n", 1)[0].rstrip("\r")


def parse_document(text: str, source: str = "<string>") -> Tuple[str, ET.Element]:
    """
    Parse a scene document held in memory.

    Returns
    -------
    (str, ET.Element)
        Marker line and document root element.

    Raises
    ------
    MalformedDocument
        If the XML is not well-formed.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise MalformedDocument(
            "Cannot load XML file: {}".format(source),
            {"path": source, "reason": str(e)},
        ) from e
    return marker_line(text), root


def read_document(path: str, encoding: str = "utf-8") -> Tuple[str, ET.Element]:
    """
    Read and parse a scene document from disk.

    Raises
    ------
    ResourceUnavailable
        If the file cannot be opened or read (including a corrupt gzip stream).
    MalformedDocument
        If the XML is not well-formed.
    """
    try:
        with open_text(path, encoding=encoding) as f:
            text = f.read()
    except (OSError, EOFError, zlib.error) as e:
        raise ResourceUnavailable(
            "Cannot load XML file: {}".format(path),
            {"path": path, "reason": str(e)},
        ) from e
    return parse_document(text, source=path)
