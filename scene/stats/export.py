# -*- coding: utf-8 -*-
# usvg-scenes/scene/stats/export.py

"""
Project: usvg-scenes
Date: 3/4/2026

Purpose:
--------
Write scene summaries (nested dicts from `report.summarize`) to JSON or to a flat
two-column CSV with dotted keys.
"""

import csv
import json
import os
from typing import Any, Dict, List, Tuple

import numpy as np

__all__ = ["flatten", "write_summary_json", "write_summary_csv"]


def _plain(x: Any) -> Any:
    # numpy scalars/arrays → Python
    if isinstance(x, np.generic):
        return x.item()
    if isinstance(x, np.ndarray):
        return x.tolist()
    return x


def flatten(summary: Dict[str, Any], prefix: str = "") -> List[Tuple[str, Any]]:
    """
    Flatten nested dicts into ("a.b.c", value) rows, preserving insertion order.
    Lists are kept whole and JSON-encoded (e.g., bbox).
    """
    rows: List[Tuple[str, Any]] = []
    for key, value in summary.items():
        path = "{}.{}".format(prefix, key) if prefix else str(key)
        if isinstance(value, dict):
            rows.extend(flatten(value, path))
        elif isinstance(value, (list, tuple, np.ndarray)) or value is None:
            rows.append((path, json.dumps(_plain(value))))
        else:
            rows.append((path, _plain(value)))
    return rows


def _ensure_parent(path: str) -> None:
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)


def write_summary_json(summary: Dict[str, Any], path: str) -> str:
    """Write `summary` as indented UTF-8 JSON; return the path."""
    _ensure_parent(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2, default=_plain, ensure_ascii=False)
        f.write("\n")
    return path


def write_summary_csv(summary: Dict[str, Any], path: str) -> str:
    """Write `summary` as `key,value` rows (header included); return the path."""
    _ensure_parent(path)
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["key", "value"])
        for key, value in flatten(summary):
            writer.writerow([key, value])
    return path
