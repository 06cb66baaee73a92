# -*- coding: utf-8 -*-
# usvg-scenes/scene/__init__.py

"""
Project: usvg-scenes
Date: 3/2/2026 (Updated: 3/4/2026)

Modules:
--------
- model:     Immutable scene records: DiffusionCurve, PoissonCurve, GradientMesh, Scene,
             and the BoundaryCondition enum. Numeric data as read-only float64 arrays.

- errors:    Load error taxonomy (SceneError base with context): ResourceUnavailable,
             MalformedDocument, UnrecognizedDialect, MissingSection, MissingElement,
             CountMismatch.

- readers:   Element-level readers (primitives, curves, meshes).

- formats:   Plain/gzip text access, marker line extraction, XML parsing.

- dialects:  Unified (`<!DOCTYPE SceneXML>`) and legacy curve-set
             (`<!DOCTYPE CurveSetXML>`) parsers and the marker → dialect routing.

- loader:    SceneLoader (file-bound) and parse_scene (in-memory).

- stats:     Scene summaries and their CSV/JSON export.

- api:       Minimal public facade used by drivers.
              * load_scene(path) → Scene
              * load_scenes(paths) → List[Scene]
              * describe(path) → summary dict

            Usage:
                from scene.api import load_scene
"""

__all__ = ["model", "errors", "readers", "formats", "dialects", "loader", "stats", "api"]
