# -*- coding: utf-8 -*-
# usvg-scenes/scene/errors.py

"""
Project: usvg-scenes
Date: 3/2/2026

Purpose
-------
Typed exceptions for scene loading with compact, context-aware messages, so that every
failure can be traced back to the offending section, element index, and tag.

Main Tasks
----------
    1. Define SceneError(message, context) with a compact context suffix in __str__.
    2. Provide the load taxonomy: ResourceUnavailable, MalformedDocument, UnrecognizedDialect,
       MissingSection, MissingElement, CountMismatch.
    3. Let outer layers enrich an error with extra context without losing its type.

Notes
-----
- All errors are fatal to the current load; there is no partial scene.
- Context is optional; long values are truncated for readability.
"""

__all__ = [
    "SceneError",
    "ResourceUnavailable",
    "MalformedDocument",
    "UnrecognizedDialect",
    "MissingSection",
    "MissingElement",
    "CountMismatch",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class SceneError(Exception):
    """
    Base class for all scene loading errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Localizing fields appended in the string form
        (e.g., {"section": "mesh_set", "index": 2, "tag": "position"}).
    """
    def __init__(self, message, context=None):
        self.message = message
        self.context = dict(context) if context else {}
        super(SceneError, self).__init__(message)

    def __str__(self):
        return self.message + _format_context(self.context)

    def with_context(self, **extra):
        """
        Return a new error of the same type with `extra` merged into the context.
        Keys already present are kept (the innermost layer knows best).
        """
        merged = dict(extra)
        merged.update(self.context)
        return type(self)(self.message, merged)


class ResourceUnavailable(SceneError):
    """The document cannot be opened or read (missing file, permissions, bad gzip stream)."""


class MalformedDocument(SceneError):
    """The structured-document syntax is invalid."""


class UnrecognizedDialect(SceneError):
    """The first line matches neither known marker."""


class MissingSection(SceneError):
    """
    A required container element is absent where the dialect mandates it:
      - `scene` root in the unified dialect
      - `control_points_set`, `left_colors_set`, `right_colors_set`, `weights_set`
      - `position_set`, `color_set` in meshes
    """


class MissingElement(SceneError):
    """An expected sibling is absent before the declared count is satisfied."""


class CountMismatch(SceneError):
    """A declared count disagrees with a structurally required value."""
