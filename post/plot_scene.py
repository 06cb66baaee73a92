# -*- coding: utf-8 -*-
# usvg-scenes/post/plot_scene.py

"""
Project: usvg-scenes
Date: 3/5/2026

Purpose
-------
Wireframe preview of a loaded Scene with matplotlib, for eyeballing files after loading.
This is not a renderer: no diffusion/Poisson solve, no mesh interpolation.

Main Tasks
----------
    1) Diffusion curves as polylines tinted with the mean of their side colors.
    2) Poisson curves as dashed gray polylines.
    3) Gradient meshes as row/column lattices with vertices colored by vertex color.
    4) Image frame (0..width, 0..height) with the y axis pointing down.
"""

import os
from typing import Optional

import numpy as np

from scene.model import DiffusionCurve, GradientMesh, Scene


def _get_pyplot():
    """
    Import matplotlib.pyplot with a headless-safe backend if needed.

    Raises
    ------
    RuntimeError
        If matplotlib cannot be imported.
    """
    try:
        import matplotlib
        if not os.environ.get("DISPLAY"):
            matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError("matplotlib is required for plotting: {}".format(e))


def curve_tint(curve: DiffusionCurve) -> tuple:
    """Mean RGB over both sides, clipped to [0, 1]; mid-gray for a colorless curve."""
    samples = np.vstack([curve.colors_left[:, :3], curve.colors_right[:, :3]])
    if samples.shape[0] == 0:
        return (0.5, 0.5, 0.5)
    return tuple(float(v) for v in np.clip(samples.mean(axis=0), 0.0, 1.0))


def plot_mesh_lattice(mesh: GradientMesh, ax, *, s: float = 6.0) -> None:
    """Draw one gradient mesh lattice (row-major vertices) onto `ax`."""
    if mesh.num_rows < 0 or mesh.num_cols < 0:
        return
    if mesh.positions.shape[0] != mesh.vertex_count or mesh.vertex_count == 0:
        return
    grid = mesh.positions.reshape(mesh.num_rows + 1, mesh.num_cols + 1, 2)
    for row in grid:
        ax.plot(row[:, 0], row[:, 1], color=(0.3, 0.3, 0.3), lw=0.6)
    for col in grid.transpose(1, 0, 2):
        ax.plot(col[:, 0], col[:, 1], color=(0.3, 0.3, 0.3), lw=0.6)
    ax.scatter(
        mesh.positions[:, 0], mesh.positions[:, 1],
        c=np.clip(mesh.colors, 0.0, 1.0), s=s, zorder=3,
    )


def plot_scene(
    scene: Scene,
    *,
    show: bool = True,
    save_path: Optional[str] = None,
    ax=None,
    title: Optional[str] = None,
) -> None:
    """
    Preview all primitives of `scene`.

    Parameters
    ----------
    scene : Scene
        Loaded scene.
    show : bool
        If True and we created the figure, display it.
    save_path : Optional[str]
        If given, save the figure to this path.
    ax : Optional[matplotlib.axes.Axes]
        Existing Axes to draw on; if None, a figure is created.
    title : Optional[str]
        Figure title (defaults to the image size).
    """
    if not isinstance(scene, Scene):
        raise ValueError("Expected a Scene, got {}.".format(type(scene).__name__))

    plt = _get_pyplot()
    created_fig = False
    if ax is None:
        plt.figure(figsize=(8, 6))
        ax = plt.gca()
        created_fig = True

    for mesh in scene.gradient_meshes:
        plot_mesh_lattice(mesh, ax)

    for curve in scene.diffusion_curves:
        pts = curve.control_points
        ax.plot(pts[:, 0], pts[:, 1], color=curve_tint(curve), lw=1.5)

    for curve in scene.poisson_curves:
        pts = curve.control_points
        ax.plot(pts[:, 0], pts[:, 1], "--", color=(0.5, 0.5, 0.5), lw=1.0)

    if scene.width > 0 and scene.height > 0:
        frame = np.array([
            [0, 0], [scene.width, 0], [scene.width, scene.height], [0, scene.height], [0, 0],
        ], dtype=float)
        ax.plot(frame[:, 0], frame[:, 1], "k:", lw=0.8)

    ax.set_aspect("equal", adjustable="box")
    if not ax.yaxis_inverted():
        ax.invert_yaxis()
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(title or "Scene {} x {}".format(scene.width, scene.height))

    if save_path:
        ax.figure.savefig(save_path, dpi=150)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)
