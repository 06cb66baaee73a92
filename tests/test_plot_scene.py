"""Smoke tests for post/plot_scene.py (headless Agg backend)."""
from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from post.plot_scene import curve_tint, plot_mesh_lattice, plot_scene  # noqa: E402
from scene.model import DiffusionCurve, GradientMesh, PoissonCurve, Scene  # noqa: E402


def _scene():
    return Scene(
        40, 30,
        [DiffusionCurve([[0, 0], [10, 10]], [[1, 0, 0, 0]], [[0, 0, 1, 1]])],
        [PoissonCurve([[5, 5], [6, 6]], [[0, 0, 0, 0]])],
        [GradientMesh(1, 1, positions=[[0, 0], [40, 0], [0, 30], [40, 30]], colors=[[0.5, 0.5, 0.5]] * 4)],
    )


def test_curve_tint_is_mean_of_sides():
    curve = DiffusionCurve([[0, 0]], [[1, 0, 0, 0]], [[0, 0, 1, 0]])
    assert curve_tint(curve) == pytest.approx((0.5, 0.0, 0.5))


def test_curve_tint_without_colors():
    assert curve_tint(DiffusionCurve([[0, 0]], [], [])) == (0.5, 0.5, 0.5)


def test_saves_preview(tmp_path):
    out = tmp_path / "preview.png"
    plot_scene(_scene(), show=False, save_path=str(out))
    assert out.exists() and out.stat().st_size > 0


def test_draws_on_given_axes():
    fig, ax = plt.subplots()
    plot_scene(_scene(), show=False, ax=ax, title="t")
    assert ax.get_title() == "t"
    assert ax.yaxis_inverted()
    # 1 diffusion + 1 Poisson + 2 rows + 2 cols + frame
    assert len(ax.lines) == 7
    plt.close(fig)


def test_rejects_non_scene():
    with pytest.raises(ValueError):
        plot_scene([], show=False)


def test_skips_mesh_with_negative_dimensions():
    # (-2+1)*(-2+1) == 1 vertex, but no lattice can be drawn
    mesh = GradientMesh(-2, -2, positions=[[1, 1]], colors=[[0, 0, 0]])
    fig, ax = plt.subplots()
    plot_mesh_lattice(mesh, ax)
    assert len(ax.lines) == 0
    assert len(ax.collections) == 0
    plt.close(fig)
