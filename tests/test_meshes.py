"""Tests for scene/readers/meshes.py: gradient mesh assembly and count checks."""
from __future__ import annotations

import numpy as np
import pytest

from scene.errors import CountMismatch, MissingElement, MissingSection
from scene.readers.meshes import read_gradient_mesh, read_gradient_meshes


def mesh_xml(rows=1, cols=1, nb_positions=None, nb_colors=None, normalized=None,
             positions=None, colors=None, tangents=True):
    n = (rows + 1) * (cols + 1)
    nb_positions = n if nb_positions is None else nb_positions
    nb_colors = n if nb_colors is None else nb_colors
    positions = positions if positions is not None else [(i, 10 * i) for i in range(n)]
    colors = colors if colors is not None else ['r="0.1" g="0.2" b="0.3"'] * n
    norm = ' normalized="{}"'.format(normalized) if normalized is not None else ""
    out = ['<mesh nb_rows="{}" nb_cols="{}" nb_positions="{}" nb_colors="{}"{}>'.format(
        rows, cols, nb_positions, nb_colors, norm)]
    out.append("<position_set>")
    out += ['<position x="{}" y="{}"/>'.format(x, y) for x, y in positions]
    out.append("</position_set><color_set>")
    out += ["<color {}/>".format(c) for c in colors]
    out.append("</color_set>")
    if tangents:
        out.append("<pos_tangent_set>")
        out += ['<positionU x="1" y="0"/>'] * len(positions)
        out += ['<positionV x="0" y="1"/>'] * len(positions)
        out.append("</pos_tangent_set>")
    out.append("</mesh>")
    return "".join(out)


class TestGradientMesh:

    def test_reads_lattice(self, element):
        mesh = read_gradient_mesh(element(mesh_xml(rows=1, cols=2)), 0)
        assert (mesh.num_rows, mesh.num_cols) == (1, 2)
        assert mesh.positions.shape == (6, 2)
        assert mesh.colors.shape == (6, 3)
        np.testing.assert_allclose(mesh.positions[5], [5.0, 50.0])
        np.testing.assert_allclose(mesh.colors[0], [0.1, 0.2, 0.3])

    def test_tangents_present(self, element):
        mesh = read_gradient_mesh(element(mesh_xml()), 0)
        assert mesh.has_tangents
        assert mesh.tangents_u.shape == mesh.tangents_v.shape == (4, 2)
        np.testing.assert_allclose(mesh.tangents_u[0], [1.0, 0.0])
        np.testing.assert_allclose(mesh.tangents_v[0], [0.0, 1.0])

    def test_tangents_absent(self, element):
        mesh = read_gradient_mesh(element(mesh_xml(tangents=False)), 0)
        assert not mesh.has_tangents
        assert mesh.tangents_u.shape == (0, 2)
        assert mesh.tangents_v.shape == (0, 2)

    def test_position_count_mismatch(self, element):
        # 2x1 mesh expects 6 vertices
        xml = mesh_xml(rows=2, cols=1, nb_positions=5, positions=[(0, 0)] * 5)
        with pytest.raises(CountMismatch) as ei:
            read_gradient_mesh(element(xml), 3)
        assert "positions" in str(ei.value)
        assert "mesh 3" in str(ei.value)
        assert ei.value.context["expected"] == 6
        assert ei.value.context["declared"] == 5

    def test_color_count_mismatch(self, element):
        xml = mesh_xml(rows=1, cols=1, nb_colors=3)
        with pytest.raises(CountMismatch) as ei:
            read_gradient_mesh(element(xml), 0)
        assert "colors" in str(ei.value)

    def test_count_checked_before_positions_are_read(self, element):
        xml = '<mesh nb_rows="1" nb_cols="1" nb_positions="3"/>'
        with pytest.raises(CountMismatch):
            read_gradient_mesh(element(xml), 0)

    def test_normalized_positions(self, element):
        xml = mesh_xml(rows=0, cols=0, normalized="true", positions=[(0.5, 0.25)], tangents=False)
        mesh = read_gradient_mesh(element(xml), 0, image_size=(200, 100))
        np.testing.assert_allclose(mesh.positions, [[50.0, 50.0]])

    def test_normalized_tangents(self, element):
        xml = mesh_xml(rows=0, cols=0, normalized="1", positions=[(0.5, 0.5)])
        mesh = read_gradient_mesh(element(xml), 0, image_size=(200, 100))
        np.testing.assert_allclose(mesh.tangents_u, [[100.0, 0.0]])
        np.testing.assert_allclose(mesh.tangents_v, [[0.0, 200.0]])

    def test_not_normalized_by_default(self, element):
        xml = mesh_xml(rows=0, cols=0, positions=[(0.5, 0.25)], tangents=False)
        mesh = read_gradient_mesh(element(xml), 0, image_size=(200, 100))
        np.testing.assert_allclose(mesh.positions, [[0.5, 0.25]])

    def test_uppercase_colors_not_swapped(self, element):
        xml = mesh_xml(rows=0, cols=0, colors=['R="255" G="0" B="0"'], tangents=False)
        mesh = read_gradient_mesh(element(xml), 0)
        np.testing.assert_allclose(mesh.colors, [[1.0, 0.0, 0.0]])

    def test_missing_position_set(self, element):
        xml = mesh_xml().replace("position_set", "pset")
        with pytest.raises(MissingSection) as ei:
            read_gradient_mesh(element(xml), 1)
        assert str(ei.value).startswith("Cannot read positions of mesh 1")

    def test_short_tangents(self, element):
        xml = mesh_xml(rows=0, cols=1).replace('<positionV x="0" y="1"/>', "", 1)
        with pytest.raises(MissingElement) as ei:
            read_gradient_mesh(element(xml), 0)
        assert ei.value.context == {"tag": "positionV", "index": 1}


class TestGradientMeshSet:

    def test_reads_declared_meshes(self, element):
        xml = '<mesh_set nb_meshes="2">{}{}</mesh_set>'.format(mesh_xml(), mesh_xml(rows=2))
        meshes = read_gradient_meshes(element(xml))
        assert [m.num_rows for m in meshes] == [1, 2]

    def test_mismatch_tagged_with_mesh_index(self, element):
        bad = mesh_xml(rows=2, cols=1, nb_positions=5, positions=[(0, 0)] * 5)
        xml = '<mesh_set nb_meshes="2">{}{}</mesh_set>'.format(mesh_xml(), bad)
        with pytest.raises(CountMismatch) as ei:
            read_gradient_meshes(element(xml))
        assert ei.value.context["mesh"] == 1

    def test_missing_mesh(self, element):
        xml = '<mesh_set nb_meshes="2">{}</mesh_set>'.format(mesh_xml())
        with pytest.raises(MissingElement) as ei:
            read_gradient_meshes(element(xml))
        assert str(ei.value).startswith("Cannot read mesh 1")
