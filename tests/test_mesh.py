import pytest

from polymeshio.mesh import (
    MeshImportError,
    PolygonalMesh,
    import_cell0d,
    import_cell1d,
    import_cell2d,
    import_mesh,
)

CELL0 = "Id;Marker;X;Y\n0;1;0.0;0.0\n1;2;1.0;0.0\n2;0;0.5;0.5\n3;1;0.0;1.0\n"
CELL1 = "Id;Marker;Origin;End\n0;5;0;1\n1;0;1;2\n2;5;2;3\n3;7;3;0\n"
CELL2 = "Id;Marker;NumVertices;Vertices;NumEdges;Edges\n0;0;3;0;1;2;3;0;1;2\n1;0;4;0;1;2;3;4;0;1;2;3\n"


@pytest.fixture
def mesh_dir(tmp_path):
    (tmp_path / "Cell0Ds.csv").write_text(CELL0)
    (tmp_path / "Cell1Ds.csv").write_text(CELL1)
    (tmp_path / "Cell2Ds.csv").write_text(CELL2)
    return tmp_path


def test_import_mesh_points(mesh_dir):
    mesh = import_mesh(mesh_dir)
    assert mesh.num_cell0d == 4
    assert mesh.cell0d_ids == [0, 1, 2, 3]
    assert mesh.cell0d_coordinates[2] == (0.5, 0.5, 0.0)
    assert all(z == 0.0 for _, _, z in mesh.cell0d_coordinates)


def test_point_markers_skip_zero(mesh_dir):
    mesh = import_mesh(mesh_dir)
    assert mesh.cell0d_markers == {1: [0, 3], 2: [1]}


def test_import_mesh_segments(mesh_dir):
    mesh = import_mesh(mesh_dir)
    assert mesh.num_cell1d == 4
    assert mesh.cell1d_extrema == [(0, 1), (1, 2), (2, 3), (3, 0)]
    assert mesh.cell1d_markers == {5: [0, 2], 7: [3]}


def test_import_mesh_polygons(mesh_dir):
    mesh = import_mesh(mesh_dir)
    assert mesh.num_cell2d == 2
    assert mesh.cell2d_ids == [0, 1]
    assert mesh.cell2d_vertices == [[0, 1, 2], [0, 1, 2, 3]]
    assert mesh.cell2d_edges == [[0, 1, 2], [0, 1, 2, 3]]


def test_single_file_import_replaces_previous(tmp_path):
    path = tmp_path / "points.csv"
    path.write_text(CELL0)
    mesh = PolygonalMesh()
    import_cell0d(mesh, path)
    import_cell0d(mesh, path)
    assert mesh.num_cell0d == 4
    assert mesh.cell0d_markers[1] == [0, 3]


def test_missing_file_raises(tmp_path):
    with pytest.raises(MeshImportError, match="file not found"):
        import_mesh(tmp_path)


def test_missing_second_file_raises(tmp_path):
    (tmp_path / "Cell0Ds.csv").write_text(CELL0)
    with pytest.raises(MeshImportError, match="Cell1Ds.csv"):
        import_mesh(tmp_path)


@pytest.mark.parametrize(
    "function, label",
    [(import_cell0d, "0D"), (import_cell1d, "1D"), (import_cell2d, "2D")],
)
def test_header_only_file_raises(tmp_path, function, label):
    path = tmp_path / "empty.csv"
    path.write_text("Header\n")
    with pytest.raises(MeshImportError, match=f"There is no cell {label}"):
        function(PolygonalMesh(), path)


def test_malformed_field_raises(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("Id;Marker;Origin;End\n0;0;zero;1\n")
    with pytest.raises(MeshImportError, match=":2:"):
        import_cell1d(PolygonalMesh(), path)


def test_truncated_polygon_raises(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("header\n0;0;3;0;1\n")
    with pytest.raises(MeshImportError):
        import_cell2d(PolygonalMesh(), path)