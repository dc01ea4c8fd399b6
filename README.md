# polymeshio

`polymeshio` reads a two-dimensional polygonal mesh from three
semicolon-separated CSV files. It can write points, segments, triangles,
quadrilaterals and tetrahedra as AVS UCD ASCII (`.inp`) files. ParaView and
similar viewers can open those files.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install .[test]
```

## Input files

A mesh directory holds three files. The first line of each file is a header and
is skipped. Fields are separated by `;`.

| File | Row layout | Contents |
|------|------------|----------|
| `Cell0Ds.csv` | `Id;Marker;X;Y` | Points. They are stored as `(x, y, 0.0)`. |
| `Cell1Ds.csv` | `Id;Marker;Origin;End` | Segments, each given by the ids of its two end points. |
| `Cell2Ds.csv` | `Id;Marker;NumVertices;V1;...;NumEdges;E1;...` | Polygons. The marker is read and ignored. |

Points and segments with a non-zero marker are grouped under that marker.

`MeshImportError` is raised in these cases:

- A file cannot be opened. The message is `file not found: <path>`.
- A file has no data row after its header, for example `There is no cell 0D`.
- A row cannot be parsed. The message is `<path>:<line>: <reason>`.

## Command line

```
polymeshio [DIRECTORY] [-o OUTPUT]
```

The command reads `Cell0Ds.csv`, `Cell1Ds.csv` and `Cell2Ds.csv` from
`DIRECTORY`, which defaults to the current directory. It writes two files into
`OUTPUT`, which also defaults to the current directory:

- `Cell0Ds.inp`: every point as a `pt` cell.
- `Cell1Ds.inp`: every segment as a `line` cell.

In both files each cell carries a one-component `Marker` property. A cell's
value is its marker, or `0` if it has none.

If the mesh cannot be read, the command prints the error message to standard
error and exits with status 1.

## Library use

```python
from polymeshio.mesh import import_mesh
from polymeshio.ucd import UCDProperty, export_points, export_segments
from polymeshio.cli import marker_values

mesh = import_mesh("path/to/mesh")

markers = UCDProperty(
    label="Marker",
    unit_label="-",
    num_components=1,
    data=marker_values(mesh.num_cell0d, mesh.cell0d_markers),
)
export_points("Cell0Ds.inp", mesh.cell0d_coordinates, [markers])
```

### `polymeshio.mesh`

`import_mesh(directory=".")` returns a new `PolygonalMesh`. The functions
`import_cell0d(mesh, path)`, `import_cell1d(mesh, path)` and
`import_cell2d(mesh, path)` each fill one part of an existing mesh from a
single file.

A `PolygonalMesh` has these fields:

- `cell0d_ids`, `cell0d_coordinates` and `cell0d_markers`
- `cell1d_ids`, `cell1d_extrema` and `cell1d_markers`
- `cell2d_ids`, `cell2d_vertices` and `cell2d_edges`

It also has the counts `num_cell0d`, `num_cell1d` and `num_cell2d`.

### `polymeshio.ucd`

Point ids passed in are zero-based. In the file they are written one-based.
Every point must have three coordinates.

- `export_points(file_path, points, points_properties=None, materials=None)`
  writes one point cell per point. The properties are attached to those cells.
- `export_segments(file_path, points, segments, points_properties=None, segments_properties=None, materials=None)`
  writes one line cell per pair of point ids.
- `export_polygons(...)` writes triangles (3 vertices) and quadrilaterals (4
  vertices).
- `export_polyhedra(...)` writes tetrahedra (4 vertices).
- `write_ucd_ascii(points, point_properties, cells, cell_properties, file_path)`
  writes a list of `UCDCell` objects directly.

Each material id comes from `materials` when its length matches the number of
cells. Otherwise every material id is `0`.

A `UCDProperty` holds `num_components` values per entity in `data`, stored one
entity after another. Real numbers are written in scientific notation with 16
digits after the point.

`UCDExportError` is raised in these cases:

- A polygon or polyhedron has an unsupported vertex count.
- A cell type has no UCD label.
- A point does not have three coordinates.
- A property has too little data.
- The output file cannot be opened.

`CellType` lists the cell kinds.

## Limitations

- Polygons from `Cell2Ds.csv` are read into the mesh, but the command does not
  export them.
- Polygons with more than four vertices cannot be written with
  `export_polygons`.
- UCD files can be written but not read back.