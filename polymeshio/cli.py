"""Command that reads a mesh and exports its points and segments as UCD files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Mapping, Sequence

from polymeshio.mesh import MeshImportError, import_mesh
from polymeshio.ucd import UCDProperty, export_points, export_segments

__all__ = ["marker_values", "main"]


def marker_values(count: int, markers: Mapping[int, Sequence[int]]) -> list[float]:
    """Return one marker value per id in ``range(count)``; unmarked ids get 0."""
    values = [0.0] * count
    for marker, ids in sorted(markers.items()):
        for cell_id in ids:
            if not 0 <= cell_id < count:
                raise IndexError(f"id {cell_id} out of range for {count} cells")
            values[cell_id] = float(marker)
    return values


def _marker_property(count: int, markers: Mapping[int, Sequence[int]]) -> UCDProperty:
    return UCDProperty("Marker", "-", 1, marker_values(count, markers))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Export the points and segments of a polygonal mesh to UCD files."
    )
    parser.add_argument(
        "directory", nargs="?", default=".", help="directory holding the Cell*Ds.csv files"
    )
    parser.add_argument(
        "-o", "--output", default=".", help="directory receiving Cell0Ds.inp and Cell1Ds.inp"
    )
    args = parser.parse_args(argv)

    try:
        mesh = import_mesh(args.directory)
    except MeshImportError as exc:
        print(exc, file=sys.stderr)
        return 1

    output = Path(args.output)
    export_points(
        output / "Cell0Ds.inp",
        mesh.cell0d_coordinates,
        [_marker_property(mesh.num_cell0d, mesh.cell0d_markers)],
    )
    export_segments(
        output / "Cell1Ds.inp",
        mesh.cell0d_coordinates,
        mesh.cell1d_extrema,
        (),
        [_marker_property(mesh.num_cell1d, mesh.cell1d_markers)],
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())