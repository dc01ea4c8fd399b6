"""Polygonal mesh held in memory and its import from semicolon-separated CSV files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

__all__ = [
    "PolygonalMesh",
    "MeshImportError",
    "import_mesh",
    "import_cell0d",
    "import_cell1d",
    "import_cell2d",
    "CELL0D_FILE",
    "CELL1D_FILE",
    "CELL2D_FILE",
]

CELL0D_FILE = "Cell0Ds.csv"
CELL1D_FILE = "Cell1Ds.csv"
CELL2D_FILE = "Cell2Ds.csv"


class MeshImportError(Exception):
    """Raised when a mesh file is missing, empty or malformed."""


@dataclass
class PolygonalMesh:
    """Points (cell 0D), segments (cell 1D) and polygons (cell 2D) of a mesh.

    Coordinates are stored as ``(x, y, z)`` with ``z`` always zero.
    Markers map a non-zero marker value to the ids carrying it.
    """

    cell0d_ids: list[int] = field(default_factory=list)
    cell0d_coordinates: list[tuple[float, float, float]] = field(default_factory=list)
    cell0d_markers: dict[int, list[int]] = field(default_factory=dict)

    cell1d_ids: list[int] = field(default_factory=list)
    cell1d_extrema: list[tuple[int, int]] = field(default_factory=list)
    cell1d_markers: dict[int, list[int]] = field(default_factory=dict)

    cell2d_ids: list[int] = field(default_factory=list)
    cell2d_vertices: list[list[int]] = field(default_factory=list)
    cell2d_edges: list[list[int]] = field(default_factory=list)

    @property
    def num_cell0d(self) -> int:
        return len(self.cell0d_ids)

    @property
    def num_cell1d(self) -> int:
        return len(self.cell1d_ids)

    @property
    def num_cell2d(self) -> int:
        return len(self.cell2d_ids)


def _read_rows(path: Path, what: str) -> list[str]:
    """Return the lines of ``path`` after its header; at least one is required."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise MeshImportError(f"file not found: {path}") from exc
    rows = lines[1:]
    if not rows:
        raise MeshImportError(f"There is no cell {what}")
    return rows


class _Fields:
    """Successive ';'-separated fields of one row."""

    def __init__(self, line: str) -> None:
        self._parts: Iterator[str] = iter(line.split(";"))

    def text(self) -> str:
        return next(self._parts, "")

    def integer(self) -> int:
        return int(self.text().strip())

    def real(self) -> float:
        return float(self.text().strip())

    def count(self) -> int:
        value = self.integer()
        if value < 0:
            raise ValueError(f"negative count {value}")
        return value


def _rows(path: Path, what: str) -> Iterator[_Fields]:
    for number, line in enumerate(_read_rows(path, what), start=2):
        try:
            yield _Fields(line)
        except ValueError as exc:  # pragma: no cover - construction never fails
            raise MeshImportError(f"{path}:{number}: {exc}") from exc


def _parse_rows(path: Path, what: str, parse) -> list:
    results = []
    for number, line in enumerate(_read_rows(path, what), start=2):
        try:
            results.append(parse(_Fields(line)))
        except ValueError as exc:
            raise MeshImportError(f"{path}:{number}: {exc}") from exc
    return results


def _add_marker(markers: dict[int, list[int]], marker: int, cell_id: int) -> None:
    if marker != 0:
        markers.setdefault(marker, []).append(cell_id)


def import_cell0d(mesh: PolygonalMesh, path) -> None:
    """Fill the points of ``mesh`` from rows ``id;marker;x;y``."""

    def parse(fields: _Fields):
        cell_id = fields.integer()
        marker = fields.integer()
        x = fields.real()
        y = fields.real()
        return cell_id, marker, (x, y, 0.0)

    rows = _parse_rows(Path(path), "0D", parse)
    mesh.cell0d_ids = [cell_id for cell_id, _, _ in rows]
    mesh.cell0d_coordinates = [point for _, _, point in rows]
    mesh.cell0d_markers = {}
    for cell_id, marker, _ in rows:
        _add_marker(mesh.cell0d_markers, marker, cell_id)


def import_cell1d(mesh: PolygonalMesh, path) -> None:
    """Fill the segments of ``mesh`` from rows ``id;marker;origin;end``."""

    def parse(fields: _Fields):
        cell_id = fields.integer()
        marker = fields.integer()
        origin = fields.integer()
        end = fields.integer()
        return cell_id, marker, (origin, end)

    rows = _parse_rows(Path(path), "1D", parse)
    mesh.cell1d_ids = [cell_id for cell_id, _, _ in rows]
    mesh.cell1d_extrema = [extrema for _, _, extrema in rows]
    mesh.cell1d_markers = {}
    for cell_id, marker, _ in rows:
        _add_marker(mesh.cell1d_markers, marker, cell_id)


def import_cell2d(mesh: PolygonalMesh, path) -> None:
    """Fill the polygons of ``mesh`` from rows
    ``id;marker;n;v1;...;vn;m;e1;...;em`` (the marker is ignored)."""

    def parse(fields: _Fields):
        cell_id = fields.integer()
        fields.text()
        vertices = [fields.integer() for _ in range(fields.count())]
        edges = [fields.integer() for _ in range(fields.count())]
        return cell_id, vertices, edges

    rows = _parse_rows(Path(path), "2D", parse)
    mesh.cell2d_ids = [cell_id for cell_id, _, _ in rows]
    mesh.cell2d_vertices = [vertices for _, vertices, _ in rows]
    mesh.cell2d_edges = [edges for _, _, edges in rows]


def import_mesh(directory=".") -> PolygonalMesh:
    """Read the three cell files from ``directory`` into a new mesh."""
    base = Path(directory)
    mesh = PolygonalMesh()
    import_cell0d(mesh, base / CELL0D_FILE)
    import_cell1d(mesh, base / CELL1D_FILE)
    import_cell2d(mesh, base / CELL2D_FILE)
    return mesh