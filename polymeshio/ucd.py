"""Export of points, segments, polygons and polyhedra to the AVS UCD ASCII format."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Sequence

__all__ = [
    "CellType",
    "UCDProperty",
    "UCDCell",
    "UCDExportError",
    "export_points",
    "export_segments",
    "export_polygons",
    "export_polyhedra",
    "write_ucd_ascii",
]

_SEP = " "


class UCDExportError(RuntimeError):
    """Raised when a UCD file cannot be produced."""


class CellType(enum.Enum):
    """Kinds of cell known to the UCD format."""

    UNKNOWN = -1
    POINT = 0
    LINE = 1
    TRIANGLE = 2
    QUADRILATERAL = 3
    HEXAHEDRON = 4
    PRISM = 5
    TETRAHEDRON = 6
    PYRAMID = 7


_CELL_LABELS = {
    CellType.LINE: "line",
    CellType.TRIANGLE: "tri",
    CellType.QUADRILATERAL: "quad",
    CellType.HEXAHEDRON: "hex",
    CellType.PRISM: "prism",
    CellType.TETRAHEDRON: "tet",
    CellType.PYRAMID: "pyr",
    CellType.POINT: "pt",
}


@dataclass(frozen=True)
class UCDProperty:
    """A named quantity attached to every point or every cell.

    ``data`` holds ``num_components`` values per entity, laid out entity after entity.
    """

    label: str
    unit_label: str
    num_components: int
    data: Sequence[float]

    def components(self, index: int) -> Sequence[float]:
        """Return the values belonging to the entity at ``index``."""
        start = self.num_components * index
        stop = start + self.num_components
        if stop > len(self.data):
            raise UCDExportError(
                f"Property '{self.label}' has no data for entity {index}"
            )
        return self.data[start:stop]


@dataclass(frozen=True)
class UCDCell:
    """A cell: its type, the ids of its points and its material id."""

    type: CellType
    point_ids: tuple[int, ...]
    material_id: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "point_ids", tuple(int(i) for i in self.point_ids))

    @property
    def label(self) -> str:
        """The UCD keyword for this cell's type."""
        try:
            return _CELL_LABELS[self.type]
        except KeyError:
            raise UCDExportError("Type not supported") from None


def _material(materials: Sequence[int] | None, count: int, index: int) -> int:
    if materials is not None and len(materials) == count:
        return int(materials[index])
    return 0


def _point_cells(points: Sequence[Sequence[float]], materials) -> list[UCDCell]:
    return [
        UCDCell(CellType.POINT, (index,), _material(materials, len(points), index))
        for index in range(len(points))
    ]


def _line_cells(segments: Sequence[Sequence[int]], materials) -> list[UCDCell]:
    cells = []
    for index, segment in enumerate(segments):
        start, end = segment
        cells.append(
            UCDCell(CellType.LINE, (start, end), _material(materials, len(segments), index))
        )
    return cells


def _polygon_cells(polygons: Sequence[Sequence[int]], materials) -> list[UCDCell]:
    cells = []
    for index, vertices in enumerate(polygons):
        if len(vertices) == 3:
            cell_type = CellType.TRIANGLE
        elif len(vertices) == 4:
            cell_type = CellType.QUADRILATERAL
        else:
            raise UCDExportError("Polygon type not supported")
        cells.append(UCDCell(cell_type, tuple(vertices), _material(materials, len(polygons), index)))
    return cells


def _polyhedra_cells(polyhedra: Sequence[Sequence[int]], materials) -> list[UCDCell]:
    cells = []
    for index, vertices in enumerate(polyhedra):
        if len(vertices) != 4:
            raise UCDExportError("Polygon type not supported")
        cells.append(
            UCDCell(CellType.TETRAHEDRON, tuple(vertices), _material(materials, len(polyhedra), index))
        )
    return cells


def _number(value: float) -> str:
    return f"{float(value):.16e}"


def _coordinates(point: Sequence[float]) -> tuple[float, float, float]:
    if len(point) != 3:
        raise UCDExportError("Every point must have three coordinates")
    x, y, z = point
    return x, y, z


def _property_lines(properties: Sequence[UCDProperty], count: int) -> Iterator[str]:
    if not properties:
        return
    yield _SEP.join([str(len(properties)), *(str(p.num_components) for p in properties)])
    for prop in properties:
        yield f"{prop.label},{_SEP}{prop.unit_label}"
    for index in range(count):
        values = [_number(v) for prop in properties for v in prop.components(index)]
        yield _SEP.join([str(index + 1), *values])


def _ucd_lines(points, point_properties, cells, cell_properties) -> Iterator[str]:
    yield _SEP.join(
        str(n) for n in (len(points), len(cells), len(point_properties), len(cell_properties), 0)
    )
    for index, point in enumerate(points):
        yield _SEP.join([str(index + 1), *(_number(c) for c in _coordinates(point))])
    for index, cell in enumerate(cells):
        yield _SEP.join(
            [str(index + 1), str(cell.material_id), cell.label, *(str(i + 1) for i in cell.point_ids)]
        )
    yield from _property_lines(point_properties, len(points))
    yield from _property_lines(cell_properties, len(cells))


def write_ucd_ascii(points, point_properties, cells, cell_properties, file_path) -> None:
    """Write points, cells and their properties to ``file_path`` as ASCII UCD."""
    point_properties = list(point_properties or ())
    cell_properties = list(cell_properties or ())
    lines = list(_ucd_lines(points, point_properties, list(cells), cell_properties))
    try:
        with open(file_path, "w", encoding="utf-8", newline="\n") as handle:
            handle.writelines(line + "\n" for line in lines)
    except OSError as exc:
        raise UCDExportError(f"File '{file_path}' cannot be opened") from exc


def export_points(file_path, points, points_properties=None, materials=None) -> None:
    """Export every point as a point cell; properties are attached to the cells."""
    write_ucd_ascii(points, (), _point_cells(points, materials), points_properties, file_path)


def export_segments(
    file_path, points, segments, points_properties=None, segments_properties=None, materials=None
) -> None:
    """Export segments given as pairs of zero-based point ids."""
    write_ucd_ascii(
        points, points_properties, _line_cells(segments, materials), segments_properties, file_path
    )


def export_polygons(
    file_path, points, polygons_vertices, points_properties=None, polygons_properties=None, materials=None
) -> None:
    """Export triangles and quadrilaterals given by zero-based point ids."""
    write_ucd_ascii(
        points,
        points_properties,
        _polygon_cells(polygons_vertices, materials),
        polygons_properties,
        file_path,
    )


def export_polyhedra(
    file_path, points, polyhedra_vertices, points_properties=None, polyhedra_properties=None, materials=None
) -> None:
    """Export tetrahedra given by zero-based point ids."""
    write_ucd_ascii(
        points,
        points_properties,
        _polyhedra_cells(polyhedra_vertices, materials),
        polyhedra_properties,
        file_path,
    )