"""
Named corner and edge positions of the cube and the facelets they are made of.

Coordinates are (side, row, col) triples in the RubiksCube configuration. The first
facelet of every position lies on the up or down side when it touches one of them,
the other facelets follow clockwise around the piece as seen from outside.
"""
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from rubiks_cube import Color, RubiksCube, Side
from rubiks_cube_exceptions import ConfigurationError

# Symbolic coordinates resolved against the cube dimension
FIRST, MIDDLE, LAST = 'first', 'middle', 'last'


class Corner(Enum):
    URF = (Side.UP, Side.RIGHT, Side.FRONT)
    UFL = (Side.UP, Side.FRONT, Side.LEFT)
    ULB = (Side.UP, Side.LEFT, Side.BACK)
    UBR = (Side.UP, Side.BACK, Side.RIGHT)
    DFR = (Side.DOWN, Side.FRONT, Side.RIGHT)
    DLF = (Side.DOWN, Side.LEFT, Side.FRONT)
    DBL = (Side.DOWN, Side.BACK, Side.LEFT)
    DRB = (Side.DOWN, Side.RIGHT, Side.BACK)

    @property
    def sides(self) -> Tuple[Side, ...]:
        return self.value


class Edge(Enum):
    UR = (Side.UP, Side.RIGHT)
    UF = (Side.UP, Side.FRONT)
    UL = (Side.UP, Side.LEFT)
    UB = (Side.UP, Side.BACK)
    DR = (Side.DOWN, Side.RIGHT)
    DF = (Side.DOWN, Side.FRONT)
    DL = (Side.DOWN, Side.LEFT)
    DB = (Side.DOWN, Side.BACK)
    FR = (Side.FRONT, Side.RIGHT)
    FL = (Side.FRONT, Side.LEFT)
    BL = (Side.BACK, Side.LEFT)
    BR = (Side.BACK, Side.RIGHT)

    @property
    def sides(self) -> Tuple[Side, ...]:
        return self.value


_CORNER_FACELETS = {
    Corner.URF: ((LAST, LAST), (FIRST, FIRST), (FIRST, LAST)),
    Corner.UFL: ((LAST, FIRST), (FIRST, FIRST), (FIRST, LAST)),
    Corner.ULB: ((FIRST, FIRST), (FIRST, FIRST), (FIRST, LAST)),
    Corner.UBR: ((FIRST, LAST), (FIRST, FIRST), (FIRST, LAST)),
    Corner.DFR: ((FIRST, LAST), (LAST, LAST), (LAST, FIRST)),
    Corner.DLF: ((FIRST, FIRST), (LAST, LAST), (LAST, FIRST)),
    Corner.DBL: ((LAST, FIRST), (LAST, LAST), (LAST, FIRST)),
    Corner.DRB: ((LAST, LAST), (LAST, LAST), (LAST, FIRST))
}

_EDGE_FACELETS = {
    Edge.UR: ((MIDDLE, LAST), (FIRST, MIDDLE)),
    Edge.UF: ((LAST, MIDDLE), (FIRST, MIDDLE)),
    Edge.UL: ((MIDDLE, FIRST), (FIRST, MIDDLE)),
    Edge.UB: ((FIRST, MIDDLE), (FIRST, MIDDLE)),
    Edge.DR: ((MIDDLE, LAST), (LAST, MIDDLE)),
    Edge.DF: ((FIRST, MIDDLE), (LAST, MIDDLE)),
    Edge.DL: ((MIDDLE, FIRST), (LAST, MIDDLE)),
    Edge.DB: ((LAST, MIDDLE), (LAST, MIDDLE)),
    Edge.FR: ((MIDDLE, LAST), (MIDDLE, FIRST)),
    Edge.FL: ((MIDDLE, FIRST), (MIDDLE, LAST)),
    Edge.BL: ((MIDDLE, LAST), (MIDDLE, FIRST)),
    Edge.BR: ((MIDDLE, FIRST), (MIDDLE, LAST))
}

UPPER_CORNERS = (Corner.URF, Corner.UFL, Corner.ULB, Corner.UBR)
LOWER_CORNERS = (Corner.DFR, Corner.DLF, Corner.DBL, Corner.DRB)
UPPER_EDGES = (Edge.UF, Edge.UR, Edge.UB, Edge.UL)
MIDDLE_EDGES = (Edge.FR, Edge.BR, Edge.BL, Edge.FL)
LOWER_EDGES = (Edge.DF, Edge.DR, Edge.DB, Edge.DL)


def _resolve(coordinate: str, dim: int) -> int:
    if coordinate == FIRST:
        return 0
    if coordinate == LAST:
        return dim - 1
    if dim % 2 == 0:
        raise ConfigurationError('Edges are only addressed on cubes of odd dimension')
    return dim // 2


def corner_facelets(corner: Corner, dim: int = 3) -> List[Tuple[Side, int, int]]:
    return [(side, _resolve(row, dim), _resolve(col, dim))
            for side, (row, col) in zip(corner.sides, _CORNER_FACELETS[corner])]


def edge_facelets(edge: Edge, dim: int = 3) -> List[Tuple[Side, int, int]]:
    return [(side, _resolve(row, dim), _resolve(col, dim))
            for side, (row, col) in zip(edge.sides, _EDGE_FACELETS[edge])]


def facelets(position, dim: int = 3) -> List[Tuple[Side, int, int]]:
    if isinstance(position, Corner):
        return corner_facelets(position, dim)
    return edge_facelets(position, dim)


def get_colors(rubiks: RubiksCube, position) -> Tuple[Color, ...]:
    """Colors currently lying on a corner or edge position, in facelet order."""
    return tuple(rubiks.get_face(side, row, col) for side, row, col in facelets(position, rubiks.dim))


def get_corner(rubiks: RubiksCube, corner: Corner) -> Tuple[Color, Color, Color]:
    return get_colors(rubiks, corner)


def get_edge(rubiks: RubiksCube, edge: Edge) -> Tuple[Color, Color]:
    return get_colors(rubiks, edge)


def is_in_place(rubiks: RubiksCube, position) -> bool:
    """
    A piece is in place when every facelet has the color of the center of its side,
    so orientation counts as well as position.
    """
    return all(color == rubiks.center(side) for color, side in zip(get_colors(rubiks, position), position.sides))


def is_corner_in_place(rubiks: RubiksCube, corner: Corner) -> bool:
    return is_in_place(rubiks, corner)


def is_edge_in_place(rubiks: RubiksCube, edge: Edge) -> bool:
    return is_in_place(rubiks, edge)


def _find(rubiks: RubiksCube, positions: Iterable, colors: Iterable[Color]):
    wanted = sorted(colors)
    for position in positions:
        if sorted(get_colors(rubiks, position)) == wanted:
            return position
    return None


def find_corner(rubiks: RubiksCube, colors: Iterable[Color]) -> Optional[Corner]:
    """Position currently holding the corner piece with the given colors, in any orientation."""
    return _find(rubiks, Corner, colors)


def find_edge(rubiks: RubiksCube, colors: Iterable[Color]) -> Optional[Edge]:
    return _find(rubiks, Edge, colors)


def corners_of_side(side: Side) -> Tuple[Corner, ...]:
    return tuple(corner for corner in Corner if side in corner.sides)


def edges_of_side(side: Side) -> Tuple[Edge, ...]:
    return tuple(edge for edge in Edge if side in edge.sides)
