import pytest

from rubiks_cube import Color, Side, RubiksCube, CubeRotation
from rubiks_cube_exceptions import ConfigurationError
from rubiks_cube_moves import parse_moves, scramble
from rubiks_cube_positions import (Corner, Edge, corner_facelets, edge_facelets, get_corner,
                                   get_edge, find_corner, find_edge, is_corner_in_place,
                                   is_edge_in_place, corners_of_side, edges_of_side)


def piece_colors(rubiks, positions):
    return sorted(tuple(sorted(get_corner(rubiks, p) if isinstance(p, Corner) else get_edge(rubiks, p)))
                  for p in positions)


def test_corner_coordinates():
    assert corner_facelets(Corner.URF) == [(Side.UP, 2, 2), (Side.RIGHT, 0, 0), (Side.FRONT, 0, 2)]
    assert corner_facelets(Corner.DBL) == [(Side.DOWN, 2, 0), (Side.BACK, 2, 2), (Side.LEFT, 2, 0)]
    assert corner_facelets(Corner.ULB, dim=4) == [(Side.UP, 0, 0), (Side.LEFT, 0, 0), (Side.BACK, 0, 3)]


def test_edge_coordinates():
    assert edge_facelets(Edge.UF) == [(Side.UP, 2, 1), (Side.FRONT, 0, 1)]
    assert edge_facelets(Edge.DL) == [(Side.DOWN, 1, 0), (Side.LEFT, 2, 1)]
    assert edge_facelets(Edge.BR, dim=5) == [(Side.BACK, 2, 0), (Side.RIGHT, 2, 4)]


def test_edges_need_odd_dimension():
    with pytest.raises(ConfigurationError):
        edge_facelets(Edge.UF, dim=4)


def test_every_facelet_is_addressed_once():
    """Corners, edges and centers cover the 54 facelets of a 3x3 cube exactly."""
    coordinates = [c for corner in Corner for c in corner_facelets(corner)]
    coordinates += [c for edge in Edge for c in edge_facelets(edge)]
    coordinates += [(side, 1, 1) for side in Side]
    assert len(coordinates) == 54
    assert len(set(coordinates)) == 54


def test_standard_cube_pieces(cube):
    assert get_corner(cube, Corner.URF) == (Color.WHITE, Color.BLUE, Color.RED)
    assert get_edge(cube, Edge.DB) == (Color.YELLOW, Color.ORANGE)
    assert all(is_corner_in_place(cube, corner) for corner in Corner)
    assert all(is_edge_in_place(cube, edge) for edge in Edge)


def test_pieces_follow_moves(cube):
    parse_moves(cube, 'U')[0].perform()
    assert get_corner(cube, Corner.URF) == (Color.WHITE, Color.ORANGE, Color.BLUE)
    assert get_edge(cube, Edge.UF) == (Color.WHITE, Color.BLUE)
    assert not is_edge_in_place(cube, Edge.UF)
    assert is_edge_in_place(cube, Edge.FR)
    assert find_corner(cube, (Color.RED, Color.WHITE, Color.BLUE)) == Corner.UFL
    assert find_edge(cube, (Color.RED, Color.WHITE)) == Edge.UL


def test_in_place_follows_centers(cube):
    """Turning the whole cube keeps every piece in place."""
    cube.rotate_cube(CubeRotation.UPWISE)
    cube.rotate_cube(CubeRotation.CLOCKWISE_FROM_FRONT)
    assert all(is_corner_in_place(cube, corner) for corner in Corner)
    assert all(is_edge_in_place(cube, edge) for edge in Edge)


def test_twisted_corner_is_not_in_place(cube):
    cube.set_face(Side.UP, 2, 2, Color.BLUE)
    cube.set_face(Side.RIGHT, 0, 0, Color.RED)
    cube.set_face(Side.FRONT, 0, 2, Color.WHITE)
    assert RubiksCube.is_with_sane_colors(cube)
    assert find_corner(cube, (Color.WHITE, Color.BLUE, Color.RED)) == Corner.URF
    assert not is_corner_in_place(cube, Corner.URF)


@pytest.mark.parametrize('seed', range(5))
def test_pieces_stay_together(seed):
    """Moves never split the facelets of a corner or an edge."""
    reference = RubiksCube()
    rubiks = RubiksCube()
    scramble(rubiks, 60, seed=seed)
    for move in parse_moves(rubiks, 'M E S x y z'):
        move.perform()
    assert piece_colors(rubiks, Corner) == piece_colors(reference, Corner)
    assert piece_colors(rubiks, Edge) == piece_colors(reference, Edge)


def test_find_missing_piece(cube):
    assert find_edge(cube, (Color.WHITE, Color.YELLOW)) is None


def test_pieces_of_side():
    assert corners_of_side(Side.UP) == (Corner.URF, Corner.UFL, Corner.ULB, Corner.UBR)
    assert edges_of_side(Side.FRONT) == (Edge.UF, Edge.DF, Edge.FR, Edge.FL)
    assert all(len(corners_of_side(side)) == 4 and len(edges_of_side(side)) == 4 for side in Side)
