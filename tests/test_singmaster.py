import numpy as np
import pytest

from resolution_strategy import ResolutionStrategy
from rubiks_cube import Color, Side, RubiksCube
from rubiks_cube_exceptions import ConfigurationError, NoSolutionError, SolverTimeoutError
from rubiks_cube_moves import Move, parse_moves, replay, scramble
from rubiks_cube_positions import LOWER_CORNERS, LOWER_EDGES, is_corner_in_place, is_edge_in_place
from singmaster import Phase, Singmaster

LATERAL_SIDES = (Side.FRONT, Side.RIGHT, Side.BACK, Side.LEFT)


def scrambled_cube(seed, n=40):
    rubiks = RubiksCube()
    scramble(rubiks, n, seed=seed)
    return rubiks


def assert_two_layers_solved(rubiks, color=Color.GREEN):
    assert rubiks.find_center(color) == Side.DOWN
    assert all(is_edge_in_place(rubiks, edge) for edge in LOWER_EDGES)
    assert all(is_corner_in_place(rubiks, corner) for corner in LOWER_CORNERS)
    for side in LATERAL_SIDES:
        assert np.all(rubiks.cube[side, 1:, :] == rubiks.center(side))


def test_metadata(cube):
    strategy = Singmaster(cube)
    assert strategy.name == 'Singmaster'
    assert str(strategy) == 'Singmaster'
    assert 'layer by layer' in strategy.description
    assert isinstance(strategy, ResolutionStrategy)
    assert strategy.reference_color == Color.GREEN
    assert strategy.phase is None


def test_cube_is_required():
    with pytest.raises(TypeError):
        Singmaster(None)


@pytest.mark.parametrize('dim', [2, 4])
def test_dimension_must_be_three(dim):
    with pytest.raises(ConfigurationError):
        Singmaster(RubiksCube(dim))


def test_colors_must_be_sane(cube):
    cube.set_face(Side.UP, 0, 0, Color.RED)
    with pytest.raises(ConfigurationError):
        Singmaster(cube)


def test_invalid_parameters(cube):
    with pytest.raises(ConfigurationError):
        Singmaster(cube, reference_color='purple')
    with pytest.raises(ConfigurationError):
        Singmaster(cube, max_iterations=-1)
    assert Singmaster(cube, reference_color='white').reference_color == Color.WHITE


def test_solved_cube_only_needs_orientation(cube):
    moves = Singmaster(cube).get_next_moves()
    assert [str(move) for move in moves] == ['Z', 'X', 'X']
    assert all(move.is_cube_rotation for move in moves)


def test_single_right_turn():
    """Reorienting green up puts the turned layer down, the first two layers are untouched."""
    rubiks = RubiksCube()
    parse_moves(rubiks, 'R')[0].perform()
    strategy = Singmaster(rubiks)
    moves = strategy.get_next_moves()
    assert [str(move) for move in moves] == ['Z', 'X', 'X']
    assert strategy.phase == Phase.LAST_LAYER
    solved = replay(moves, rubiks.copy())
    assert_two_layers_solved(solved)


def test_single_left_turn():
    rubiks = RubiksCube()
    parse_moves(rubiks, 'L')[0].perform()
    moves = Singmaster(rubiks).get_next_moves()
    assert moves
    assert str(moves[0]) == 'Z'
    assert_two_layers_solved(replay(moves, rubiks.copy()))


@pytest.mark.parametrize('seed', range(25))
def test_scrambled_cube(seed):
    rubiks = scrambled_cube(seed)
    before = rubiks.cube.copy()
    strategy = Singmaster(rubiks)
    moves = strategy.get_next_moves()
    assert np.array_equal(before, rubiks.cube)
    assert all(isinstance(move, Move) for move in moves)
    assert_two_layers_solved(replay(moves, rubiks.copy()))
    assert strategy.phase == Phase.LAST_LAYER


@pytest.mark.parametrize('color', ['white', Color.RED, 'YELLOW'])
def test_other_reference_colors(color):
    rubiks = scrambled_cube(100)
    strategy = Singmaster(rubiks, reference_color=color)
    moves = strategy.get_next_moves()
    assert_two_layers_solved(replay(moves, rubiks.copy()), strategy.reference_color)


def test_moves_are_deterministic():
    rubiks = scrambled_cube(8)
    first = Singmaster(rubiks).get_next_moves()
    second = Singmaster(rubiks).get_next_moves()
    assert first == second


def test_caller_events_untouched(observed_cube, recorder):
    scramble(observed_cube, 20, seed=1)
    recorder.clear()
    Singmaster(observed_cube).get_next_moves()
    assert recorder == []


def test_cross_edge_without_place():
    """A green edge whose other color is on no lateral center cannot be placed."""
    rubiks = RubiksCube()
    rubiks.set_face(Side.UP, 1, 0, Color.BLUE)
    rubiks.set_face(Side.RIGHT, 0, 1, Color.WHITE)
    with pytest.raises(NoSolutionError) as error:
        Singmaster(rubiks).get_next_moves()
    assert error.value.reason
    assert str(error.value) == error.value.reason


def test_iteration_budget():
    rubiks = RubiksCube()
    parse_moves(rubiks, 'L')[0].perform()
    with pytest.raises(SolverTimeoutError) as error:
        Singmaster(rubiks, max_iterations=0).get_next_moves()
    assert error.value.max_iterations == 0
    assert isinstance(error.value, TimeoutError)


def test_phases_in_order():
    assert [phase for phase in Phase] == [Phase.ORIENT, Phase.CROSS, Phase.CORNERS,
                                          Phase.SECOND_LAYER, Phase.LAST_LAYER]
