import random
from typing import Iterable, List, Optional

from rubiks_cube import (RubiksCube, RowRotation, ColumnRotation, LateralColumnRotation,
                         CubeRotation)
from rubiks_cube_exceptions import ConfigurationError

FIRST, MIDDLE, LAST = 'first', 'middle', 'last'

# name -> (primitive, layer, clockwise direction, anticlockwise direction)
# Clockwise is seen from the side the move is named after (standard notation).
MOVES = {
    'U': ('row', FIRST, RowRotation.CLOCKWISE, RowRotation.ANTICLOCKWISE),
    'E': ('row', MIDDLE, RowRotation.ANTICLOCKWISE, RowRotation.CLOCKWISE),
    'D': ('row', LAST, RowRotation.ANTICLOCKWISE, RowRotation.CLOCKWISE),
    'L': ('column', FIRST, ColumnRotation.BOTTOM, ColumnRotation.TOP),
    'M': ('column', MIDDLE, ColumnRotation.BOTTOM, ColumnRotation.TOP),
    'R': ('column', LAST, ColumnRotation.TOP, ColumnRotation.BOTTOM),
    'F': ('lateral_column', FIRST, LateralColumnRotation.RIGHT, LateralColumnRotation.LEFT),
    'S': ('lateral_column', MIDDLE, LateralColumnRotation.RIGHT, LateralColumnRotation.LEFT),
    'B': ('lateral_column', LAST, LateralColumnRotation.LEFT, LateralColumnRotation.RIGHT),
    'X': ('cube', None, CubeRotation.UPWISE, CubeRotation.DOWNWISE),
    'Y': ('cube', None, CubeRotation.CLOCKWISE, CubeRotation.ANTICLOCKWISE),
    'Z': ('cube', None, CubeRotation.CLOCKWISE_FROM_FRONT, CubeRotation.ANTICLOCKWISE_FROM_FRONT)
}
FACE_MOVES = ('U', 'D', 'L', 'R', 'F', 'B')
SLICE_MOVES = ('E', 'M', 'S')
CUBE_MOVES = ('X', 'Y', 'Z')


class Move:
    def __init__(self, cube: RubiksCube, name: str, inverse: bool = False) -> None:
        """
        Quarter turn of a face, a middle slice or the whole cube
        :param cube: Cube the move is performed on
        :param name: Move name in standard notation (U, D, L, R, F, B, E, M, S, X, Y, Z)
        :param inverse: True for the anticlockwise turn
        """
        if name not in MOVES:
            raise ConfigurationError('Unknown move: {0!r}'.format(name))
        self.cube = cube
        self.name = name
        self.inverse = bool(inverse)

    def _layer_index(self, layer: str) -> int:
        if layer == FIRST:
            return 0
        if layer == LAST:
            return self.cube.dim - 1
        if self.cube.dim % 2 == 0:
            raise ConfigurationError('Slice move {0} needs a cube of odd dimension'.format(self.name))
        return self.cube.dim // 2

    def perform(self):
        """Turns the cube once; performing the same move twice is a half turn."""
        primitive, layer, clockwise, anticlockwise = MOVES[self.name]
        rotation = anticlockwise if self.inverse else clockwise
        if primitive == 'cube':
            return self.cube.rotate_cube(rotation)
        rotate = getattr(self.cube, 'rotate_' + primitive)
        return rotate(self._layer_index(layer), rotation)

    def opposite(self) -> 'Move':
        return Move(self.cube, self.name, not self.inverse)

    def bind(self, cube: RubiksCube) -> 'Move':
        return Move(cube, self.name, self.inverse)

    @property
    def is_cube_rotation(self) -> bool:
        return self.name in CUBE_MOVES

    def __eq__(self, other) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return (self.name, self.inverse) == (other.name, other.inverse)

    def __hash__(self) -> int:
        return hash((self.name, self.inverse))

    def __str__(self) -> str:
        return self.name + ("'" if self.inverse else '')

    def __repr__(self) -> str:
        return 'Move({0})'.format(self)


def parse_moves(cube: RubiksCube, notation: str) -> List[Move]:
    """
    Reads a sequence written in standard notation, e.g. "R U R' U2".
    Half turns expand to two quarter turns. Lowercase x, y and z are accepted for cube rotations.
    """
    moves = []
    for token in notation.split():
        name = token[0].upper() if token[0] in 'xyz' else token[0]
        suffix = token[1:]
        if suffix == '':
            moves.append(Move(cube, name))
        elif suffix == "'":
            moves.append(Move(cube, name, inverse=True))
        elif suffix == '2':
            moves.extend([Move(cube, name), Move(cube, name)])
        else:
            raise ConfigurationError('Unknown move: {0!r}'.format(token))
    return moves


def format_moves(moves: Iterable[Move]) -> str:
    return ' '.join(str(move) for move in moves)


def replay(moves: Iterable[Move], cube: RubiksCube) -> RubiksCube:
    """Performs the moves, in order, on another cube."""
    for move in moves:
        move.bind(cube).perform()
    return cube


def scramble(cube: RubiksCube, n: int = 100, seed: Optional[int] = None) -> List[Move]:
    """Performs n random face turns and returns them."""
    rng = random.Random(seed)
    moves = [Move(cube, rng.choice(FACE_MOVES), inverse=rng.random() < 0.5) for _ in range(n)]
    for move in moves:
        move.perform()
    return moves
