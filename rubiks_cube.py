import logging
from enum import Enum, IntEnum
from typing import Callable, List, Optional, Tuple

import numpy as np

import rubiks_cube_config as rc_conf
from rubiks_cube_events import (DimensionChanged, FaceChanged, RowRotated, ColumnRotated,
                                LateralColumnRotated, CubeRotated)
from rubiks_cube_exceptions import ConfigurationError, InvalidIndexError

logger = logging.getLogger(__name__)


class Color(IntEnum):
    WHITE = 0
    YELLOW = 1
    RED = 2
    ORANGE = 3
    GREEN = 4
    BLUE = 5

    @property
    def letter(self) -> str:
        return rc_conf.color_letters[self.name.lower()]


class Side(IntEnum):
    UP = 0
    DOWN = 1
    FRONT = 2
    BACK = 3
    LEFT = 4
    RIGHT = 5

    @property
    def standard_color(self) -> Color:
        return Color[rc_conf.standard_colors[self.name.lower()].upper()]


class RowRotation(Enum):
    """Rows turn about the vertical axis, directions as seen from above."""
    CLOCKWISE = 'clockwise'
    ANTICLOCKWISE = 'anticlockwise'


class ColumnRotation(Enum):
    """Columns turn about the left-right axis: the front column goes to the top or to the bottom."""
    TOP = 'top'
    BOTTOM = 'bottom'


class LateralColumnRotation(Enum):
    """Lateral columns turn about the front-back axis: the upper row goes to the left or to the right."""
    LEFT = 'left'
    RIGHT = 'right'


class CubeRotation(Enum):
    UPWISE = 'upwise'
    DOWNWISE = 'downwise'
    CLOCKWISE = 'clockwise'
    ANTICLOCKWISE = 'anticlockwise'
    CLOCKWISE_FROM_FRONT = 'clockwise_from_front'
    ANTICLOCKWISE_FROM_FRONT = 'anticlockwise_from_front'


# Whole-side reassignments: destination -> (source, rotate the source by 180 degrees),
# followed by the in-place spins of the two sides lying on the rotation axis.
_CUBE_ROTATIONS = {
    CubeRotation.UPWISE: (
        {Side.UP: (Side.FRONT, False), Side.BACK: (Side.UP, True),
         Side.DOWN: (Side.BACK, True), Side.FRONT: (Side.DOWN, False)},
        ((Side.RIGHT, True), (Side.LEFT, False))
    ),
    CubeRotation.DOWNWISE: (
        {Side.FRONT: (Side.UP, False), Side.UP: (Side.BACK, True),
         Side.BACK: (Side.DOWN, True), Side.DOWN: (Side.FRONT, False)},
        ((Side.RIGHT, False), (Side.LEFT, True))
    ),
    CubeRotation.CLOCKWISE: (
        {Side.FRONT: (Side.RIGHT, False), Side.RIGHT: (Side.BACK, False),
         Side.BACK: (Side.LEFT, False), Side.LEFT: (Side.FRONT, False)},
        ((Side.UP, True), (Side.DOWN, False))
    ),
    CubeRotation.ANTICLOCKWISE: (
        {Side.FRONT: (Side.LEFT, False), Side.LEFT: (Side.BACK, False),
         Side.BACK: (Side.RIGHT, False), Side.RIGHT: (Side.FRONT, False)},
        ((Side.UP, False), (Side.DOWN, True))
    )
}


class RubiksCube:
    def __init__(self, dim: Optional[int] = None, cube: Optional[np.ndarray] = None,
                 event_sink: Optional[Callable] = None, verbose: bool = False) -> None:
        """
        Facelet model of a dim x dim x dim Rubik's cube.

        The configuration is a (6, dim, dim) integer array indexed by side, row and column.
        Every side is seen from outside the cube: the lateral sides (front, right, back,
        left) with the up side above them, the up side with the front side below it and
        the down side with the front side above it. Rows go from top to bottom, columns
        from left to right.
        :param dim: Cube dimension, at least 2 (defaults to the configured one)
        :param cube: Existing configuration to copy, the cube starts in the standard configuration otherwise
        :param event_sink: Callable receiving an event after every change of the configuration
        :param verbose: Verbosity parameter
        """
        self.event_sink = event_sink
        self.verbose = verbose
        self.dim = 0
        self.cube = None
        if cube is None:
            self.set_dimension(rc_conf.dim if dim is None else dim)
        else:
            self._load_cube(cube, dim)

    def _load_cube(self, cube, dim: Optional[int]) -> None:
        cube = np.asarray(cube)
        if cube.ndim != 3 or cube.shape[0] != len(Side) or cube.shape[1] != cube.shape[2]:
            raise ConfigurationError('Incorrect cube format: shape {0}'.format(cube.shape))
        if cube.shape[1] < 2 or (dim is not None and dim != cube.shape[1]):
            raise ConfigurationError('Incorrect cube dimension: {0}'.format(cube.shape[1]))
        if not np.all((cube >= 0) & (cube < len(Color))):
            raise ConfigurationError('Unknown color in cube configuration')
        self.dim = cube.shape[1]
        self.cube = cube.astype('int64')

    def _emit(self, event):
        if self.event_sink is not None:
            self.event_sink(event)
        return event

    def _check_index(self, index: int, what: str) -> None:
        if not 0 <= index < self.dim:
            raise InvalidIndexError('The {0} index must be between 0 and {1}, got {2}'.format(
                what, self.dim - 1, index))

    @property
    def last(self) -> int:
        return self.dim - 1

    def set_dimension(self, dim: int) -> None:
        """
        Changes the dimension of the cube. If the value changes, the cube is reset
        to the standard configuration.
        :param dim: New dimension, at least 2
        """
        if isinstance(dim, bool) or not isinstance(dim, (int, np.integer)) or dim < 2:
            raise ConfigurationError('The dimension must be an integer of two or greater, got {0!r}'.format(dim))
        if dim != self.dim:
            self.dim = int(dim)
            self._emit(DimensionChanged(self.dim))
            self.cube = np.empty((len(Side), self.dim, self.dim), dtype='int64')
            self.reset_to_standard_configuration()
            if self.verbose:
                logger.info('Cube initialized with dimension %d', self.dim)

    def reset_to_standard_configuration(self) -> None:
        for side in Side:
            self.cube[side, :, :] = side.standard_color
            if self.event_sink is not None:
                for row in range(self.dim):
                    for col in range(self.dim):
                        self._emit(FaceChanged(side, row, col))

    def get_face(self, side: Side, row: int, col: int) -> Color:
        self._check_index(row, 'row')
        self._check_index(col, 'column')
        return Color(self.cube[Side(side), row, col])

    def set_face(self, side: Side, row: int, col: int, color: Color) -> FaceChanged:
        self._check_index(row, 'row')
        self._check_index(col, 'column')
        self.cube[Side(side), row, col] = Color(color)
        return self._emit(FaceChanged(Side(side), row, col))

    def center(self, side: Side) -> Color:
        if self.dim % 2 == 0:
            raise ConfigurationError('A cube of even dimension has no center facelets')
        return self.get_face(side, self.dim // 2, self.dim // 2)

    def find_center(self, color: Color) -> Optional[Side]:
        for side in Side:
            if self.center(side) == color:
                return side
        return None

    @staticmethod
    def rotate_face(matrix: np.ndarray, clockwise: bool) -> np.ndarray:
        """
        Rotates a side matrix by 90 degrees into a new array.
        Clockwise: dst[j][dim-1-i] = src[i][j], anticlockwise: dst[dim-1-j][i] = src[i][j]
        """
        return np.rot90(matrix, k=-1 if clockwise else 1).copy()

    def _spin_face(self, side: Side, clockwise: bool) -> None:
        rotated = self.rotate_face(self.cube[side], clockwise)
        self.cube[side] = rotated

    def _cycle(self, lines: List[Tuple[Side, tuple]], forward: bool = True) -> None:
        # lines are given in travel order: the content of each line moves to the next one
        if not forward:
            lines = lines[::-1]
        values = [self.cube[side][line].copy() for side, line in lines]
        for (side, line), value in zip(lines[1:] + lines[:1], values):
            self.cube[side][line] = value

    def _row_lines(self, index: int) -> List[Tuple[Side, tuple]]:
        return [(Side.FRONT, np.s_[index, :]), (Side.LEFT, np.s_[index, :]),
                (Side.BACK, np.s_[index, :]), (Side.RIGHT, np.s_[index, :])]

    def _column_lines(self, index: int) -> List[Tuple[Side, tuple]]:
        # The back side is seen from behind, so its column is flipped upside down and mirrored
        return [(Side.FRONT, np.s_[:, index]), (Side.UP, np.s_[:, index]),
                (Side.BACK, np.s_[::-1, self.last - index]), (Side.DOWN, np.s_[:, index])]

    def _lateral_column_lines(self, index: int) -> List[Tuple[Side, tuple]]:
        # index counts from the front side to the back side
        return [(Side.UP, np.s_[self.last - index, :]), (Side.RIGHT, np.s_[:, index]),
                (Side.DOWN, np.s_[index, ::-1]), (Side.LEFT, np.s_[::-1, self.last - index])]

    def rotate_row(self, index: int, rotation: RowRotation) -> RowRotated:
        """
        Rotates a row of the four lateral sides (index 0 is the upper row).
        Clockwise, as seen from above, the front row goes to the left side.
        """
        self._check_index(index, 'row')
        if not isinstance(rotation, RowRotation):
            raise ConfigurationError('Invalid row rotation: {0!r}'.format(rotation))
        clockwise = rotation == RowRotation.CLOCKWISE
        self._cycle(self._row_lines(index), forward=clockwise)
        if index == 0:
            self._spin_face(Side.UP, clockwise)
        if index == self.last:
            self._spin_face(Side.DOWN, not clockwise)
        return self._emit(RowRotated(index, rotation))

    def rotate_column(self, index: int, rotation: ColumnRotation) -> ColumnRotated:
        """
        Rotates a column of the front, up, back and down sides (index 0 is the left column).
        """
        self._check_index(index, 'column')
        if not isinstance(rotation, ColumnRotation):
            raise ConfigurationError('Invalid column rotation: {0!r}'.format(rotation))
        to_top = rotation == ColumnRotation.TOP
        self._cycle(self._column_lines(index), forward=to_top)
        if index == 0:
            self._spin_face(Side.LEFT, not to_top)
        if index == self.last:
            self._spin_face(Side.RIGHT, to_top)
        return self._emit(ColumnRotated(index, rotation))

    def rotate_lateral_column(self, index: int, rotation: LateralColumnRotation) -> LateralColumnRotated:
        """
        Rotates a lateral column of the up, right, down and left sides (index 0 is the
        layer touching the front side). To the right means clockwise as seen from the front.
        """
        self._check_index(index, 'lateral column')
        if not isinstance(rotation, LateralColumnRotation):
            raise ConfigurationError('Invalid lateral column rotation: {0!r}'.format(rotation))
        clockwise = rotation == LateralColumnRotation.RIGHT
        self._cycle(self._lateral_column_lines(index), forward=clockwise)
        if index == 0:
            self._spin_face(Side.FRONT, clockwise)
        if index == self.last:
            self._spin_face(Side.BACK, not clockwise)
        return self._emit(LateralColumnRotated(index, rotation))

    def rotate_cube(self, rotation: CubeRotation) -> CubeRotated:
        """
        Picks the whole cube up and turns it. Upwise brings the front side up, clockwise
        (seen from above) brings the right side to the front, clockwise from front brings
        the left side up.
        """
        if not isinstance(rotation, CubeRotation):
            raise ConfigurationError('Invalid cube rotation: {0!r}'.format(rotation))
        if rotation in (CubeRotation.CLOCKWISE_FROM_FRONT, CubeRotation.ANTICLOCKWISE_FROM_FRONT):
            clockwise = rotation == CubeRotation.CLOCKWISE_FROM_FRONT
            for index in range(self.dim):
                self._cycle(self._lateral_column_lines(index), forward=clockwise)
            self._spin_face(Side.FRONT, clockwise)
            self._spin_face(Side.BACK, not clockwise)
        else:
            sources, spins = _CUBE_ROTATIONS[rotation]
            previous = self.cube.copy()
            for side, (source, flip) in sources.items():
                self.cube[side] = np.rot90(previous[source], k=2) if flip else previous[source]
            for side, clockwise in spins:
                self._spin_face(side, clockwise)
        return self._emit(CubeRotated(rotation))

    def copy(self) -> 'RubiksCube':
        """Detached copy: same configuration, no event sink."""
        return RubiksCube(cube=self.cube, verbose=self.verbose)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RubiksCube):
            return NotImplemented
        return self.dim == other.dim and np.array_equal(self.cube, other.cube)

    __hash__ = None

    def __str__(self) -> str:
        def letters(side, row):
            return ''.join(Color(color).letter for color in self.cube[side, row])
        padding = ' ' * (self.dim + 1)
        lines = [padding + letters(Side.UP, row) for row in range(self.dim)]
        lines += [' '.join(letters(side, row) for side in (Side.LEFT, Side.FRONT, Side.RIGHT, Side.BACK))
                  for row in range(self.dim)]
        lines += [padding + letters(Side.DOWN, row) for row in range(self.dim)]
        return '\n'.join(lines)

    @staticmethod
    def is_in_standard_configuration(rubiks: 'RubiksCube') -> bool:
        return all(np.all(rubiks.cube[side] == side.standard_color) for side in Side)

    @staticmethod
    def is_with_sane_colors(rubiks: 'RubiksCube') -> bool:
        """
        Every color covers dim * dim facelets and, for odd dimensions, is the center
        of exactly one side.
        """
        counts = np.bincount(rubiks.cube.ravel(), minlength=len(Color))
        if len(counts) != len(Color) or np.any(counts != rubiks.dim ** 2):
            return False
        if rubiks.dim % 2 == 1:
            middle = rubiks.dim // 2
            centers = np.bincount(rubiks.cube[:, middle, middle], minlength=len(Color))
            if np.any(centers != 1):
                return False
        return True
