from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

import rubiks_cube_config as rc_conf
from resolution_strategy import ResolutionStrategy
from rubiks_cube import Color, RubiksCube, Side
from rubiks_cube_exceptions import ConfigurationError, NoSolutionError, SolverTimeoutError
from rubiks_cube_moves import Move, format_moves, parse_moves
from rubiks_cube_positions import (Corner, Edge, UPPER_CORNERS, LOWER_CORNERS, UPPER_EDGES,
                                   MIDDLE_EDGES, LOWER_EDGES, get_corner, get_edge, find_corner,
                                   is_corner_in_place, is_edge_in_place)


class Phase(Enum):
    ORIENT = 'orient the reference side up'
    CROSS = 'first layer cross'
    CORNERS = 'first layer corners'
    SECOND_LAYER = 'second layer edges'
    LAST_LAYER = 'last layer (not implemented)'


NEXT_PHASE = {
    Phase.ORIENT: Phase.CROSS,
    Phase.CROSS: Phase.CORNERS,
    Phase.CORNERS: Phase.SECOND_LAYER,
    Phase.SECOND_LAYER: Phase.LAST_LAYER,
    Phase.LAST_LAYER: None
}

# Lateral sides in the order a D (or U') quarter turn carries pieces
LATERAL_SIDES = (Side.FRONT, Side.RIGHT, Side.BACK, Side.LEFT)
FACE_MOVE = {Side.FRONT: 'F', Side.RIGHT: 'R', Side.BACK: 'B', Side.LEFT: 'L'}
UPPER_EDGE = {Side.FRONT: Edge.UF, Side.RIGHT: Edge.UR, Side.BACK: Edge.UB, Side.LEFT: Edge.UL}
# Side reached by the upper edge of a lateral side after a U turn
AFTER_U = {Side.FRONT: Side.LEFT, Side.LEFT: Side.BACK, Side.BACK: Side.RIGHT, Side.RIGHT: Side.FRONT}

TO_UP = {Side.UP: '', Side.FRONT: 'X', Side.BACK: "X'", Side.DOWN: 'X2', Side.LEFT: 'Z', Side.RIGHT: "Z'"}
TO_DOWN = {Side.DOWN: '', Side.BACK: 'X', Side.FRONT: "X'", Side.UP: 'X2', Side.RIGHT: 'Z', Side.LEFT: "Z'"}
TO_FRONT = {Side.FRONT: '', Side.RIGHT: 'Y', Side.BACK: 'Y2', Side.LEFT: "Y'"}
CORNER_TO_URF = {Corner.URF: '', Corner.UBR: 'Y', Corner.ULB: 'Y2', Corner.UFL: "Y'"}
EDGE_TO_FR = {Edge.FR: '', Edge.BR: 'Y', Edge.BL: 'Y2', Edge.FL: "Y'"}

# Middle edge -> (quarter turn dropping it to the down layer, its undo, side it lands under)
MIDDLE_EDGE_DROP = {
    Edge.FR: ('F', "F'", Side.FRONT),
    Edge.FL: ("F'", 'F', Side.FRONT),
    Edge.BL: ('B', "B'", Side.BACK),
    Edge.BR: ("B'", 'B', Side.BACK)
}
BELOW = {Corner.URF: Corner.DFR, Corner.UFL: Corner.DLF, Corner.ULB: Corner.DBL, Corner.UBR: Corner.DRB}
# Lower corners in the order a D quarter turn carries pieces
LOWER_CORNER_CYCLE = (Corner.DFR, Corner.DRB, Corner.DBL, Corner.DLF)

CORNER_EXTRACTION = "R' D' R"
CORNER_INSERTION = "R' D' R D"
RIGHT_EDGE_INSERTION = "U R U' R' U' F' U F"
LEFT_EDGE_INSERTION = "U' L' U L U F U' F'"


class Singmaster(ResolutionStrategy):
    def __init__(self, model: RubiksCube, reference_color: Optional[Union[Color, str]] = None,
                 max_iterations: Optional[int] = None, verbose: bool = False) -> None:
        """
        Layer by layer resolution: cross and corners of the reference color first,
        then the edges of the second layer.
        http://www.cs.swarthmore.edu/~knerr/helps/rcube.html
        :param model: Cube to be resolved, of dimension three and with sane colors
        :param reference_color: Color of the first layer (defaults to the configured one)
        :param max_iterations: Budget of phase loop iterations before giving up with a timeout
        :param verbose: Verbosity parameter
        """
        super().__init__(model, verbose)
        if model.dim != 3:
            raise ConfigurationError('The dimension of the cube must be equal to three')
        if not RubiksCube.is_with_sane_colors(model):
            raise ConfigurationError('The cube has not sane colors')
        self.reference_color = self._load_color(rc_conf.reference_color if reference_color is None
                                                else reference_color)
        self.max_iterations = rc_conf.max_iterations if max_iterations is None else max_iterations
        if self.max_iterations < 0:
            raise ConfigurationError('max_iterations must not be negative')
        self.phase = None
        self._cube = None
        self._moves = []
        self._iterations = 0

    @staticmethod
    def _load_color(color: Union[Color, str]) -> Color:
        if isinstance(color, Color):
            return color
        try:
            return Color[str(color).upper()]
        except KeyError:
            raise ConfigurationError('Unknown color: {0!r}'.format(color)) from None

    @property
    def name(self) -> str:
        return 'Singmaster'

    @property
    def description(self) -> str:
        return "Singmaster's method solves the cube layer by layer."

    def get_next_moves(self) -> List[Move]:
        self._cube = self.model.copy()
        self._moves = []
        self._iterations = 0
        steps = {
            Phase.ORIENT: self._orient_reference_up,
            Phase.CROSS: self._solve_cross,
            Phase.CORNERS: self._solve_first_layer_corners,
            Phase.SECOND_LAYER: self._solve_second_layer,
            Phase.LAST_LAYER: self._solve_last_layer
        }
        phase = Phase.ORIENT
        while phase is not None:
            self.phase = phase
            self.logger.info("Phase: {0}".format(phase.value))
            steps[phase]()
            phase = NEXT_PHASE[phase]
        self.logger.info("{0} moves found".format(len(self._moves)))
        return list(self._moves)

    # Helpers

    def _perform(self, notation: str) -> None:
        moves = parse_moves(self._cube, notation)
        for move in moves:
            move.perform()
        self._moves.extend(moves)
        if moves:
            self.logger.debug(format_moves(moves))

    def _tick(self) -> None:
        self._iterations += 1
        if self._iterations > self.max_iterations:
            raise SolverTimeoutError(self.max_iterations)

    def _orient(self, moves_by_side: dict) -> None:
        side = self._cube.find_center(self.reference_color)
        if side is None:
            raise NoSolutionError('Malformed cube, no {0} side found'.format(self.reference_color.name.lower()))
        self._perform(moves_by_side[side])

    def _side_with_center(self, color: Color, sides: Sequence[Side] = LATERAL_SIDES) -> Side:
        for side in sides:
            if self._cube.center(side) == color:
                return side
        raise NoSolutionError('No lateral side has a {0} center'.format(color.name.lower()))

    def _other_color(self, colors: Tuple[Color, ...]) -> Color:
        others = [color for color in colors if color != self.reference_color]
        if len(others) != 1:
            raise NoSolutionError('Edge with colors {0} cannot be placed'.format(
                [color.name.lower() for color in colors]))
        return others[0]

    def _turn_layer(self, layer: str, steps: int) -> None:
        """Turns the up or down layer so that its pieces travel steps sides along front, right, back, left."""
        forward, backward = {'D': ('D', "D'"), 'U': ("U'", 'U')}[layer]
        self._perform({0: '', 1: forward, 2: forward + ' ' + forward, 3: backward}[steps % 4])

    # Phase 1

    def _orient_reference_up(self) -> None:
        self._orient(TO_UP)

    # Phase 2

    def _is_cross_solved(self) -> bool:
        return all(is_edge_in_place(self._cube, edge) for edge in UPPER_EDGES)

    def _solve_cross(self) -> None:
        while not self._is_cross_solved():
            self._tick()
            self._seat_cross_edge(self._find_cross_edge())

    def _find_cross_edge(self) -> Edge:
        for edge in Edge:
            if self.reference_color not in get_edge(self._cube, edge):
                continue
            if edge in UPPER_EDGES and is_edge_in_place(self._cube, edge):
                continue
            return edge
        raise NoSolutionError('No {0} edge left for the cross'.format(self.reference_color.name.lower()))

    def _seat_cross_edge(self, edge: Edge) -> None:
        target = self._side_with_center(self._other_color(get_edge(self._cube, edge)))
        undo = ''
        # Bring the edge to the down layer without breaking the edges already seated
        if edge in UPPER_EDGES:
            side = edge.sides[1]
            self._perform(FACE_MOVE[side] + '2')
        elif edge in LOWER_EDGES:
            side = edge.sides[1]
        else:
            drop, undo, side = MIDDLE_EDGE_DROP[edge]
            self._perform(drop)
        steps = (LATERAL_SIDES.index(target) - LATERAL_SIDES.index(side)) % 4
        self._turn_layer('D', steps)
        if undo and steps:
            self._perform(undo)
        face = FACE_MOVE[target]
        self._perform(face + '2')
        if get_edge(self._cube, UPPER_EDGE[target])[0] != self.reference_color:
            # Flipped: F' U L' U' (or the equivalent on the target side)
            self._perform("{0}' U {1}' U'".format(face, FACE_MOVE[AFTER_U[target]]))

    # Phase 3

    def _solve_first_layer_corners(self) -> None:
        self._orient(TO_UP)
        while not all(is_corner_in_place(self._cube, corner) for corner in UPPER_CORNERS):
            self._tick()
            self._seat_corner(self._find_corner())

    def _find_corner(self) -> Corner:
        for corner in Corner:
            if self.reference_color in get_corner(self._cube, corner) \
                    and not is_corner_in_place(self._cube, corner):
                return corner
        raise NoSolutionError('No {0} corners found'.format(self.reference_color.name.lower()))

    def _corner_target(self, colors: Tuple[Color, ...]) -> Corner:
        others = set(colors) - {self.reference_color}
        for corner in UPPER_CORNERS:
            if {self._cube.center(side) for side in corner.sides[1:]} == others:
                return corner
        raise NoSolutionError('Corner with colors {0} has no place in the first layer'.format(
            [color.name.lower() for color in colors]))

    def _seat_corner(self, corner: Corner) -> None:
        colors = get_corner(self._cube, corner)
        target = self._corner_target(colors)
        if corner in UPPER_CORNERS:
            # Misplaced in the first layer: move it to the down layer
            self._perform(CORNER_TO_URF[corner])
            self._perform(CORNER_EXTRACTION)
            corner = find_corner(self._cube, colors)
            target = self._corner_target(colors)
        if corner not in LOWER_CORNERS:
            raise NoSolutionError('Corner expected in the down layer, found in {0}'.format(corner))
        steps = LOWER_CORNER_CYCLE.index(BELOW[target]) - LOWER_CORNER_CYCLE.index(corner)
        self._turn_layer('D', steps)
        # Target above the front right corner, keep the same front face until it is oriented
        self._perform(CORNER_TO_URF[target])
        for _ in range(6):
            self._perform(CORNER_INSERTION)
            if is_corner_in_place(self._cube, Corner.URF):
                return
        raise NoSolutionError('Corner with colors {0} cannot be oriented'.format(
            [color.name.lower() for color in colors]))

    # Phase 4

    def _is_second_layer_solved(self) -> bool:
        return all(self._cube.get_face(side, 1, col) == self._cube.center(side)
                   for side in LATERAL_SIDES for col in range(3))

    def _solve_second_layer(self) -> None:
        self._orient(TO_DOWN)
        while not self._is_second_layer_solved():
            self._tick()
            self._insert_second_layer_edge()

    def _insert_second_layer_edge(self) -> None:
        far_color = self._cube.center(Side.UP)
        edge = next((edge for edge in UPPER_EDGES if far_color not in get_edge(self._cube, edge)), None)
        if edge is None:
            # Every upper edge belongs to the last layer: pop a middle edge out
            middle_edge = self._find_middle_edge(far_color)
            self._perform(EDGE_TO_FR[middle_edge])
            self._perform(RIGHT_EDGE_INSERTION)
            return
        top_color, lateral_color = get_edge(self._cube, edge)
        target = self._side_with_center(lateral_color)
        steps = LATERAL_SIDES.index(target) - LATERAL_SIDES.index(edge.sides[1])
        self._turn_layer('U', steps)
        self._perform(TO_FRONT[target])
        if top_color == self._cube.center(Side.RIGHT):
            self._perform(RIGHT_EDGE_INSERTION)
        elif top_color == self._cube.center(Side.LEFT):
            self._perform(LEFT_EDGE_INSERTION)
        else:
            raise NoSolutionError('Edge with colors {0} has no place in the second layer'.format(
                [top_color.name.lower(), lateral_color.name.lower()]))

    def _find_middle_edge(self, far_color: Color) -> Edge:
        candidates = [edge for edge in MIDDLE_EDGES if far_color not in get_edge(self._cube, edge)]
        if not candidates:
            raise NoSolutionError('Must have a suitable edge in the middle layer')
        # Better if it is not already in place
        for edge in candidates:
            if not is_edge_in_place(self._cube, edge):
                return edge
        return candidates[0]

    # Phase 5

    def _solve_last_layer(self) -> None:
        self.logger.warning("Last layer resolution is not implemented, "
                            "the moves only solve the first two layers")
