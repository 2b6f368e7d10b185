import logging
import sys
from abc import ABC, abstractmethod
from typing import List

import rubiks_cube_config as rc_conf
from rubiks_cube import RubiksCube


class ResolutionStrategy(ABC):
    def __init__(self, model: RubiksCube, verbose: bool = False) -> None:
        """
        Base class of the resolution strategies. A strategy never changes the cube it
        is given: it works on a private copy and hands back the moves to replay.
        :param model: Cube to be resolved
        :param verbose: Verbosity parameter
        """
        if model is None:
            raise TypeError('model must not be None')
        self.model = model
        self.verbose = verbose
        self.logger = self._create_logger(type(self).__name__.lower(), verbose)

    @staticmethod
    def _create_logger(name: str, verbose: bool) -> logging.Logger:
        logger = logging.getLogger(name)
        if not logger.handlers:
            formatter = logging.Formatter(rc_conf.log_format)
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)
        logger.setLevel(logging.INFO if verbose else logging.WARNING)
        logger.propagate = False
        return logger

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @abstractmethod
    def get_next_moves(self) -> List:
        """
        Computes the moves to perform on the cube
        :return: Ordered list of moves
        :raises NoSolutionError: The strategy does not handle the cube state
        :raises SolverTimeoutError: The iteration budget was exhausted
        """

    def __str__(self) -> str:
        return self.name
