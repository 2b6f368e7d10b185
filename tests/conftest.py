import pytest

from rubiks_cube import RubiksCube
from rubiks_cube_events import EventRecorder


@pytest.fixture
def cube():
    return RubiksCube()


@pytest.fixture
def recorder():
    return EventRecorder()


@pytest.fixture
def observed_cube(recorder):
    rubiks = RubiksCube(event_sink=recorder)
    recorder.clear()
    return rubiks
