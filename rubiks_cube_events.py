import collections

DimensionChanged = collections.namedtuple('DimensionChanged', 'dimension')
FaceChanged = collections.namedtuple('FaceChanged', 'side row col')
RowRotated = collections.namedtuple('RowRotated', 'index rotation')
ColumnRotated = collections.namedtuple('ColumnRotated', 'index rotation')
LateralColumnRotated = collections.namedtuple('LateralColumnRotated', 'index rotation')
CubeRotated = collections.namedtuple('CubeRotated', 'rotation')


class EventRecorder(list):
    """
    Event sink keeping every received event in order of emission.
    Pass an instance as the event_sink of a RubiksCube.
    """
    def __call__(self, event) -> None:
        self.append(event)

    def of_type(self, event_type) -> list:
        return [event for event in self if isinstance(event, event_type)]
