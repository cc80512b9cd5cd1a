import numpy as np


def squared_perpendicular_distance(point_on_line: np.ndarray, line_direction: np.ndarray, point: np.ndarray) -> float:
    """
    Square of the shortest distance from ``point`` to the line
    ``point_on_line + a * line_direction``.

    A zero direction has no line to project onto; the distance to
    ``point_on_line`` itself is returned.
    """
    d = point - point_on_line
    s2 = float(np.dot(d, d))
    v2 = float(np.dot(line_direction, line_direction))
    if v2 == 0:
        return s2
    b = float(np.dot(line_direction, d))
    return s2 - b * b / v2
