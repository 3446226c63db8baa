from typing import Tuple

from pathgeom.Vec2 import Vec2


def point_distance(a: Vec2, b: Vec2) -> float:
    """Euclidean distance between two points."""
    return (a - b).length()


def line_distance(p: Vec2, l1: Vec2, l2: Vec2) -> Tuple[float, bool]:
    """Distance from p to the infinite line through l1, l2.

    Also returns whether the projection of p falls between l1 and l2
    (inclusive). When l1 == l2 the direction is a zero vector: the distance
    comes back as 0 and the flag as True, so callers must check for that
    case themselves (see Segment.distance_to).
    """
    direction, mag = (l2 - l1).normalized()
    w = p - l1
    dist = w.cross(direction)
    dot = direction.dot(w)
    return abs(dist), 0.0 <= dot <= mag
