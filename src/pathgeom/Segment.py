from dataclasses import dataclass

from pathgeom.Distance import line_distance, point_distance
from pathgeom.Vec2 import Vec2


@dataclass(frozen=True, slots=True)
class Segment:
    p1: Vec2
    p2: Vec2

    def distance_to(self, p: Vec2) -> float:
        """Shortest distance from p to this finite segment."""
        d, within = line_distance(p, self.p1, self.p2)
        if self.p1 != self.p2 and within:
            return d
        # Off the ends, or zero-length: nearest endpoint wins
        return min(point_distance(p, self.p2), point_distance(p, self.p1))

    def length(self) -> float:
        return point_distance(self.p1, self.p2)
