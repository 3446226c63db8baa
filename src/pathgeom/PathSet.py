from dataclasses import dataclass, field
from typing import List

from pathgeom.Path import Path
from pathgeom.Rect import Rect
from pathgeom.Vec2 import Vec2


@dataclass
class PathSet:
    """All the strokes of one drawing or level."""

    paths: List[Path] = field(default_factory=list)

    def bounds(self) -> Rect:
        """Union of the non-empty paths' boxes; origin box when there are none."""
        boxes = [p.bbox() for p in self.paths if len(p)]
        if not boxes:
            return Rect(Vec2(0, 0), Vec2(0, 0))
        r = boxes[0]
        for b in boxes[1:]:
            r = r.union(b)
        return r

    def point_count(self) -> int:
        return sum(len(p) for p in self.paths)

    def translate(self, offset: Vec2) -> "PathSet":
        for path in self.paths:
            path.translate(offset)
        return self

    def simplify(self, threshold: float) -> "PathSet":
        for path in self.paths:
            path.simplify(threshold)
        return self
