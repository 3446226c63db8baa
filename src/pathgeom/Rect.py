from dataclasses import dataclass

from pathgeom.Vec2 import Vec2


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned box: tl is the min corner, br the max corner."""

    tl: Vec2
    br: Vec2

    @property
    def width(self) -> float:
        return self.br.x - self.tl.x

    @property
    def height(self) -> float:
        return self.br.y - self.tl.y

    def centroid(self) -> Vec2:
        return Vec2((self.tl.x + self.br.x) * 0.5, (self.tl.y + self.br.y) * 0.5)

    def contains(self, p: Vec2) -> bool:
        return self.tl.x <= p.x <= self.br.x and self.tl.y <= p.y <= self.br.y

    def expand(self, p: Vec2) -> "Rect":
        return Rect(Vec2(min(self.tl.x, p.x), min(self.tl.y, p.y)),
                    Vec2(max(self.br.x, p.x), max(self.br.y, p.y)))

    def union(self, other: "Rect") -> "Rect":
        return self.expand(other.tl).expand(other.br)
