from dataclasses import dataclass
import math
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Vec2:
    x: float
    y: float
    def as_tuple(self) -> Tuple[float, float]: return (self.x, self.y)
    def __add__(self, o: "Vec2") -> "Vec2": return Vec2(self.x + o.x, self.y + o.y)
    def __sub__(self, o: "Vec2") -> "Vec2": return Vec2(self.x - o.x, self.y - o.y)
    def __neg__(self) -> "Vec2": return Vec2(-self.x, -self.y)
    def __mul__(self, k: float) -> "Vec2": return Vec2(self.x * k, self.y * k)
    __rmul__ = __mul__
    def dot(self, o: "Vec2") -> float: return self.x * o.x + self.y * o.y
    def cross(self, o: "Vec2") -> float: return self.x * o.y - self.y * o.x
    def length(self) -> float: return math.hypot(self.x, self.y)

    def normalized(self) -> Tuple["Vec2", float]:
        """Return (unit vector, original length). A zero vector stays zero."""
        mag = self.length()
        if mag == 0.0:
            return Vec2(0.0, 0.0), 0.0
        return Vec2(self.x / mag, self.y / mag), mag

    def truncated(self) -> "Vec2":
        # int() truncates toward zero, same as a C cast
        return Vec2(int(self.x), int(self.y))
