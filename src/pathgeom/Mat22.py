import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from pathgeom.Vec2 import Vec2


@dataclass(frozen=True, slots=True)
class Mat22:
    """2x2 linear transform stored as its two column vectors."""

    col1: Vec2
    col2: Vec2

    def apply(self, v: Vec2) -> Vec2:
        return Vec2(self.col1.x * v.x + self.col2.x * v.y,
                    self.col1.y * v.x + self.col2.y * v.y)

    def __matmul__(self, other: "Mat22") -> "Mat22":
        return Mat22(self.apply(other.col1), self.apply(other.col2))

    def as_array(self) -> np.ndarray:
        return np.array([[self.col1.x, self.col2.x],
                         [self.col1.y, self.col2.y]], dtype=float)

    @staticmethod
    def from_array(m: Sequence[Sequence[float]]) -> "Mat22":
        a = np.array(m, dtype=float).reshape(2, 2)
        return Mat22(Vec2(float(a[0, 0]), float(a[1, 0])),
                     Vec2(float(a[0, 1]), float(a[1, 1])))

    @staticmethod
    def identity() -> "Mat22":
        return Mat22(Vec2(1.0, 0.0), Vec2(0.0, 1.0))

    @staticmethod
    def rotation(angle: float) -> "Mat22":
        c, s = math.cos(angle), math.sin(angle)
        return Mat22(Vec2(c, s), Vec2(-s, c))

    @staticmethod
    def rotation_deg(angle_deg: float) -> "Mat22":
        return Mat22.rotation(math.radians(angle_deg))
