from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

import numpy as np

from pathgeom.Mat22 import Mat22
from pathgeom.PathCodec import PathCodec
from pathgeom.PathSimplifier import PathSimplifier
from pathgeom.Rect import Rect
from pathgeom.Segment import Segment
from pathgeom.Vec2 import Vec2


@dataclass
class Path:
    """Ordered points of one stroke. Order is stroke direction.

    translate, rotate, scale, simplify and make_relative change the path
    in place and return it so calls can be chained. A path belongs to one
    stroke; do not share it between threads while mutating it.
    """

    points: List[Vec2] = field(default_factory=list)

    # Construction

    @staticmethod
    def from_point(p: Vec2) -> Path:
        return Path(points=[p])

    @staticmethod
    def from_points(points: Iterable[Vec2], n: Optional[int] = None) -> Path:
        """Copy points in order; with n, copy only the first n."""
        pts = list(points)
        return Path(points=pts if n is None else pts[:n])

    @staticmethod
    def parse(text: str, strict: bool = False) -> Path:
        """Build from the legacy 'x,y x,y ...' encoding."""
        return Path(points=PathCodec.parse_legacy(text, strict=strict))

    @staticmethod
    def from_svg(text: str, strict: bool = False) -> Path:
        """Build from the SVG-like 'Mx yLx y...' encoding."""
        return Path(points=PathCodec.parse_svg(text, strict=strict))

    def to_text(self) -> str:
        return PathCodec.format_legacy(self.points)

    def to_svg(self) -> str:
        return PathCodec.format_svg(self.points)

    # Sequence protocol

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, i: int) -> Vec2:
        return self.points[i]

    def __iter__(self) -> Iterator[Vec2]:
        return iter(self.points)

    def append(self, p: Vec2) -> None:
        self.points.append(p)

    def first(self) -> Vec2:
        return self.points[0]

    def last(self) -> Vec2:
        return self.points[-1]

    def copy(self) -> Path:
        return Path(points=list(self.points))

    def segments(self) -> Iterator[Segment]:
        for a, b in zip(self.points, self.points[1:]):
            yield Segment(a, b)

    def length(self) -> float:
        return sum(s.length() for s in self.segments())

    def as_array(self) -> np.ndarray:
        """(n, 2) float array, empty paths give shape (0, 2)."""
        return np.array([p.as_tuple() for p in self.points], dtype=float).reshape(-1, 2)

    # Queries

    def bbox(self) -> Rect:
        if not self.points:
            return Rect(Vec2(0, 0), Vec2(0, 0))

        r = Rect(self.points[0], self.points[0])
        for p in self.points:
            r = r.expand(p)
        return r

    # Mutation

    def make_relative(self) -> Path:
        """Rewrite every point as an offset from the original first point."""
        if self.points:
            anchor = self.points[0]
            self.points = [p - anchor for p in self.points]
        return self

    def translate(self, offset: Vec2) -> Path:
        self.points = [p + offset for p in self.points]
        return self

    def rotate(self, rot: Mat22) -> Path:
        self.points = [rot.apply(p) for p in self.points]
        return self

    def scale(self, factor: float) -> Path:
        self.points = [p * factor for p in self.points]
        return self

    def simplify(self, threshold: float) -> Path:
        self.points = PathSimplifier.simplify(self.points, threshold)
        return self
