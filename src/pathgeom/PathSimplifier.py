import logging
from typing import List, Sequence

from pathgeom.Segment import Segment
from pathgeom.Vec2 import Vec2

logger = logging.getLogger(__name__)


class PathSimplifier:
    """Douglas-Peucker style reduction of a point sequence.

    Both entry points are pure: they read the input points and return new
    data, the caller decides what to do with it.
    """

    @staticmethod
    def _furthest(points: Sequence[Vec2], first: int, last: int, threshold: float) -> int:
        """Index of the interior point furthest from the chord, or -1.

        A point only counts if it is strictly further than the running
        maximum, which starts at threshold. Ties keep the earliest index.
        """
        chord = Segment(points[first], points[last])
        furthest_dist = threshold
        furthest_index = -1
        for i in range(first + 1, last):
            d = chord.distance_to(points[i])
            if d > furthest_dist:
                furthest_dist = d
                furthest_index = i
        return furthest_index

    @staticmethod
    def kept_indices(points: Sequence[Vec2], threshold: float) -> List[int]:
        """Sorted indices of the points that survive simplification.

        The endpoints always survive. Spans are split at their furthest
        point until no interior point deviates from its chord by more than
        threshold. Spans are processed from an explicit work list so very
        long strokes cannot hit the interpreter recursion limit.
        """
        n = len(points)
        if n == 0:
            return []
        keep = {0, n - 1}
        spans = [(0, n - 1)]
        while spans:
            first, last = spans.pop()
            if last - first <= 1:
                continue
            idx = PathSimplifier._furthest(points, first, last, threshold)
            if idx < 0:
                continue
            keep.add(idx)
            spans.append((idx, last))
            spans.append((first, idx))
        return sorted(keep)

    @staticmethod
    def dedupe(points: Sequence[Vec2]) -> List[Vec2]:
        """Drop every point equal to its immediate predecessor."""
        out: List[Vec2] = []
        for p in points:
            if not out or p != out[-1]:
                out.append(p)
        return out

    @staticmethod
    def simplify(points: Sequence[Vec2], threshold: float) -> List[Vec2]:
        kept = [points[i] for i in PathSimplifier.kept_indices(points, threshold)]
        out = PathSimplifier.dedupe(kept)
        logger.debug("simplify %s %dpts to %dpts", threshold, len(points), len(out))
        return out
