import logging
import math
import re
from typing import Iterable, List, Optional

from pathgeom.PathErrors import PathParseError
from pathgeom.Vec2 import Vec2
from pathgeom.path_constants import (
    LEGACY_TOKEN_SEPARATORS,
    SVG_COMMAND_MARKER,
    SVG_SEGMENT_SEPARATOR,
)

logger = logging.getLogger(__name__)

# "x,y": two float literals, whitespace allowed before each number but not before the comma
_FLOAT = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
LEGACY_PAIR_RE = re.compile(r"\s*(" + _FLOAT + r"),\s*(" + _FLOAT + r")")

# "x y": two integers; the lookahead stops the first number from giving digits to the second
SVG_PAIR_RE = re.compile(r"\s*([-+]?\d+)(?!\d)\s*([-+]?\d+)")


class PathCodec:
    """Text encodings of a point sequence.

    Two formats exist and they deliberately fail differently: the legacy
    format stops at the first token that is not a point, the SVG-like one
    drops bad segments and carries on. Lenient mode (the default) never
    raises; strict mode raises PathParseError where lenient mode would
    have stopped or skipped.
    """

    @staticmethod
    def _skip_token(text: str, pos: int) -> int:
        n = len(text)
        while pos < n and text[pos] not in LEGACY_TOKEN_SEPARATORS:
            pos += 1
        while pos < n and text[pos] in LEGACY_TOKEN_SEPARATORS:
            pos += 1
        return pos

    @staticmethod
    def parse_legacy(text: str, strict: bool = False) -> List[Vec2]:
        """Parse 'x,y x,y ...'; coordinates are truncated to integers."""
        points: List[Vec2] = []
        pos = 0
        while True:
            m = LEGACY_PAIR_RE.match(text, pos)
            if m is None:
                break
            x, y = float(m.group(1)), float(m.group(2))
            # Overflowing literals such as 1e999 have no integer value
            if not (math.isfinite(x) and math.isfinite(y)):
                if strict:
                    raise PathParseError("coordinate out of range", text, pos)
                break
            points.append(Vec2(x, y).truncated())
            pos = PathCodec._skip_token(text, pos)

        if pos < len(text) and text[pos:].strip():
            if strict:
                raise PathParseError("expected 'x,y'", text, pos)
            logger.debug("legacy path stopped at offset %d of %d", pos, len(text))
        return points

    @staticmethod
    def parse_svg(text: str, strict: bool = False) -> List[Vec2]:
        """Parse 'Mx yLx yL...'. The first character is taken as the command marker."""
        points: List[Vec2] = []
        skipped = 0
        start = 1
        while start < len(text):
            end = text.find(SVG_SEGMENT_SEPARATOR, start)
            if end < 0:
                end = len(text)
            m = SVG_PAIR_RE.match(text[start:end])
            if m is not None:
                points.append(Vec2(int(m.group(1)), int(m.group(2))))
            elif strict:
                raise PathParseError("expected 'x y'", text, start)
            else:
                skipped += 1
            start = end + 1

        if skipped:
            logger.debug("svg path skipped %d malformed segments", skipped)
        return points

    @staticmethod
    def _num(v: float) -> str:
        return str(int(v)) if float(v).is_integer() else repr(float(v))

    @staticmethod
    def format_legacy(points: Iterable[Vec2]) -> str:
        return " ".join(f"{PathCodec._num(p.x)},{PathCodec._num(p.y)}" for p in points)

    @staticmethod
    def format_svg(points: Iterable[Vec2], marker: Optional[str] = None) -> str:
        """Inverse of parse_svg; coordinates are truncated to integers."""
        pairs = [f"{int(p.x)} {int(p.y)}" for p in points]
        if not pairs:
            return ""
        return (marker or SVG_COMMAND_MARKER) + SVG_SEGMENT_SEPARATOR.join(pairs)
