from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from pathgeom.Mat22 import Mat22
from pathgeom.Path import Path
from pathgeom.PathErrors import PathParseError
from pathgeom.PathSet import PathSet
from pathgeom.Vec2 import Vec2
from pathgeom.path_constants import DEFAULT_SIMPLIFY_THRESHOLD, SVG_COMMAND_MARKER
from pathexport.JsonExporter import JsonExporter
from pathexport.TxtExporter import TxtExporter

logger = logging.getLogger(__name__)


def parse_line(line: str, fmt: str = "auto", strict: bool = False) -> Path:
    """Parse one stroke. 'auto' picks SVG-like when the line starts with the command marker."""
    line = line.strip()
    if fmt == "svg" or (fmt == "auto" and line.startswith(SVG_COMMAND_MARKER)):
        return Path.from_svg(line, strict=strict)
    return Path.parse(line, strict=strict)


def read_paths(stream: TextIO, fmt: str = "auto", strict: bool = False) -> PathSet:
    paths: List[Path] = []
    for lineno, line in enumerate(stream, start=1):
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        path = parse_line(line, fmt, strict)
        logger.debug("line %d: %d points", lineno, len(path))
        paths.append(path)
    return PathSet(paths=paths)


def linear_transform(args: argparse.Namespace) -> Optional[Mat22]:
    """Rotation followed by the optional --matrix, or None when neither is given."""
    xform = Mat22.rotation_deg(args.rotate) if args.rotate else None
    if args.matrix:
        m = Mat22.from_array([args.matrix[:2], args.matrix[2:]])
        xform = m if xform is None else m @ xform
    return xform


def transform_paths(drawing: PathSet, args: argparse.Namespace) -> None:
    """Apply the requested transforms in a fixed order: relative, scale, rotate/matrix, translate."""
    xform = linear_transform(args)
    for path in drawing.paths:
        if args.relative:
            path.make_relative()
        if args.scale is not None:
            path.scale(args.scale)
        if xform is not None:
            path.rotate(xform)
        if args.translate:
            path.translate(Vec2(*args.translate))


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        description="Parse, transform and simplify drawn stroke paths")
    ap.add_argument("--input", dest="input", default="-", help="Input file, one path per line (default: stdin)")
    ap.add_argument("--format", choices=("auto", "legacy", "svg"), default="auto",
                    help="Input encoding (default: auto, a leading 'M' means SVG-like)")
    ap.add_argument("--strict", action="store_true", help="Fail on malformed input instead of skipping it")
    ap.add_argument("--relative", action="store_true", help="Make every path relative to its first point")
    ap.add_argument("--scale", type=float, help="Scale factor")
    ap.add_argument("--rotate", type=float, default=0.0, help="Rotation in degrees about the origin")
    ap.add_argument("--translate", type=float, nargs=2, metavar=("DX", "DY"), help="Translation offset")
    ap.add_argument("--matrix", type=float, nargs=4, metavar=("A", "B", "C", "D"),
                    help="2x2 linear transform, row-major, applied after --rotate")
    ap.add_argument("--simplify", type=float, nargs="?", const=DEFAULT_SIMPLIFY_THRESHOLD, metavar="THRESHOLD",
                    help=f"Simplify with the given threshold (default: {DEFAULT_SIMPLIFY_THRESHOLD})")
    ap.add_argument("--export-json", metavar="PATH", help="Write paths to JSON (use '-' for stdout)")
    ap.add_argument("--export-txt", metavar="PATH", help="Write paths to TXT (use '-' for stdout)")
    ap.add_argument("--txt-format", choices=("legacy", "svg"), default="legacy", help="Encoding for --export-txt")
    ap.add_argument("--view", action="store_true", help="Open the 2D viewer")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if args.input == "-":
            drawing = read_paths(sys.stdin, args.format, args.strict)
        else:
            with open(args.input, "r", encoding="utf-8") as f:
                drawing = read_paths(f, args.format, args.strict)
    except PathParseError as ex:
        print(f"Parse error: {ex}", file=sys.stderr)
        return 1
    except OSError as ex:
        print(f"Cannot read input: {ex}", file=sys.stderr)
        return 1

    transform_paths(drawing, args)
    before = PathSet(paths=[p.copy() for p in drawing.paths]) if args.view else None
    if args.simplify is not None:
        drawing.simplify(args.simplify)

    r = drawing.bounds()
    print(f"Loaded paths: {len(drawing.paths)}", file=sys.stderr)
    print(f"Bounds: min=({r.tl.x:g},{r.tl.y:g}) max=({r.br.x:g},{r.br.y:g})", file=sys.stderr)
    print(f"Total points: {drawing.point_count()}", file=sys.stderr)

    try:
        if args.export_json:
            JsonExporter.export(drawing, args.export_json)
        if args.export_txt:
            TxtExporter.export(drawing, args.export_txt, args.txt_format)
    except OSError as ex:
        print(f"Cannot write output: {ex}", file=sys.stderr)
        return 1

    if args.view:
        from pathview.PathViewer import show_paths
        show_paths(drawing, before=before)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
