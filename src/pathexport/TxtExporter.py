from dataclasses import dataclass

from pathgeom.PathSet import PathSet


@dataclass
class TxtExporter:

    @staticmethod
    def to_text(drawing: PathSet, fmt: str = "legacy") -> str:
        """One path per line, 'x1,y1 x2,y2 ...' or 'Mx1 y1Lx2 y2...'."""
        if fmt == "svg":
            lines = [path.to_svg() for path in drawing.paths]
        else:
            lines = [path.to_text() for path in drawing.paths]
        return "\n".join(lines) + "\n"

    @staticmethod
    def export(drawing: PathSet, path: str, fmt: str = "legacy") -> None:
        data = TxtExporter.to_text(drawing, fmt)
        if path == "-" or path == "stdout":
            print(data, end="")
        else:
            with open(path, "w", encoding="utf-8") as f:
                f.write(data)
