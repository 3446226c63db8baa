import json
from dataclasses import dataclass

from pathgeom.PathSet import PathSet
from pathgeom.path_constants import JSON_INDENT


@dataclass
class JsonExporter:

    @staticmethod
    def to_json(drawing: PathSet) -> str:
        """JSON text: { "paths": [ [[x,y], ...], ... ] }"""
        obj = {
            "paths": [[[p.x, p.y] for p in path] for path in drawing.paths],
        }
        return json.dumps(obj, ensure_ascii=False, indent=JSON_INDENT, separators=(",", ":"))

    @staticmethod
    def export(drawing: PathSet, path: str) -> None:
        data = JsonExporter.to_json(drawing)
        if path == "-" or path == "stdout":
            print(data)
        else:
            with open(path, "w", encoding="utf-8") as f:
                f.write(data)
