"""Models read from Wavefront OBJ files."""

from __future__ import annotations

from dados.face import Face
from dados.model import Model, split_tokens
from dados.vertex import Vertex


class ObjModel(Model):
    """A model loaded from an OBJ file (vertices, faces and object name)."""

    def __init__(self, fname: str | None = None) -> None:
        super().__init__()
        if fname is not None:
            self.load(fname)

    def load(self, fname: str) -> None:
        """Replace the model's contents with those of the OBJ file ``fname``."""
        self.name = ""
        self.vertices = []
        self.faces = []
        with open(fname, encoding="utf-8") as handle:
            for line in handle:
                self._parse_line(line.rstrip("\r\n"))

    def _parse_line(self, line: str) -> None:
        elems = split_tokens(line, " ")
        if not elems:
            return
        keyword, args = elems[0], elems[1:]
        if keyword == "o" and args:
            self.name = args[0]
        elif keyword == "g" and args and not self.name:
            self.name = args[0]
        elif keyword == "v":
            if len(args) < 3:
                raise ValueError(f"vertex line needs three coordinates: {line!r}")
            self.vertices.append(Vertex(float(args[0]), float(args[1]), float(args[2])))
        elif keyword == "f":
            indices = [int(split_tokens(arg, "/")[0]) - 1 for arg in args]
            self.faces.append(Face(tuple(indices)))