"""Models read from ASCII PLY files."""

from __future__ import annotations

import re

from dados.face import Face
from dados.model import Model, split_tokens
from dados.vertex import Vertex


class PlyModel(Model):
    """A model loaded from an ASCII PLY file.

    After the header, lines of exactly three values are vertices and lines
    of more than three values are faces (a count followed by indices).
    """

    def __init__(self, fname: str | None = None) -> None:
        super().__init__()
        if fname is not None:
            self.load(fname)

    def load(self, fname: str) -> None:
        """Replace the model's contents with those of the PLY file ``fname``."""
        self.name = re.split(r"[/\\]", fname)[-1]
        self.vertices = []
        self.faces = []
        with open(fname, encoding="utf-8") as handle:
            lines = (line.rstrip("\r\n") for line in handle)
            for line in lines:
                words = line.split()
                if words and words[0] == "end_header":
                    break
            for line in lines:
                self._parse_line(line)

    def _parse_line(self, line: str) -> None:
        elems = split_tokens(line, " ")
        if len(elems) == 3:
            self.vertices.append(Vertex(*(float(e) for e in elems)))
        elif len(elems) > 3:
            self.faces.append(Face(tuple(int(e) for e in elems[1:])))