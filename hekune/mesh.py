#
# PROJECT: hekune
# MODULE: hekune/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .math_utils import Vec3

logger = logging.getLogger(__name__)


class Mesh:
    """
    Wireframe geometry: vertices plus polygon faces (vertex index lists).

    Only the face outlines are drawn; ``edges()`` yields each shared edge once.
    """

    def __init__(self, filename=None):
        self.vertices = []
        self.faces = []
        if filename:
            self.load_from_obj(filename)
        else:
            self._make_demo_cube()

    def load_from_obj(self, filename):
        """Read ``v`` and ``f`` records from a Wavefront OBJ file."""
        try:
            with open(filename, 'r') as f:
                for line in f:
                    if line.startswith('v '):
                        self.vertices.append(Vec3.from_iter(float(x) for x in line.split()[1:4]))
                    elif line.startswith('f '):
                        # v/vt/vn records: only the vertex index matters
                        face = [int(x.split('/')[0]) - 1 for x in line.split()[1:]]
                        self.faces.append(face)
        except (OSError, ValueError) as e:
            logger.warning("Could not load '%s': %s", filename, e)
            self.vertices, self.faces = [], []

        count = len(self.vertices)
        valid = [face for face in self.faces if all(0 <= i < count for i in face)]
        if len(valid) != len(self.faces):
            logger.warning("Dropped %d faces with out-of-range vertex indices from '%s'",
                           len(self.faces) - len(valid), filename)
        self.faces = valid

        if not self.vertices or not self.faces:
            logger.warning("'%s' has no usable geometry, using the demo cube", filename)
            self._make_demo_cube()

    def _make_demo_cube(self):
        """Unit cube centred at the origin."""
        corners = [
            (-1, -1, -1), ( 1, -1, -1), ( 1,  1, -1), (-1,  1, -1),
            (-1, -1,  1), ( 1, -1,  1), ( 1,  1,  1), (-1,  1,  1),
        ]
        self.vertices = [Vec3(*c) for c in corners]
        self.faces = [
            [0, 1, 2, 3],  # front
            [5, 4, 7, 6],  # back
            [4, 0, 3, 7],  # left
            [1, 5, 6, 2],  # right
            [3, 2, 6, 7],  # top
            [4, 5, 1, 0],  # bottom
        ]

    def edges(self):
        seen = set()
        for face in self.faces:
            for i in range(len(face)):
                a, b = face[i], face[(i + 1) % len(face)]
                key = (a, b) if a < b else (b, a)
                if a != b and key not in seen:
                    seen.add(key)
                    yield key

    def segments(self, offset: Vec3):
        verts = self.vertices
        for a, b in self.edges():
            yield verts[a] + offset, verts[b] + offset

    @classmethod
    def cube(cls):
        return cls()

    @classmethod
    def from_obj(cls, filename):
        return cls(filename)
