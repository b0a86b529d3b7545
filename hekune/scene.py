#
# PROJECT: hekune
# MODULE: hekune/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3, ORIGIN


class Grid:
    """
    Floor grid of unit cells on the plane y = ``height``.

    Covers x and z in [-extent, extent]; every cell contributes its -z->+z and
    -x->+x edge, so the far rim is open exactly like the reference grid.
    """

    def __init__(self, extent: int = 8, height: float = 1.0):
        self.extent = extent
        self.height = height

    def segments(self, offset: Vec3):
        n, h = self.extent, self.height
        for z in range(-n, n):
            for x in range(-n, n):
                yield Vec3(x, h, z) + offset, Vec3(x, h, z + 1) + offset
        for z in range(-n, n):
            for x in range(-n, n):
                yield Vec3(x, h, z) + offset, Vec3(x + 1, h, z) + offset


class Scene:
    """
    Ordered list of scene objects, each placed at a world-space offset.

    A scene object is anything with ``segments(offset)`` yielding pairs of
    world-space Vec3 endpoints.  The same object may be added several times.
    """

    def __init__(self):
        self.objects = []  # list of (object, Vec3 offset)

    def add(self, obj, translation=ORIGIN):
        if not isinstance(translation, Vec3):
            translation = Vec3.from_iter(translation)
        self.objects.append((obj, translation))

    def clear(self):
        self.objects.clear()

    def segments(self):
        for obj, offset in self.objects:
            yield from obj.segments(offset)
