#
# PROJECT: hekune
# MODULE: hekune/transform.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3, ORIGIN, X_AXIS, Y_AXIS, Z_AXIS


class Transform:
    """
    Position plus yaw/pitch/roll (radians) describing an oriented frame.

    Orientation is always applied in the same order: yaw first, then pitch,
    then roll.  ``forward()``/``right()`` and the point operators below share
    that order, which keeps camera movement and projection in agreement.

    Point operators (the transform is always the right-hand operand):

        world = local + transform   # rotate, then translate
        local = world - transform   # un-translate, then inverse rotation
    """
    __slots__ = ('position', 'yaw', 'pitch', 'roll')

    def __init__(self, position: Vec3 = ORIGIN, yaw: float = 0.0,
                 pitch: float = 0.0, roll: float = 0.0):
        self.position = position
        self.yaw = yaw
        self.pitch = pitch
        self.roll = roll

    def __repr__(self):
        return (f"Transform(position={self.position!r}, yaw={self.yaw!r}, "
                f"pitch={self.pitch!r}, roll={self.roll!r})")

    def copy(self) -> 'Transform':
        return Transform(self.position, self.yaw, self.pitch, self.roll)

    def rotate(self, v: Vec3) -> Vec3:
        """Apply the orientation only (yaw, pitch, roll)."""
        return v.yaw(self.yaw).pitch(self.pitch).roll(self.roll)

    def unrotate(self, v: Vec3) -> Vec3:
        """Exact inverse of rotate(): undo roll, then pitch, then yaw."""
        return v.roll(-self.roll).pitch(-self.pitch).yaw(-self.yaw)

    def forward(self) -> Vec3:
        return self.rotate(Z_AXIS).normalize_or_default()

    def right(self) -> Vec3:
        return self.rotate(X_AXIS).normalize_or_default()

    def up(self) -> Vec3:
        # +Y maps to screen-down in projection, so this points down the view
        return self.rotate(Y_AXIS).normalize_or_default()

    def to_world(self, local: Vec3) -> Vec3:
        return self.rotate(local) + self.position

    def to_local(self, world: Vec3) -> Vec3:
        return self.unrotate(world - self.position)

    def __radd__(self, other):
        if isinstance(other, Vec3):
            return self.to_world(other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, Vec3):
            return self.to_local(other)
        return NotImplemented
