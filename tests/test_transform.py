import math

import pytest

from hekune.math_utils import Vec3, ORIGIN, X_AXIS, Y_AXIS, Z_AXIS
from hekune.transform import Transform

ORIENTATIONS = [
    (0.0, 0.0, 0.0),
    (0.4, 0.0, 0.0),
    (0.0, -0.7, 0.0),
    (1.1, 0.5, 0.0),
    (-2.3, 1.2, 0.3),
    (3.0, -1.4, -1.0),
]


def assert_vec_close(a, b, tol=1e-9):
    assert a.almost_equals(b, tol), f"{a!r} != {b!r}"


def test_identity_axes():
    t = Transform()
    assert t.forward() == Z_AXIS
    assert t.right() == X_AXIS
    assert t.up() == Y_AXIS
    assert t.position == ORIGIN


def test_yaw_turns_forward_towards_x():
    t = Transform(yaw=math.pi / 2)
    assert_vec_close(t.forward(), X_AXIS)
    assert_vec_close(t.right(), -Z_AXIS)


def test_pitch_tilts_forward_towards_negative_y():
    t = Transform(pitch=math.pi / 2)
    assert_vec_close(t.forward(), -Y_AXIS)
    assert_vec_close(t.right(), X_AXIS)


def test_rotation_order_is_yaw_then_pitch_then_roll():
    t = Transform(yaw=0.3, pitch=-0.8, roll=1.1)
    expected = Z_AXIS.rotate_y(0.3).rotate_x(-0.8).rotate_z(1.1).normalize()
    assert_vec_close(t.forward(), expected, 1e-15)
    assert_vec_close(t.rotate(Vec3(1, 2, 3)),
                     Vec3(1, 2, 3).yaw(0.3).pitch(-0.8).roll(1.1), 1e-15)


@pytest.mark.parametrize("yaw,pitch,roll", ORIENTATIONS)
def test_derived_axes_are_orthonormal(yaw, pitch, roll):
    t = Transform(Vec3(5, -2, 1), yaw, pitch, roll)
    f, r = t.forward(), t.right()
    assert f.is_unit_vector(1e-12)
    assert r.is_unit_vector(1e-12)
    assert f.is_perpendicular(r, 1e-12)


@pytest.mark.parametrize("yaw,pitch,roll", ORIENTATIONS)
def test_point_operators_round_trip(yaw, pitch, roll):
    t = Transform(Vec3(1.5, -3, 7), yaw, pitch, roll)
    p = Vec3(-2, 4, 0.5)
    assert_vec_close((p + t) - t, p)
    assert_vec_close(t.to_local(t.to_world(p)), p)
    assert p + t == t.to_world(p)
    assert p - t == t.to_local(p)


@pytest.mark.parametrize("yaw,pitch,roll", ORIENTATIONS)
def test_forward_and_right_agree_with_point_transform(yaw, pitch, roll):
    # What the camera moves along must be what projection treats as depth/x
    t = Transform(Vec3(10, 0, -4), yaw, pitch, roll)
    assert_vec_close((t.position + t.forward() * 3) - t, Vec3(0, 0, 3))
    assert_vec_close((t.position + t.right() * 2) - t, Vec3(2, 0, 0))


def test_to_world_translates_after_rotating():
    t = Transform(Vec3(0, 0, 10), yaw=math.pi / 2)
    assert_vec_close(Z_AXIS + t, Vec3(1, 0, 10))


def test_to_local_removes_translation_first():
    t = Transform(Vec3(0, 0, 10), yaw=math.pi / 2)
    assert_vec_close(Vec3(1, 0, 10) - t, Z_AXIS)


def test_transform_is_not_a_left_operand():
    with pytest.raises(TypeError):
        Transform() + Vec3(1, 2, 3)


def test_copy_is_independent():
    t = Transform(Vec3(1, 2, 3), 0.1, 0.2, 0.3)
    c = t.copy()
    c.yaw = 5.0
    c.position = ORIGIN
    assert t.yaw == 0.1
    assert t.position == Vec3(1, 2, 3)
    assert "Transform(" in repr(t)
