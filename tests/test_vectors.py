import math

import pytest

from scenekit3d.matrix import Matrix4x4
from scenekit3d.vectors import Vector2, Vector3, Vector4


def test_length_of_three_four_zero():
    assert Vector3(3.0, 4.0, 0.0).length() == pytest.approx(5.0)


def test_length_squared_matches_length():
    v = Vector3(1.5, -2.0, 0.25)
    assert v.length_squared() == pytest.approx(v.length() ** 2)


def test_normalize_gives_unit_length():
    v = Vector3(2.0, -7.0, 3.0).normalize()
    assert v.length() == pytest.approx(1.0)


def test_normalize_keeps_direction():
    v = Vector3(2.0, -7.0, 3.0)
    n = v.normalize()
    assert Vector3.dot(v, n) == pytest.approx(v.length())


def test_normalize_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3(0.0, 0.0, 0.0).normalize()


def test_dot_of_orthogonal_axes_is_zero():
    assert Vector3.dot(Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0)) == 0.0


def test_dot_with_self_is_length_squared():
    v = Vector3(1.0, 2.0, 3.0)
    assert Vector3.dot(v, v) == pytest.approx(v.length_squared())


def test_add_then_subtract_round_trip():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 9.0)
    assert (a + b) - b == a


def test_scalar_add_then_subtract_round_trip():
    a = Vector3(1.0, 2.0, 3.0)
    assert (a + 2.0) - 2.0 == a


def test_scalar_add_commutes():
    a = Vector3(1.0, 2.0, 3.0)
    assert 2.0 + a == a + 2.0


def test_scalar_on_left_of_subtraction_matches_right():
    a = Vector3(1.0, 2.0, 3.0)
    assert 2.0 - a == a - 2.0


def test_scalar_multiply_commutes():
    a = Vector3(1.0, -2.0, 3.0)
    assert 3.0 * a == a * 3.0


def test_componentwise_multiply_and_divide_round_trip():
    a = Vector3(1.0, -2.0, 3.0)
    b = Vector3(2.0, 4.0, 8.0)
    assert (a * b) / b == a


def test_scalar_on_left_of_division_matches_right():
    a = Vector3(1.0, -2.0, 3.0)
    assert 4.0 / a == a / 4.0


def test_in_place_add_rebinds():
    a = Vector3(1.0, 1.0, 1.0)
    b = a
    a += Vector3(1.0, 1.0, 1.0)
    assert a == b + b


def test_unsupported_operand_raises_type_error():
    with pytest.raises(TypeError):
        Vector3(1.0, 2.0, 3.0) * "x"


def test_transform_by_identity_is_unchanged():
    v = Vector3(1.5, -2.5, 3.5)
    assert Vector3.transform(v, Matrix4x4.identity()) == v


def test_transform_divides_by_w():
    m = Matrix4x4.identity()
    m.m[3][3] = 2.0
    v = Vector3(2.0, 4.0, 6.0)
    assert Vector3.transform(v, m) == v / 2.0


def test_transform_applies_translation_row():
    m = Matrix4x4.identity()
    m.m[3][0], m.m[3][1], m.m[3][2] = 1.0, 2.0, 3.0
    v = Vector3(5.0, 5.0, 5.0)
    assert Vector3.transform(v, m) == v + Vector3(1.0, 2.0, 3.0)


def test_transform_with_zero_w_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3.transform(Vector3(1.0, 2.0, 3.0), Matrix4x4())


def test_vector2_and_vector4_unpack():
    assert tuple(Vector2(1.0, 2.0)) == (1.0, 2.0)
    assert tuple(Vector4(1.0, 2.0, 3.0, 4.0)) == (1.0, 2.0, 3.0, 4.0)


def test_negation_sums_to_zero():
    v = Vector3(1.0, -2.0, math.pi)
    assert v + (-v) == Vector3(0.0, 0.0, 0.0)