import math

import pytest

from scenekit3d.matrix import Mat3, Matrix4x4, cot


def _flat(matrix):
    return [value for row in matrix.m for value in row]


def _sample():
    return Matrix4x4(
        [
            [2.0, 0.5, 1.0, 0.0],
            [0.0, 3.0, -1.0, 0.0],
            [1.0, 0.0, 4.0, 0.0],
            [5.0, -2.0, 7.0, 1.0],
        ]
    )


def test_cot_of_quarter_pi():
    assert cot(math.pi / 4) == pytest.approx(1.0)


def test_cot_is_reciprocal_of_tan():
    assert cot(0.3) * math.tan(0.3) == pytest.approx(1.0)


def test_identity_diagonal():
    ident = Matrix4x4.identity()
    assert all(ident.m[i][j] == (1.0 if i == j else 0.0) for i in range(4) for j in range(4))


def test_default_is_zero():
    assert _flat(Matrix4x4()) == [0.0] * 16


def test_multiply_by_identity_is_unchanged():
    m = _sample()
    assert Matrix4x4.multiply(m, Matrix4x4.identity()) == m
    assert Matrix4x4.multiply(Matrix4x4.identity(), m) == m


def test_matmul_operator_matches_multiply():
    a = _sample()
    b = Matrix4x4.inverse(_sample())
    assert a @ b == Matrix4x4.multiply(a, b)


def test_multiply_is_associative():
    a = _sample()
    b = Matrix4x4.identity()
    b.m[0][1] = 2.0
    c = Matrix4x4.inverse(a)
    left = (a @ b) @ c
    right = a @ (b @ c)
    assert _flat(left) == pytest.approx(_flat(right))


def test_inverse_times_matrix_is_identity():
    m = _sample()
    product = m @ Matrix4x4.inverse(m)
    assert _flat(product) == pytest.approx(_flat(Matrix4x4.identity()), abs=1e-9)


def test_inverse_of_inverse_is_original():
    m = _sample()
    twice = Matrix4x4.inverse(Matrix4x4.inverse(m))
    assert _flat(twice) == pytest.approx(_flat(m))


def test_inverse_of_identity_is_identity():
    assert Matrix4x4.inverse(Matrix4x4.identity()) == Matrix4x4.identity()


def test_inverse_of_singular_raises():
    with pytest.raises(ZeroDivisionError):
        Matrix4x4.inverse(Matrix4x4())


def test_wrong_shape_raises():
    with pytest.raises(ValueError):
        Matrix4x4([[1.0, 2.0], [3.0, 4.0]])


def test_matmul_with_other_type_raises():
    with pytest.raises(TypeError):
        Matrix4x4.identity() @ 3


def test_mat3_default_zero_and_shape():
    assert Mat3().m == [[0.0] * 3 for _ in range(3)]
    with pytest.raises(ValueError):
        Mat3([[1.0] * 4] * 3)