"""Builders for the affine and projection matrices used by the renderer."""

from __future__ import annotations

import math

from scenekit3d.matrix import Matrix4x4
from scenekit3d.vectors import Vector3


def make_translate_matrix(translate: Vector3) -> Matrix4x4:
    """Translation matrix; the offset sits in the bottom row."""
    return Matrix4x4(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [translate.x, translate.y, translate.z, 1.0],
        ]
    )


def make_scale_matrix(scale: Vector3) -> Matrix4x4:
    """Scale matrix with the factors on the diagonal."""
    return Matrix4x4(
        [
            [scale.x, 0.0, 0.0, 0.0],
            [0.0, scale.y, 0.0, 0.0],
            [0.0, 0.0, scale.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def make_rotate_x_matrix(theta: float) -> Matrix4x4:
    """Rotation about the X axis by theta radians."""
    c, s = math.cos(theta), math.sin(theta)
    return Matrix4x4(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, s, 0.0],
            [0.0, -s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def make_rotate_y_matrix(theta: float) -> Matrix4x4:
    """Rotation about the Y axis by theta radians."""
    c, s = math.cos(theta), math.sin(theta)
    return Matrix4x4(
        [
            [c, 0.0, -s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def make_rotate_z_matrix(theta: float) -> Matrix4x4:
    """Rotation about the Z axis by theta radians."""
    c, s = math.cos(theta), math.sin(theta)
    return Matrix4x4(
        [
            [c, s, 0.0, 0.0],
            [-s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def euler_to_matrix(euler: Vector3) -> Matrix4x4:
    """Rotation matrix for Euler angles, applied in X, Y, Z order."""
    return (
        make_rotate_x_matrix(euler.x)
        @ make_rotate_y_matrix(euler.y)
        @ make_rotate_z_matrix(euler.z)
    )


def make_affine_matrix(scale: Vector3, rotate: Vector3, translate: Vector3) -> Matrix4x4:
    """Scale, then rotate, then translate."""
    return make_scale_matrix(scale) @ euler_to_matrix(rotate) @ make_translate_matrix(translate)


def make_orthographic_matrix(
    left: float,
    top: float,
    right: float,
    bottom: float,
    near_clip: float,
    far_clip: float,
) -> Matrix4x4:
    """Orthographic projection mapping the box to normalised device coordinates."""
    return Matrix4x4(
        [
            [2.0 / (right - left), 0.0, 0.0, 0.0],
            [0.0, 2.0 / (top - bottom), 0.0, 0.0],
            [0.0, 0.0, 1.0 / (far_clip - near_clip), 0.0],
            [
                (left + right) / (left - right),
                (top + bottom) / (bottom - top),
                near_clip / (near_clip - far_clip),
                1.0,
            ],
        ]
    )


def transform_normal(v: Vector3, m: Matrix4x4) -> Vector3:
    """Transform a direction by the upper 3x3 part, ignoring translation."""
    rows = m.m
    return Vector3(
        v.x * rows[0][0] + v.y * rows[1][0] + v.z * rows[2][0],
        v.x * rows[0][1] + v.y * rows[1][1] + v.z * rows[2][1],
        v.x * rows[0][2] + v.y * rows[1][2] + v.z * rows[2][2],
    )