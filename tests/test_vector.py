"""Unit tests for the Vector3 value type.

Tests cover:
- Arithmetic, dot product and norm
- Normalization (idempotence and the degenerate zero case)
- Rotation about the coordinate axes
"""

import math

import pytest


def assert_vec_close(v, expected, tol=1e-12):
    assert abs(v.x - expected[0]) < tol
    assert abs(v.y - expected[1]) < tol
    assert abs(v.z - expected[2]) < tol


class TestVectorArithmetic:
    """Tests for basic vector operations."""

    def test_add_and_sub(self):
        """Test component-wise addition and subtraction."""
        from mirrortrace.core.vector import Vector3

        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(0.5, -1.0, 4.0)
        assert a + b == Vector3(1.5, 1.0, 7.0)
        assert a - b == Vector3(0.5, 3.0, -1.0)

    def test_scalar_multiply_and_negate(self):
        """Test scaling by a float and negation."""
        from mirrortrace.core.vector import Vector3

        v = Vector3(1.0, -2.0, 0.5)
        assert v * 2.0 == Vector3(2.0, -4.0, 1.0)
        assert -v == Vector3(-1.0, 2.0, -0.5)

    def test_dot_and_norm(self):
        """Test dot product and Euclidean norm."""
        from mirrortrace.core.vector import Vector3

        v = Vector3(3.0, -4.0, 12.0)
        assert v.dot(Vector3(1.0, 1.0, 1.0)) == 11.0
        assert v.norm() == 13.0

    def test_vector_is_immutable(self):
        """Test that vectors cannot be modified in place."""
        from dataclasses import FrozenInstanceError

        from mirrortrace.core.vector import Vector3

        v = Vector3(1.0, 2.0, 3.0)
        with pytest.raises(FrozenInstanceError):
            v.x = 5.0  # type: ignore[misc]


class TestNormalize:
    """Tests for normalization."""

    @pytest.mark.parametrize(
        "components",
        [(3.0, -4.0, 12.0), (0.0, 0.0, -1.0), (1e-6, 2e-6, -3e-6), (100.0, 0.1, 7.0)],
    )
    def test_normalize_is_unit_and_idempotent(self, components):
        """Test norm(normalize(v)) == 1 and normalize is idempotent."""
        from mirrortrace.core.vector import Vector3

        n = Vector3(*components).normalize()
        assert abs(n.norm() - 1.0) < 1e-12
        assert_vec_close(n.normalize(), n.to_tuple())

    def test_normalize_zero_vector(self):
        """Test that the zero vector normalizes to zero, not NaN."""
        from mirrortrace.core.vector import Vector3

        n = Vector3(0.0, 0.0, 0.0).normalize()
        assert n == Vector3(0.0, 0.0, 0.0)
        assert not any(math.isnan(c) for c in n.to_tuple())

    def test_normalize_below_threshold(self):
        """Test that vectors shorter than 1e-13 normalize to zero."""
        from mirrortrace.core.vector import ZERO, Vector3

        assert Vector3(1e-14, 0.0, 0.0).normalize() == ZERO


class TestRotation:
    """Tests for axis rotations."""

    def test_rotate_y_quarter_turn(self):
        """Test rotate_y carries +x toward +z."""
        from mirrortrace.core.vector import Vector3

        r = Vector3(1.0, 0.0, 0.0).rotate_y(math.pi / 2)
        assert_vec_close(r, (0.0, 0.0, 1.0))

    def test_rotate_y_keeps_y(self):
        """Test rotate_y leaves the y component untouched."""
        from mirrortrace.core.vector import Vector3

        r = Vector3(0.3, 0.7, -2.0).rotate_y(1.234)
        assert r.y == 0.7

    def test_rotate_x_quarter_turn(self):
        """Test rotate_x carries +y toward +z."""
        from mirrortrace.core.vector import Vector3

        r = Vector3(0.0, 1.0, 0.0).rotate_x(math.pi / 2)
        assert_vec_close(r, (0.0, 0.0, 1.0))

    def test_rotate_z_quarter_turn(self):
        """Test rotate_z carries +x toward +y."""
        from mirrortrace.core.vector import Vector3

        r = Vector3(1.0, 0.0, 0.0).rotate_z(math.pi / 2)
        assert_vec_close(r, (0.0, 1.0, 0.0))

    def test_rotation_preserves_norm(self):
        """Test rotations are rigid."""
        from mirrortrace.core.vector import Vector3

        v = Vector3(1.5, -2.0, 0.25)
        for rotated in (v.rotate_x(0.7), v.rotate_y(-2.1), v.rotate_z(3.3)):
            assert abs(rotated.norm() - v.norm()) < 1e-12

    def test_opposite_rotations_cancel(self):
        """Test rotating by an angle and back returns the original vector."""
        from mirrortrace.core.vector import Vector3

        v = Vector3(0.2, 0.4, -0.9)
        assert_vec_close(v.rotate_y(0.9).rotate_y(-0.9), v.to_tuple())
