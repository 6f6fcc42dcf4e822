"""Tests for frame buffer materialization."""

import numpy as np
import pytest


class TestMaterialize:
    """Tests for materialize and render_frame."""

    def test_row_major_placement(self):
        """Test pixel (x, y) lands at row y, column x."""
        from mirrortrace.core.color import Color
        from mirrortrace.core.framebuffer import materialize

        frame = materialize([(2, 1, Color(10, 20, 30))], width=3, height=2)
        assert frame.shape == (2, 3, 3)
        assert frame.dtype == np.uint8
        assert tuple(frame[1, 2]) == (10, 20, 30)
        assert frame.sum() == 60

    def test_out_of_range(self):
        """Test pixels outside the image are rejected."""
        from mirrortrace.core.color import Color
        from mirrortrace.core.framebuffer import materialize

        with pytest.raises(ValueError):
            materialize([(3, 0, Color(1, 1, 1))], width=3, height=2)
        with pytest.raises(ValueError):
            materialize([(0, -1, Color(1, 1, 1))], width=3, height=2)

    def test_render_frame_matches_render_pixel(self, small_scene):
        """Test render_frame places every render_pixel result."""
        from mirrortrace.core.framebuffer import render_frame

        frame = render_frame(small_scene)
        assert frame.shape == (24, 32, 3)
        for x, y in [(0, 0), (31, 23), (16, 12), (5, 20)]:
            assert tuple(frame[y, x]) == small_scene.render_pixel(x, y).to_tuple()


class TestRgba:
    """Tests for RGBA conversion."""

    def test_rgba_byte_offset(self):
        """Test pixel (x, y) starts at byte 4 * (y * width + x)."""
        from mirrortrace.core.color import Color
        from mirrortrace.core.framebuffer import materialize, rgba_bytes

        frame = materialize([(2, 1, Color(10, 20, 30))], width=3, height=2)
        data = rgba_bytes(frame)

        assert len(data) == 3 * 2 * 4
        offset = 4 * (1 * 3 + 2)
        assert tuple(data[offset : offset + 4]) == (10, 20, 30, 0xFF)
        assert tuple(data[0:4]) == (0, 0, 0, 0xFF)

    def test_alpha_is_opaque(self):
        """Test every alpha byte is 0xFF."""
        from mirrortrace.core.framebuffer import to_rgba

        rgba = to_rgba(np.zeros((4, 5, 3), dtype=np.uint8))
        assert rgba.shape == (4, 5, 4)
        assert np.all(rgba[:, :, 3] == 0xFF)

    def test_rejects_wrong_shape(self):
        """Test non-RGB frames are rejected."""
        from mirrortrace.core.framebuffer import to_rgba

        with pytest.raises(ValueError):
            to_rgba(np.zeros((4, 5), dtype=np.uint8))
        with pytest.raises(ValueError):
            to_rgba(np.zeros((4, 5, 4), dtype=np.uint8))
