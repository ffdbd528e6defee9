"""Tests for OpenCV image loading and resizing."""

import cv2
import numpy as np
import pytest

from sstv_encoder.image_io import load_image, save_image, fit_to_resolution


class TestLoadImage:
    def test_rgb_order(self, tmp_path):
        path = str(tmp_path / "red.png")
        bgr = np.zeros((4, 6, 3), dtype=np.uint8)
        bgr[..., 2] = 255
        cv2.imwrite(path, bgr)

        frame = load_image(path)
        assert frame.shape == (4, 6, 3)
        assert (frame[..., 0] == 255).all()
        assert (frame[..., 1:] == 0).all()

    def test_greyscale_expanded(self, tmp_path):
        path = str(tmp_path / "grey.png")
        cv2.imwrite(path, np.full((3, 5), 77, dtype=np.uint8))

        frame = load_image(path)
        assert frame.shape == (3, 5, 3)
        assert (frame == 77).all()

    def test_16bit_kept(self, tmp_path):
        path = str(tmp_path / "deep.png")
        cv2.imwrite(path, np.full((2, 2, 3), 40000, dtype=np.uint16))

        frame = load_image(path)
        assert frame.dtype == np.uint16
        assert (frame == 40000).all()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_image(str(tmp_path / "nope.png"))

    def test_undecodable(self, tmp_path):
        path = tmp_path / "broken.png"
        path.write_bytes(b'not an image')
        with pytest.raises(ValueError):
            load_image(str(path))


def test_save_and_reload(tmp_path, random_frame):
    path = str(tmp_path / "frame.png")
    save_image(random_frame, path)
    np.testing.assert_array_equal(load_image(path), random_frame)


@pytest.mark.parametrize("name", ["no-such-dir/frame.png", "frame.unknownext"])
def test_save_failure(tmp_path, random_frame, name):
    with pytest.raises(ValueError, match="Cannot write image"):
        save_image(random_frame, str(tmp_path / name))


class TestFitToResolution:
    def test_resizes(self, random_frame):
        out = fit_to_resolution(random_frame, (320, 256))
        assert out.shape == (256, 320, 3)
        assert out.dtype == np.uint8

    def test_same_size_untouched(self, random_frame):
        assert fit_to_resolution(random_frame, (32, 16)) is random_frame

    def test_solid_color_preserved(self):
        frame = np.full((10, 10, 3), 100, dtype=np.uint8)
        out = fit_to_resolution(frame, (40, 30))
        assert (out == 100).all()
