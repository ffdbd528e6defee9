"""Image loading and resizing with OpenCV."""

import os

import cv2

from .frame import as_frame, frame_size


def load_image(path):
    """Read an image file as an RGB frame.

    8-bit and 16-bit images keep their depth here; greyscale images are
    expanded to three channels and alpha is dropped.

    Args:
        path: Image file (PNG, JPG, BMP, ...).

    Returns:
        RGB array (H x W x 3), uint8 or uint16.

    Raises:
        FileNotFoundError: If the path does not exist.
        ValueError: If OpenCV cannot decode the file.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(path)

    image = cv2.imread(path, cv2.IMREAD_ANYDEPTH | cv2.IMREAD_COLOR)
    if image is None:
        raise ValueError(f"Cannot decode image '{path}'")
    return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)


def save_image(frame, path):
    """Write an RGB frame to an image file.

    Raises:
        ValueError: If OpenCV cannot encode or write the file.
    """
    try:
        ok = cv2.imwrite(path, cv2.cvtColor(as_frame(frame), cv2.COLOR_RGB2BGR))
    except cv2.error as e:
        raise ValueError(f"Cannot write image '{path}': {e}") from e
    if not ok:
        raise ValueError(f"Cannot write image '{path}'")


def fit_to_resolution(frame, resolution):
    """Resize a frame to (width, height) with Lanczos interpolation.

    The frame is returned unchanged when it already has that size.
    """
    if frame_size(frame) == tuple(resolution):
        return frame
    return cv2.resize(frame, tuple(resolution), interpolation=cv2.INTER_LANCZOS4)
