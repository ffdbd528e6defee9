"""Pixel grid normalisation.

Encoders work on RGB frames of shape (height, width, 3) and dtype uint8.
Everything else a caller might hand in (greyscale, RGBA, 16-bit or float
images) is brought to that form here.
"""

import numpy as np


def as_frame(image):
    """Normalise an image to an RGB uint8 frame (H x W x 3).

    Args:
        image: Array-like of shape (H, W), (H, W, 1), (H, W, 3) or
            (H, W, 4). Unsigned integer types wider than 8 bits are
            right-shifted to 8 bits, signed integers are clipped to
            [0, 255], floats are taken as [0, 1] intensities and bool
            as black/white. Alpha is dropped.

    Returns:
        RGB frame, uint8. The input array is returned unchanged when it is
        already in that form.
    """
    arr = np.asarray(image)

    if arr.ndim == 2:
        arr = arr[:, :, np.newaxis]
    if arr.ndim != 3 or arr.shape[2] not in (1, 3, 4):
        raise ValueError(f"Expected an (H, W[, 1|3|4]) image, got shape {arr.shape}")
    if arr.shape[2] == 1:
        arr = np.repeat(arr, 3, axis=2)
    elif arr.shape[2] == 4:
        arr = arr[:, :, :3]

    return _to_uint8(arr)


def _to_uint8(arr):
    dtype = arr.dtype
    if dtype == np.uint8:
        return arr
    if dtype == np.bool_:
        return arr.astype(np.uint8) * np.uint8(255)
    if np.issubdtype(dtype, np.unsignedinteger):
        shift = 8 * dtype.itemsize - 8
        return (arr >> shift).astype(np.uint8)
    if np.issubdtype(dtype, np.signedinteger):
        return np.clip(arr, 0, 255).astype(np.uint8)
    if np.issubdtype(dtype, np.floating):
        scaled = np.clip(arr.astype(np.float64), 0.0, 1.0) * 255.0
        return np.floor(scaled + 0.5).astype(np.uint8)
    raise ValueError(f"Unsupported image dtype: {dtype}")


def frame_size(frame):
    """Return (width, height) of a frame."""
    return frame.shape[1], frame.shape[0]
