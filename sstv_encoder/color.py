"""Colour conversion from pixels to SSTV channel values."""

import math

import numpy as np

from .constants import RGB_TO_YUV, YUV_SCALE, Y_OFFSET, C_OFFSET

_F = np.float64
_RGB_TO_YUV = np.array(RGB_TO_YUV, dtype=_F) * _F(YUV_SCALE)
_YUV_OFFSET = np.array([Y_OFFSET, C_OFFSET, C_OFFSET], dtype=_F)

# Channel order of the RGB scan passes (green, blue, red)
GBR_ORDER = (1, 2, 0)


def _channels_8bit(color, depth):
    shift = depth - 8
    return tuple(int(c) >> shift for c in color[:3])


def _to_byte(value):
    """Clamp to [0, 255] and round half up."""
    if value < 0:
        return 0
    if value > 255:
        return 255
    return int(math.floor(value + 0.5))


def to_rgb(color, depth=8):
    """Normalise one pixel to RGB intensities in [0, 1).

    Args:
        color: (r, g, b) or (r, g, b, a) tuple; alpha is ignored.
        depth: Bits per channel of `color` (8 or 16 typically).

    Returns:
        Tuple (r, g, b) of floats, each channel reduced to 8 bits and
        divided by 256.
    """
    r, g, b = _channels_8bit(color, depth)
    return r / 256.0, g / 256.0, b / 256.0


def to_yuv(color, depth=8):
    """Convert one pixel to studio-swing Y, U, V bytes.

    Args:
        color: (r, g, b) or (r, g, b, a) tuple; alpha is ignored.
        depth: Bits per channel of `color`.

    Returns:
        Tuple (y, u, v) of ints in [0, 255].
    """
    rgb = _channels_8bit(color, depth)
    out = []
    for coeffs, offset in zip(RGB_TO_YUV, (Y_OFFSET, C_OFFSET, C_OFFSET)):
        acc = sum(k * c for k, c in zip(coeffs, rgb))
        out.append(_to_byte(offset + YUV_SCALE * acc))
    return tuple(out)


def frame_to_rgb(frame):
    """Convert an RGB frame (H x W x 3, uint8) to intensities (float64)."""
    return frame.astype(_F) / _F(256.0)


def frame_to_yuv(frame):
    """Convert an RGB frame (H x W x 3, uint8) to YUV bytes (uint8)."""
    yuv = frame.astype(_F) @ _RGB_TO_YUV.T + _YUV_OFFSET
    return np.floor(np.clip(yuv, 0.0, 255.0) + 0.5).astype(np.uint8)


def chroma_map(yuv):
    """Average U and V over each pixel's 2x2 neighbourhood.

    The neighbourhood of (x, y) is (x, y), (x+1, y), (x, y+1), (x+1, y+1);
    neighbours past the last row or column repeat the edge pixel. The
    average is an integer mean, truncated.

    Args:
        yuv: YUV frame (H x W x 3, uint8) from frame_to_yuv.

    Returns:
        Tuple (u, v) of H x W uint8 arrays.
    """
    if yuv.size == 0:
        return yuv[:, :, 1], yuv[:, :, 2]
    chroma = np.pad(yuv[:, :, 1:].astype(np.int32), ((0, 1), (0, 1), (0, 0)),
                    mode='edge')
    total = (chroma[:-1, :-1] + chroma[:-1, 1:] +
             chroma[1:, :-1] + chroma[1:, 1:])
    avg = (total // 4).astype(np.uint8)
    return avg[:, :, 0], avg[:, :, 1]
