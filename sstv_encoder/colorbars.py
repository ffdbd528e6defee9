"""Colour bar test pattern generator."""

import numpy as np


def generate_colorbars(width=320, height=256):
    """Generate a colour bar test pattern for checking a receiver.

    The top 3/4 holds 8 full-intensity vertical bars (left to right):
    White, Yellow, Cyan, Green, Magenta, Red, Blue, Black

    The bottom quarter is a horizontal grey ramp from black to white, which
    shows whether the receiver's 1500-2300 Hz mapping is linear.

    Args:
        width: Output image width (320 for most modes, 640 for Pasokon).
        height: Output image height.

    Returns:
        RGB frame as numpy array (height x width x 3, uint8).
    """
    colors = np.array([
        [255, 255, 255],   # White
        [255, 255,   0],   # Yellow
        [  0, 255, 255],   # Cyan
        [  0, 255,   0],   # Green
        [255,   0, 255],   # Magenta
        [255,   0,   0],   # Red
        [  0,   0, 255],   # Blue
        [  0,   0,   0],   # Black
    ], dtype=np.uint8)

    frame = np.zeros((height, width, 3), dtype=np.uint8)

    bar_height = height * 3 // 4
    bar_width = width // len(colors)

    for i, color in enumerate(colors):
        x_start = i * bar_width
        x_end = (i + 1) * bar_width if i < len(colors) - 1 else width
        frame[0:bar_height, x_start:x_end] = color

    ramp = np.linspace(0, 255, width)
    frame[bar_height:height] = np.floor(ramp + 0.5).astype(np.uint8)[np.newaxis, :, np.newaxis]

    return frame
