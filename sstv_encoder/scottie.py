"""Scottie encoder (S1, S2, DX), as designed by Eddie Murphy.

Unlike Martin, the line sync sits between the blue and red passes. A
single extra sync pulse before the first line gives the receiver its
starting reference.
"""

from .color import frame_to_rgb, GBR_ORDER
from .constants import (
    SCOTTIE_SYNC_FREQ, SCOTTIE_SYNC_LENGTH,
    SCOTTIE_SEPARATOR_FREQ, SCOTTIE_SEPARATOR_LENGTH,
)
from .encoder import Encoder
from .modes import Family


class ScottieEncoder(Encoder):
    """Encodes 320x256 RGB images."""

    FAMILY = Family.SCOTTIE

    def prepare(self, spec, frame):
        return frame_to_rgb(frame)

    def scan_line(self, wr, spec, rgb, y):
        if y == 0:
            wr.write(SCOTTIE_SYNC_FREQ, SCOTTIE_SYNC_LENGTH)

        for i, ch in enumerate(GBR_ORDER):
            wr.write(SCOTTIE_SEPARATOR_FREQ, SCOTTIE_SEPARATOR_LENGTH)
            wr.write_values(rgb[y, :, ch], spec.pulse_length)
            if i == 1:
                wr.write(SCOTTIE_SYNC_FREQ, SCOTTIE_SYNC_LENGTH)
