"""Martin encoder (M1, M2), as designed by Martin Emmerson.

Each line starts with a sync pulse, followed by green, blue and red scan
passes, each framed by a separator on both sides.
"""

from .color import frame_to_rgb, GBR_ORDER
from .constants import (
    MARTIN_LINE_FREQ, MARTIN_LINE_LENGTH,
    MARTIN_SEPARATOR_FREQ, MARTIN_SEPARATOR_LENGTH,
)
from .encoder import Encoder
from .modes import Family


class MartinEncoder(Encoder):
    """Encodes 320x256 RGB images in about 114 s (M1) or 58 s (M2)."""

    FAMILY = Family.MARTIN

    def prepare(self, spec, frame):
        return frame_to_rgb(frame)

    def scan_line(self, wr, spec, rgb, y):
        wr.write(MARTIN_LINE_FREQ, MARTIN_LINE_LENGTH)
        for ch in GBR_ORDER:
            wr.write(MARTIN_SEPARATOR_FREQ, MARTIN_SEPARATOR_LENGTH)
            wr.write_values(rgb[y, :, ch], spec.pulse_length)
            wr.write(MARTIN_SEPARATOR_FREQ, MARTIN_SEPARATOR_LENGTH)
