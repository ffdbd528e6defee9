"""Wrasse encoder (SC2-180)."""

from .color import frame_to_rgb, GBR_ORDER
from .constants import (
    WRASSE_LINE_FREQ, WRASSE_LINE_LENGTH,
    WRASSE_SYNC_FREQ, WRASSE_SYNC_LENGTH,
)
from .encoder import Encoder
from .modes import Family


class WrasseEncoder(Encoder):
    """Encodes 320x256 RGB images; the colour passes run back to back."""

    FAMILY = Family.WRASSE

    def prepare(self, spec, frame):
        return frame_to_rgb(frame)

    def scan_line(self, wr, spec, rgb, y):
        wr.write(WRASSE_LINE_FREQ, WRASSE_LINE_LENGTH)
        wr.write(WRASSE_SYNC_FREQ, WRASSE_SYNC_LENGTH)
        for ch in GBR_ORDER:
            wr.write_values(rgb[y, :, ch], spec.pulse_length)
