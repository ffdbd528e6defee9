"""Pasokon ("P") encoder (P3, P5, P7).

High resolution RGB modes: 640x496 pixels. The three variants share the
scan structure and differ in line, sync and pixel lengths.
"""

from .color import frame_to_rgb, GBR_ORDER
from .constants import PASOKON_LINE_FREQ, PASOKON_SYNC_FREQ
from .encoder import Encoder
from .modes import Family


class PasokonEncoder(Encoder):
    """Encodes 640x496 RGB images."""

    FAMILY = Family.PASOKON

    def prepare(self, spec, frame):
        return frame_to_rgb(frame)

    def scan_line(self, wr, spec, rgb, y):
        wr.write(PASOKON_LINE_FREQ, spec.line_length)
        for ch in GBR_ORDER:
            wr.write(PASOKON_SYNC_FREQ, spec.sync_length)
            wr.write_values(rgb[y, :, ch], spec.pulse_length)
        wr.write(PASOKON_SYNC_FREQ, spec.sync_length)
