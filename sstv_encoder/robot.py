"""Robot encoder (36, 72).

Robot modes send luma and chroma instead of RGB. Robot36 sends full luma on
every line but only one chroma channel per line, alternating U on even rows
and V on odd rows, taken from a 2x2 averaged chroma map. Robot72 sends Y, U
and V on every line.

The two modes share the line and sync pulses and little else, so each has
its own scan routine.
"""

import numpy as np

from .color import frame_to_yuv, chroma_map
from .constants import (
    ROBOT_LINE_FREQ, ROBOT_LINE_LENGTH,
    ROBOT_SYNC_FREQ, ROBOT_SYNC_LENGTH,
    ROBOT_PORCH_FREQ, ROBOT_PORCH_LENGTH,
    ROBOT_EVEN_SEPARATOR_FREQ, ROBOT_ODD_SEPARATOR_FREQ,
    ROBOT_SEPARATOR_LENGTH,
)
from .encoder import Encoder
from .modes import Family, Mode

_BYTE = np.float64(255.0)


class RobotEncoder(Encoder):
    """Encodes 320x240 images as luma/chroma."""

    FAMILY = Family.ROBOT

    def prepare(self, spec, frame):
        """Split the frame into Y, U, V planes scaled to [0, 1]."""
        yuv = frame_to_yuv(frame)
        if spec.mode is Mode.ROBOT36:
            u, v = chroma_map(yuv)
        else:
            u, v = yuv[:, :, 1], yuv[:, :, 2]
        return yuv[:, :, 0] / _BYTE, u / _BYTE, v / _BYTE

    def scan_line(self, wr, spec, planes, y):
        wr.write(ROBOT_LINE_FREQ, ROBOT_LINE_LENGTH)
        wr.write(ROBOT_SYNC_FREQ, ROBOT_SYNC_LENGTH)
        if spec.mode is Mode.ROBOT36:
            self._scan36(wr, spec, planes, y)
        else:
            self._scan72(wr, spec, planes, y)

    def _scan36(self, wr, spec, planes, y):
        luma, u, v = planes
        even = y % 2 == 0

        wr.write_values(luma[y], spec.pulse_length)
        if even:
            wr.write(ROBOT_EVEN_SEPARATOR_FREQ, ROBOT_SEPARATOR_LENGTH)
        else:
            wr.write(ROBOT_ODD_SEPARATOR_FREQ, ROBOT_SEPARATOR_LENGTH)
        wr.write(ROBOT_PORCH_FREQ, ROBOT_PORCH_LENGTH)
        wr.write_values(u[y] if even else v[y], spec.chroma_pulse_length)

    def _scan72(self, wr, spec, planes, y):
        luma, u, v = planes

        wr.write_values(luma[y], spec.pulse_length)
        wr.write(ROBOT_EVEN_SEPARATOR_FREQ, ROBOT_SEPARATOR_LENGTH)
        wr.write(ROBOT_PORCH_FREQ, ROBOT_PORCH_LENGTH)

        wr.write_values(u[y], spec.chroma_pulse_length)
        # the second gap closes on the sync frequency, not the porch
        wr.write(ROBOT_ODD_SEPARATOR_FREQ, ROBOT_SEPARATOR_LENGTH)
        wr.write(ROBOT_SYNC_FREQ, ROBOT_PORCH_LENGTH)

        wr.write_values(v[y], spec.chroma_pulse_length)
