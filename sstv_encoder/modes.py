"""SSTV mode specifications.

Each transmission mode is identified by its VIS code and carries a frozen
timing record. Modes of the same family share a scan structure and differ
only in the numbers recorded here.
"""

import enum
from dataclasses import dataclass

from .constants import (
    HEADER_DURATION_MS, VIS_DURATION_MS,
    MARTIN_LINE_LENGTH, MARTIN_SEPARATOR_LENGTH,
    MARTIN1_PULSE_LENGTH, MARTIN2_PULSE_LENGTH,
    SCOTTIE_SYNC_LENGTH, SCOTTIE_SEPARATOR_LENGTH,
    SCOTTIE1_PULSE_LENGTH, SCOTTIE2_PULSE_LENGTH, SCOTTIE_DX_PULSE_LENGTH,
    PASOKON3_LINE_LENGTH, PASOKON5_LINE_LENGTH, PASOKON7_LINE_LENGTH,
    PASOKON3_SYNC_LENGTH, PASOKON5_SYNC_LENGTH, PASOKON7_SYNC_LENGTH,
    PASOKON3_PULSE_LENGTH, PASOKON5_PULSE_LENGTH, PASOKON7_PULSE_LENGTH,
    ROBOT_LINE_LENGTH, ROBOT_SYNC_LENGTH, ROBOT_PORCH_LENGTH,
    ROBOT_SEPARATOR_LENGTH,
    ROBOT36_Y_PULSE_LENGTH, ROBOT36_C_PULSE_LENGTH,
    ROBOT72_Y_PULSE_LENGTH, ROBOT72_C_PULSE_LENGTH,
    WRASSE_LINE_LENGTH, WRASSE_SYNC_LENGTH, WRASSE_PULSE_LENGTH,
)
from .errors import InvalidModeError


class Family(enum.Enum):
    """Protocol families; each one has its own scan structure."""
    MARTIN = 'martin'
    SCOTTIE = 'scottie'
    PASOKON = 'pasokon'
    ROBOT = 'robot'
    WRASSE = 'wrasse'


class Mode(enum.IntEnum):
    """Transmission modes, valued by their VIS code."""
    ROBOT36 = 8
    ROBOT72 = 12
    MARTIN2 = 40
    MARTIN1 = 44
    WRASSE_SC2_180 = 55
    SCOTTIE2 = 56
    SCOTTIE1 = 60
    SCOTTIE_DX = 76
    PASOKON3 = 113
    PASOKON5 = 114
    PASOKON7 = 115


@dataclass(frozen=True)
class ModeSpec:
    """Complete timing description of one SSTV mode.

    Attributes:
        name: Human-readable mode name (e.g. 'Martin1').
        mode: The Mode constant, whose value is the VIS code.
        family: Protocol family that defines the scan structure.
        width: Standard image width in pixels.
        height: Standard image height in lines.
        pulse_length: Per-pixel tone length (ms). For Robot modes this is
            the luma pulse.
        chroma_pulse_length: Per-pixel chroma tone length (ms), Robot only.
        line_length: Line sync length (ms), Pasokon only.
        sync_length: Channel sync length (ms), Pasokon only.
    """
    name: str
    mode: Mode
    family: Family
    width: int
    height: int
    pulse_length: float
    chroma_pulse_length: float = 0.0
    line_length: float = 0.0
    sync_length: float = 0.0

    @property
    def vis_code(self):
        return int(self.mode)

    @property
    def resolution(self):
        return self.width, self.height

    @property
    def line_duration_ms(self):
        """Nominal length of one scan line at the standard width."""
        return line_duration_ms(self, self.width)

    @property
    def duration_ms(self):
        """Nominal length of a full transmission, header included."""
        total = HEADER_DURATION_MS + VIS_DURATION_MS
        total += self.height * self.line_duration_ms
        if self.family is Family.SCOTTIE:
            total += SCOTTIE_SYNC_LENGTH  # starting sync, first line only
        return total

    @property
    def duration_s(self):
        return self.duration_ms / 1000.0


def line_duration_ms(spec, width):
    """Nominal scan line length (ms) of a mode for a row of `width` pixels."""
    pixels = width * spec.pulse_length
    family = spec.family

    if family is Family.MARTIN:
        return MARTIN_LINE_LENGTH + 3 * (2 * MARTIN_SEPARATOR_LENGTH + pixels)
    if family is Family.SCOTTIE:
        return 3 * (SCOTTIE_SEPARATOR_LENGTH + pixels) + SCOTTIE_SYNC_LENGTH
    if family is Family.PASOKON:
        return spec.line_length + 4 * spec.sync_length + 3 * pixels
    if family is Family.WRASSE:
        return WRASSE_LINE_LENGTH + WRASSE_SYNC_LENGTH + 3 * pixels

    chroma = width * spec.chroma_pulse_length
    gap = ROBOT_SEPARATOR_LENGTH + ROBOT_PORCH_LENGTH
    if spec.mode is Mode.ROBOT36:
        return ROBOT_LINE_LENGTH + ROBOT_SYNC_LENGTH + pixels + gap + chroma
    return ROBOT_LINE_LENGTH + ROBOT_SYNC_LENGTH + pixels + 2 * (gap + chroma)


# ---------------------------------------------------------------------------
# Martin family
# ---------------------------------------------------------------------------

MARTIN_1 = ModeSpec('Martin1', Mode.MARTIN1, Family.MARTIN, 320, 256,
                    pulse_length=MARTIN1_PULSE_LENGTH)
MARTIN_2 = ModeSpec('Martin2', Mode.MARTIN2, Family.MARTIN, 320, 256,
                    pulse_length=MARTIN2_PULSE_LENGTH)

# ---------------------------------------------------------------------------
# Scottie family
# ---------------------------------------------------------------------------

SCOTTIE_1 = ModeSpec('Scottie1', Mode.SCOTTIE1, Family.SCOTTIE, 320, 256,
                     pulse_length=SCOTTIE1_PULSE_LENGTH)
SCOTTIE_2 = ModeSpec('Scottie2', Mode.SCOTTIE2, Family.SCOTTIE, 320, 256,
                     pulse_length=SCOTTIE2_PULSE_LENGTH)
SCOTTIE_DX = ModeSpec('ScottieDX', Mode.SCOTTIE_DX, Family.SCOTTIE, 320, 256,
                      pulse_length=SCOTTIE_DX_PULSE_LENGTH)

# ---------------------------------------------------------------------------
# Pasokon family
# ---------------------------------------------------------------------------

PASOKON_3 = ModeSpec('Pasokon3', Mode.PASOKON3, Family.PASOKON, 640, 496,
                     pulse_length=PASOKON3_PULSE_LENGTH,
                     line_length=PASOKON3_LINE_LENGTH,
                     sync_length=PASOKON3_SYNC_LENGTH)
PASOKON_5 = ModeSpec('Pasokon5', Mode.PASOKON5, Family.PASOKON, 640, 496,
                     pulse_length=PASOKON5_PULSE_LENGTH,
                     line_length=PASOKON5_LINE_LENGTH,
                     sync_length=PASOKON5_SYNC_LENGTH)
PASOKON_7 = ModeSpec('Pasokon7', Mode.PASOKON7, Family.PASOKON, 640, 496,
                     pulse_length=PASOKON7_PULSE_LENGTH,
                     line_length=PASOKON7_LINE_LENGTH,
                     sync_length=PASOKON7_SYNC_LENGTH)

# ---------------------------------------------------------------------------
# Robot family
# ---------------------------------------------------------------------------

ROBOT_36 = ModeSpec('Robot36', Mode.ROBOT36, Family.ROBOT, 320, 240,
                    pulse_length=ROBOT36_Y_PULSE_LENGTH,
                    chroma_pulse_length=ROBOT36_C_PULSE_LENGTH)
ROBOT_72 = ModeSpec('Robot72', Mode.ROBOT72, Family.ROBOT, 320, 240,
                    pulse_length=ROBOT72_Y_PULSE_LENGTH,
                    chroma_pulse_length=ROBOT72_C_PULSE_LENGTH)

# ---------------------------------------------------------------------------
# Wrasse family
# ---------------------------------------------------------------------------

WRASSE_SC2_180 = ModeSpec('WrasseSC2-180', Mode.WRASSE_SC2_180, Family.WRASSE,
                          320, 256, pulse_length=WRASSE_PULSE_LENGTH)


# ---------------------------------------------------------------------------
# Mode registry
# ---------------------------------------------------------------------------

ALL_MODES = {
    m.mode: m for m in [
        MARTIN_1, MARTIN_2,
        SCOTTIE_1, SCOTTIE_2, SCOTTIE_DX,
        PASOKON_3, PASOKON_5, PASOKON_7,
        ROBOT_36, ROBOT_72,
        WRASSE_SC2_180,
    ]
}


def _normalize_name(name):
    return ''.join(ch for ch in name.lower() if ch.isalnum())


MODE_BY_NAME = {_normalize_name(m.name): m for m in ALL_MODES.values()}
MODE_BY_NAME.update({_normalize_name(m.mode.name): m for m in ALL_MODES.values()})


def get_mode(mode):
    """Resolve a mode given as a ModeSpec, Mode, VIS code or name.

    Names are matched case-insensitively, ignoring punctuation, so
    'Robot36', 'robot-36' and 'ROBOT36' all resolve to the same mode.

    Raises:
        InvalidModeError: If the value names no known mode.
    """
    if isinstance(mode, ModeSpec):
        return mode
    if isinstance(mode, str):
        spec = MODE_BY_NAME.get(_normalize_name(mode))
        if spec is None:
            raise InvalidModeError(mode)
        return spec
    # bool is an int subclass but never a VIS code
    if isinstance(mode, int) and not isinstance(mode, bool):
        try:
            return ALL_MODES[Mode(mode)]
        except ValueError:
            raise InvalidModeError(mode) from None
    raise InvalidModeError(mode)


def modes_for_family(family):
    """All mode specs of one family, in VIS code order."""
    return [m for m in sorted(ALL_MODES.values(), key=lambda s: s.vis_code)
            if m.family is family]
