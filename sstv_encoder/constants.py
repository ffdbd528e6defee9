"""SSTV wire-format constants and output defaults.

Frequencies are in Hz, lengths in milliseconds. These values are the wire
format: a receiver locks onto them, so they must match the published mode
descriptions exactly.
"""

# --- Output Defaults ---
SAMPLE_RATE = 44100                     # Hz
NUM_CHANNELS = 1                        # SSTV audio is always mono
BIT_DEPTH = 16                          # Signed PCM bits per sample


def peak_amplitude(bit_depth):
    """Largest signed value representable at the given bit depth."""
    return (1 << (bit_depth - 1)) - 1


# --- Calibration Header ---
HEADER_FREQ = 1900                      # Leader tone
HEADER_LENGTH = 300.0
HEADER_BREAK_FREQ = 1200                # Break between the two leaders
HEADER_BREAK_LENGTH = 10.0

# --- VIS Code ---
VIS_START_FREQ = 1200                   # Start and stop bits
VIS_BIT_LENGTH = 30.0
VIS_TRUE_FREQ = 1100
VIS_FALSE_FREQ = 1300
VIS_DATA_BITS = 7
VIS_MAX = (1 << VIS_DATA_BITS) - 1      # 127

# --- Pixel Range ---
BLACK_FREQ = 1500
WHITE_FREQ = 2300
PIXEL_BANDWIDTH = WHITE_FREQ - BLACK_FREQ

# Total header + VIS time, shared by every mode
HEADER_DURATION_MS = 2 * HEADER_LENGTH + HEADER_BREAK_LENGTH
VIS_DURATION_MS = (VIS_DATA_BITS + 3) * VIS_BIT_LENGTH

# --- Martin ---
MARTIN_LINE_FREQ = 1200
MARTIN_LINE_LENGTH = 4.862
MARTIN_SEPARATOR_FREQ = 1500
MARTIN_SEPARATOR_LENGTH = 0.572
MARTIN1_PULSE_LENGTH = 0.4576
MARTIN2_PULSE_LENGTH = 0.2288

# --- Scottie ---
SCOTTIE_SYNC_FREQ = 1200
SCOTTIE_SYNC_LENGTH = 9.0
SCOTTIE_SEPARATOR_FREQ = 1500
SCOTTIE_SEPARATOR_LENGTH = 1.5
SCOTTIE1_PULSE_LENGTH = 0.4320
SCOTTIE2_PULSE_LENGTH = 0.2752
SCOTTIE_DX_PULSE_LENGTH = 1.08

# --- Pasokon ---
PASOKON_LINE_FREQ = 1200
PASOKON_SYNC_FREQ = 1500
PASOKON3_LINE_LENGTH = 5.208
PASOKON5_LINE_LENGTH = 7.813
PASOKON7_LINE_LENGTH = 10.417
PASOKON3_SYNC_LENGTH = 1.042
PASOKON5_SYNC_LENGTH = 1.563
PASOKON7_SYNC_LENGTH = 2.083
PASOKON3_PULSE_LENGTH = 0.2083
PASOKON5_PULSE_LENGTH = 0.3125
PASOKON7_PULSE_LENGTH = 0.4167

# --- Robot ---
ROBOT_LINE_FREQ = 1200
ROBOT_LINE_LENGTH = 9.0
ROBOT_SYNC_FREQ = 1500
ROBOT_SYNC_LENGTH = 3.0
ROBOT_PORCH_FREQ = 1900
ROBOT_PORCH_LENGTH = 1.5
ROBOT_EVEN_SEPARATOR_FREQ = 1500
ROBOT_ODD_SEPARATOR_FREQ = 2300
ROBOT_SEPARATOR_LENGTH = 4.5
ROBOT36_Y_PULSE_LENGTH = 0.275
ROBOT36_C_PULSE_LENGTH = 0.1375
ROBOT72_Y_PULSE_LENGTH = 0.43125
ROBOT72_C_PULSE_LENGTH = 0.215625

# --- Wrasse ---
WRASSE_LINE_FREQ = 1200
WRASSE_LINE_LENGTH = 5.5225
WRASSE_SYNC_FREQ = 1500
WRASSE_SYNC_LENGTH = 0.5
WRASSE_PULSE_LENGTH = 0.7344

# --- YUV Conversion (8-bit RGB -> studio-swing Y'CbCr) ---
YUV_SCALE = 0.003906
Y_OFFSET = 16.0
C_OFFSET = 128.0
RGB_TO_YUV = (
    (65.738, 129.057, 25.064),          # Y
    (-37.945, -74.494, 112.439),        # U (Cb)
    (112.439, -94.154, -18.285),        # V (Cr)
)
