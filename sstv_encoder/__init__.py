"""SSTV (Slow-Scan Television) image to audio encoder."""

from .encoder import Encoder, create_encoder, encode_image
from .errors import SSTVError, InvalidModeError
from .modes import Mode, Family, ModeSpec, get_mode, ALL_MODES
from .writer import AudioFormat, SampleBuffer, ToneWriter
from .martin import MartinEncoder
from .scottie import ScottieEncoder
from .pasokon import PasokonEncoder
from .robot import RobotEncoder
from .wrasse import WrasseEncoder
from .wav_io import export_wav
from .colorbars import generate_colorbars
