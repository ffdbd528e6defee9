"""SSTV encoder contract: image frame -> audio sample buffer."""

import logging

from tqdm import tqdm

from .errors import InvalidModeError
from .frame import as_frame, frame_size
from .modes import Family, get_mode, ALL_MODES
from .writer import ToneWriter

logger = logging.getLogger(__name__)


class Encoder:
    """Base class for the protocol encoders.

    Every encoder writes the calibration header and the VIS code, then
    scans the frame top to bottom in its family's line structure.
    Subclasses set FAMILY and implement scan_line().

    Args:
        mode: Mode constant (or VIS code) to transmit. It is validated when
            encoding starts, not here.
        audio_format: Output AudioFormat (defaults to 44.1 kHz, 16-bit mono).
    """

    FAMILY = None

    def __init__(self, mode, audio_format=None):
        self.mode = mode
        self.audio_format = audio_format

    @property
    def spec(self):
        """ModeSpec of the selected mode.

        Raises:
            InvalidModeError: If the mode does not belong to this family.
        """
        spec = ALL_MODES.get(self.mode) if isinstance(self.mode, int) else None
        if self.FAMILY is None:
            raise InvalidModeError(self.mode)
        if spec is None or spec.family is not self.FAMILY:
            raise InvalidModeError(self.mode, self.FAMILY.value)
        return spec

    @property
    def vis_code(self):
        return self.spec.vis_code

    @property
    def resolution(self):
        """Standard (width, height) for this mode.

        Decoders expect these sizes, though any frame size can be encoded.
        """
        return self.spec.resolution

    @property
    def name(self):
        return self.spec.name

    def encode(self, image, progress=False):
        """Encode an image into an SSTV audio signal.

        The frame is scanned over its own bounds; pass a frame at the
        mode's standard resolution for a signal receivers can decode.

        Args:
            image: RGB frame (H x W x 3) or anything frame.as_frame accepts.
            progress: Show a per-line progress bar.

        Returns:
            SampleBuffer holding the complete transmission.

        Raises:
            InvalidModeError: If the mode is not one of this family's, before
                any audio is generated.
        """
        spec = self.spec
        frame = as_frame(image)
        size = frame_size(frame)
        if size != spec.resolution:
            logger.warning("Encoding %dx%d frame in %s; standard size is %dx%d",
                           size[0], size[1], spec.name, *spec.resolution)

        wr = ToneWriter(self.audio_format)
        logger.debug("Encoding %s (VIS %d) at %d Hz", spec.name, spec.vis_code,
                     wr.format.sample_rate)
        wr.write_header()
        wr.write_vis(spec.vis_code)

        state = self.prepare(spec, frame)
        for y in tqdm(range(size[1]), unit='line', desc=spec.name,
                      disable=not progress):
            self.scan_line(wr, spec, state, y)

        buf = wr.finish()
        logger.debug("%s: %d samples (%.2fs)", spec.name, len(buf), buf.duration)
        return buf

    def prepare(self, spec, frame):
        """Precompute per-frame data handed to every scan_line() call."""
        return frame

    def scan_line(self, wr, spec, state, y):
        raise NotImplementedError


def _encoder_table():
    from .martin import MartinEncoder
    from .scottie import ScottieEncoder
    from .pasokon import PasokonEncoder
    from .robot import RobotEncoder
    from .wrasse import WrasseEncoder

    return {
        Family.MARTIN: MartinEncoder,
        Family.SCOTTIE: ScottieEncoder,
        Family.PASOKON: PasokonEncoder,
        Family.ROBOT: RobotEncoder,
        Family.WRASSE: WrasseEncoder,
    }


def create_encoder(mode, audio_format=None):
    """Build the encoder for a mode given as a Mode, VIS code or name.

    Raises:
        InvalidModeError: If the mode is unknown.
    """
    spec = get_mode(mode)
    return _encoder_table()[spec.family](spec.mode, audio_format)


def encode_image(image, mode, audio_format=None, progress=False):
    """Encode an image in the given mode.

    Returns:
        SampleBuffer of the complete transmission.
    """
    return create_encoder(mode, audio_format).encode(image, progress=progress)
