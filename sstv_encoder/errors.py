"""Exceptions raised by the SSTV encoder."""


class SSTVError(Exception):
    """Base class for all encoder errors."""


class InvalidModeError(SSTVError, ValueError):
    """The requested mode is not one an encoder knows how to transmit.

    Raised before any audio is produced, so a caller never receives a
    signal with the wrong timing.
    """

    def __init__(self, mode, family=None):
        self.mode = mode
        self.family = family
        if family is None:
            message = f"Unknown SSTV mode: {mode!r}"
        else:
            message = f"Illegal {family} encoding mode: {mode!r}"
        super().__init__(message)
