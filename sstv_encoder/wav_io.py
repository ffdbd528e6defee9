"""WAV file export for encoded SSTV signals."""

import struct

import numpy as np


def export_wav(buffer, filepath):
    """Export a sample buffer as a PCM WAV file.

    Writes a WAVE_FORMAT_PCM file (format tag 1) from scratch at the
    buffer's sample rate and bit depth. Samples are rounded and clipped to
    the signed integer range; 8-bit output is offset to unsigned as the
    format requires.

    Args:
        buffer: SampleBuffer from an encoder.
        filepath: Output WAV file path.
    """
    bits = buffer.format.bit_depth
    ints = buffer.as_int()

    if bits == 8:
        audio_bytes = (ints.astype(np.int16) + 128).astype(np.uint8).tobytes()
    elif bits == 16:
        audio_bytes = ints.astype('<i2').tobytes()
    elif bits == 24:
        # low three bytes of each little-endian int32
        audio_bytes = ints.astype('<i4').view(np.uint8).reshape(-1, 4)[:, :3].tobytes()
    elif bits == 32:
        audio_bytes = ints.astype('<i4').tobytes()
    else:
        raise ValueError(f"Unsupported PCM bit depth: {bits}")

    _write_pcm_wav(audio_bytes, buffer.format.sample_rate, bits, filepath)


def _write_pcm_wav(audio_bytes, sample_rate, bits_per_sample, filepath):
    """Write raw little-endian PCM bytes as a mono WAVE_FORMAT_PCM file."""
    num_channels = 1
    block_align = num_channels * (bits_per_sample // 8)
    byte_rate = sample_rate * block_align
    data_size = len(audio_bytes)
    pad = b'\x00' if data_size % 2 else b''

    fmt_chunk = struct.pack('<4sIHHIIHH',
        b'fmt ', 16, 1, num_channels,
        sample_rate, byte_rate, block_align, bits_per_sample,
    )
    data_chunk_header = struct.pack('<4sI', b'data', data_size)
    riff_size = 4 + len(fmt_chunk) + len(data_chunk_header) + data_size + len(pad)

    with open(filepath, 'wb') as f:
        f.write(struct.pack('<4sI4s', b'RIFF', riff_size, b'WAVE'))
        f.write(fmt_chunk)
        f.write(data_chunk_header)
        f.write(audio_bytes)
        f.write(pad)
