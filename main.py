"""CLI entry point for the SSTV encoder."""

import argparse
import logging
import sys

from sstv_encoder.constants import SAMPLE_RATE, BIT_DEPTH


def _resolve_encoder(args):
    """Build the encoder for --mode, or exit with an error."""
    from sstv_encoder import AudioFormat, create_encoder

    try:
        audio_format = AudioFormat(sample_rate=args.sample_rate,
                                   bit_depth=args.bit_depth)
        encoder = create_encoder(args.mode, audio_format)
    except ValueError as e:
        # InvalidModeError is a ValueError
        print(f"Error: {e}")
        sys.exit(2)

    print(f"==> using {encoder.name}, VIS 0x{encoder.vis_code:02x}")
    return encoder


def _transmit(encoder, frame, output):
    """Encode a frame and write the WAV file."""
    from sstv_encoder.wav_io import export_wav

    print("generating ...")
    buffer = encoder.encode(frame, progress=True)

    print("encoding ... ", end='')
    try:
        export_wav(buffer, output)
    except OSError as e:
        print(f"failed: {e}")
        sys.exit(2)
    print("ok")
    print(f"Done: {output} ({len(buffer)} samples, {buffer.duration:.2f}s)")


def cmd_encode(args):
    """Encode an image file to an SSTV WAV file."""
    from sstv_encoder.image_io import load_image, fit_to_resolution

    encoder = _resolve_encoder(args)

    print("loading file ... ", end='')
    try:
        frame = load_image(args.input)
    except (OSError, ValueError) as e:
        print(f"failed: {e}")
        sys.exit(2)
    print(f"ok ({frame.shape[1]} x {frame.shape[0]})")

    print("resizing ... ", end='')
    width, height = encoder.resolution
    if args.no_resize or (frame.shape[1], frame.shape[0]) == (width, height):
        print("skipped")
    else:
        frame = fit_to_resolution(frame, (width, height))
        print("ok")

    _transmit(encoder, frame, args.output)


def cmd_colorbars(args):
    """Generate colour bars at the mode's resolution and encode them."""
    from sstv_encoder.colorbars import generate_colorbars

    encoder = _resolve_encoder(args)
    width, height = encoder.resolution

    print(f"Generating {width}x{height} colour bars...")
    bars = generate_colorbars(width, height)

    if args.save_png:
        from sstv_encoder.image_io import save_image
        print(f"saving pattern to {args.save_png} ... ", end='')
        try:
            save_image(bars, args.save_png)
        except (OSError, ValueError) as e:
            print(f"failed: {e}")
            sys.exit(2)
        print("ok")

    _transmit(encoder, bars, args.output)


def cmd_modes(args):
    """List the supported modes."""
    from sstv_encoder.modes import ALL_MODES

    print(f"{'Mode':<16}{'VIS':>5}  {'Resolution':<12}{'Duration':>10}")
    for spec in sorted(ALL_MODES.values(), key=lambda s: (s.family.value, s.vis_code)):
        res = f"{spec.width}x{spec.height}"
        print(f"{spec.name:<16}{spec.vis_code:>5}  {res:<12}{spec.duration_s:>9.1f}s")


def _add_format_args(parser):
    """Add mode and output format flags to an argparse subparser."""
    parser.add_argument('-m', '--mode', default='martin1',
                        help='Transmission mode, e.g. martin1, scottie2, robot36, '
                             'pasokon7, wrasse-sc2-180 (default: martin1)')
    parser.add_argument('--sample-rate', type=int, default=SAMPLE_RATE,
                        help=f'Output sample rate in Hz (default: {SAMPLE_RATE})')
    parser.add_argument('--bit-depth', type=int, default=BIT_DEPTH,
                        choices=[8, 16, 24, 32],
                        help=f'Output PCM bit depth (default: {BIT_DEPTH})')


def main():
    parser = argparse.ArgumentParser(
        description="SSTV (Slow-Scan Television) Encoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  python main.py encode photo.png -o photo.wav --mode martin1
  python main.py encode photo.jpg -o photo.wav --mode robot36 --sample-rate 48000
  python main.py colorbars -o bars.wav --mode scottie1 --save-png bars.png
  python main.py modes
        """)
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # encode
    p_enc = subparsers.add_parser('encode', help='Encode an image to SSTV audio')
    p_enc.add_argument('input', help='Input image file (PNG, JPG, etc.)')
    p_enc.add_argument('-o', '--output', default='sstv.wav', help='Output WAV file')
    p_enc.add_argument('--no-resize', action='store_true',
                       help='Encode at the image size instead of the mode resolution')
    _add_format_args(p_enc)

    # colorbars
    p_cb = subparsers.add_parser('colorbars', help='Encode a colour bar test pattern')
    p_cb.add_argument('-o', '--output', default='colorbars.wav', help='Output WAV file')
    p_cb.add_argument('--save-png', default=None, help='Also save source pattern as PNG')
    _add_format_args(p_cb)

    # modes
    subparsers.add_parser('modes', help='List supported transmission modes')

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(levelname)s %(name)s: %(message)s')

    commands = {
        'encode': cmd_encode,
        'colorbars': cmd_colorbars,
        'modes': cmd_modes,
    }
    commands[args.command](args)


if __name__ == '__main__':
    main()
