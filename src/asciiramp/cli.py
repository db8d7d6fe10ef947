import argparse
import sys
from pathlib import Path

from asciiramp.charsets import RAMPS
from asciiramp.converter import convert, load_image
from asciiramp.errors import ConversionError
from asciiramp.model import ConversionParameters
from asciiramp.terminal import terminal_columns


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asciiramp", description="Render an image as dithered ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-w", "--width", type=int, default=None, help="Output width in columns (default: terminal width)"
    )
    parser.add_argument(
        "-H", "--height", type=int, default=None, help="Output height in rows (default: half the width)"
    )
    parser.add_argument(
        "-a",
        "--preserve-aspect",
        action="store_true",
        default=False,
        help="Derive the height from the image's aspect ratio instead of --height",
    )
    parser.add_argument(
        "-b",
        "--brightness",
        type=float,
        default=1.0,
        help="Gamma-style brightness (default: 1.0). Values above 1 lighten midtones.",
    )
    parser.add_argument(
        "-c", "--contrast", type=float, default=1.0, help="Contrast around mid-gray (default: 1.0)"
    )
    ramp = parser.add_mutually_exclusive_group()
    ramp.add_argument("-r", "--ramp", default="default", choices=sorted(RAMPS), help="Named symbol ramp")
    ramp.add_argument("--symbols", default=None, help="Literal ramp, darkest symbol first")
    parser.add_argument("--no-dither", action="store_true", default=False, help="Disable error diffusion")
    parser.add_argument(
        "--average", action="store_true", default=False, help="Use the plain RGB mean instead of perceptual luminance"
    )
    parser.add_argument("-o", "--output", default=None, help="Write the art to a file instead of stdout")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    width = args.width if args.width is not None else terminal_columns()
    height = args.height if args.height is not None else max(1, width // 2)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        return 1

    params = ConversionParameters(
        target_width=width,
        preserve_aspect_ratio=args.preserve_aspect,
        target_height=height,
        brightness=args.brightness,
        contrast=args.contrast,
        dither=not args.no_dither,
        luminance="average" if args.average else "perceptual",
    )
    ramp = args.symbols if args.symbols is not None else RAMPS[args.ramp]

    try:
        art = convert(load_image(image_path), params, ramp)
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(art.to_text() + "\n", encoding="utf-8")
    else:
        print(art.to_text())
    return 0


if __name__ == "__main__":
    sys.exit(main())
