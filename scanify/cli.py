"""Command-line interface for scanify."""

import argparse
from pathlib import Path

from . import __version__
from .config import WARP_STRATEGIES, ProcessingConfig, WarpStrategy
from .core.io import REFERENCE_DPI, is_image_file

EPILOG = """\
Examples:
  scanify page-1.png page-2.png
  scanify pages/*.png -o scanned/ --aggressive
  scanify page.png --warp --dust --seed 42

Presets:
  default     Subtle rotation (+/-0.4 deg), light grain and shadows
  aggressive  Stronger rotation (+/-1.5 deg), grain, blur and shadows

Warp strategies:
  shadow-band Shadow band across the page, as if the sheet were bent
  bump        Lens-like bulge displacing the page content
"""


def parse_args(args=None) -> ProcessingConfig:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv).

    Returns:
        ProcessingConfig with parsed options.
    """
    parser = argparse.ArgumentParser(
        prog="scanify",
        description="Make rendered document pages look like scanned paper.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "inputs",
        nargs="+",
        metavar="INPUT",
        help="Page images (.png, .jpg, .tif) rendered from the document",
    )

    parser.add_argument(
        "-o", "--output-dir",
        type=str,
        default=None,
        help="Directory for processed pages (default: next to each input, as NAME_scanned.png)",
    )

    parser.add_argument(
        "--aggressive",
        action="store_true",
        help="Use the aggressive preset (more noise, rotation and shadow)",
    )

    parser.add_argument(
        "--warp",
        action="store_true",
        help="Simulate bent paper",
    )

    parser.add_argument(
        "--warp-strategy",
        type=str,
        default=None,
        choices=WARP_STRATEGIES,
        help="How --warp renders the bend; requires --warp (default: shadow-band)",
    )

    parser.add_argument(
        "--dust",
        action="store_true",
        help="Add dust specks and hairs from the scanner glass",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output (default: random)",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Pages processed in parallel (default: CPU count)",
    )

    parser.add_argument(
        "--dpi",
        type=int,
        default=REFERENCE_DPI,
        help=f"Resolution recorded in the output images (default: {REFERENCE_DPI})",
    )

    parsed = parser.parse_args(args)

    # Validate inputs exist
    for input_path in parsed.inputs:
        if not Path(input_path).is_file():
            parser.error(f"Input file not found: {input_path}")
        if not is_image_file(input_path):
            parser.error(f"Input is not a supported image: {input_path}")
    if parsed.workers is not None and parsed.workers < 1:
        parser.error("--workers must be at least 1")
    if parsed.dpi <= 0:
        parser.error("--dpi must be positive")
    if parsed.warp_strategy is not None and not parsed.warp:
        parser.error("--warp-strategy requires --warp")

    config = ProcessingConfig.from_args(
        input_paths=parsed.inputs,
        output_dir=parsed.output_dir,
        aggressive=parsed.aggressive,
        warp=parsed.warp,
        warp_strategy=parsed.warp_strategy or WarpStrategy.SHADOW_BAND.value,
        dust=parsed.dust,
        seed=parsed.seed,
        workers=parsed.workers,
        dpi=parsed.dpi,
    )

    for target, sources in config.output_collisions().items():
        parser.error(
            f"Inputs {', '.join(sources)} would overwrite the same output: {target}"
        )

    return config
