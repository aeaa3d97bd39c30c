"""CLI tool for writing printer command files."""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from thermalpos.config import AppConfig, load_config, settings
from thermalpos.encoders.barcode import encode_barcode
from thermalpos.encoders.symbols import encode_maxicode, encode_pdf417, encode_qr
from thermalpos.errors import EncodingError
from thermalpos.imaging import encode_image_file
from thermalpos.models.settings import SettingsT

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encode an image, symbol or barcode as printer commands.",
        prog="thermalpos-render",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("output.bin"),
        help="Output file path (default: output.bin)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="YAML file with encoder defaults (default: $THERMALPOS_CONFIG_FILE or thermalpos.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    image = subparsers.add_parser("image", help="Encode a PNG image as raster bands")
    image.add_argument("path", type=Path, help="Image file")
    image.add_argument("--filetype", default="png", help="Image file type (default: png)")
    image.add_argument("--density", type=int, choices=[1, 2], help="Raster density")
    image.add_argument("--dot-matrix", action="store_true", default=None, help="Halftone thinning")
    image.add_argument("--print-red", action="store_true", default=None, help="Print red bands in red")

    qr = subparsers.add_parser("qr", help="Encode a QR code")
    qr.add_argument("data", help="QR code content")
    qr.add_argument("--model", type=int, choices=[1, 2], help="QR model")
    qr.add_argument("--cell-size", help="Module size 1-8")
    qr.add_argument("--correction", help="Error correction level L, M, Q or H")

    pdf417 = subparsers.add_parser("pdf417", help="Encode a PDF417 symbol")
    pdf417.add_argument("data", help="Symbol content")
    pdf417.add_argument("--correction", type=int, help="Error correction level 1-40")
    pdf417.add_argument("--row-height", type=int, help="Row height 2-8")
    pdf417.add_argument("--width", type=int, help="Module width 2-8")
    pdf417.add_argument("--columns", type=int, help="Columns 1-30 (0 = auto)")
    pdf417.add_argument("--truncated", action="store_true", default=None, help="Truncated PDF417")

    maxicode = subparsers.add_parser("maxicode", help="Encode a MaxiCode symbol")
    maxicode.add_argument("data", help="Symbol content")
    maxicode.add_argument("--mode", type=int, help="MaxiCode mode 2-6")

    barcode = subparsers.add_parser("barcode", help="Encode a 1-D barcode as raster bands")
    barcode.add_argument("data", help="Barcode content")
    barcode.add_argument("--type", dest="type_code", type=int, default=73, help="Barcode type code (default: 73)")

    return parser


def _override(defaults: SettingsT, args: argparse.Namespace, *fields: str) -> SettingsT:
    """Apply CLI options that were given on top of the configured defaults.

    The merged values are validated like any other settings mapping.
    """
    updates = {name: getattr(args, name) for name in fields if getattr(args, name) is not None}
    return type(defaults).coerce({**defaults.model_dump(), **updates})


def render(args: argparse.Namespace, config: AppConfig) -> bytes:
    """Build the command bytes for the parsed arguments."""
    if args.command == "image":
        raster = _override(config.raster, args, "density", "dot_matrix", "print_red")
        return encode_image_file(args.path, filetype=args.filetype, settings=raster)
    if args.command == "qr":
        return encode_qr(args.data, _override(config.qr, args, "model", "cell_size", "correction"))
    if args.command == "pdf417":
        options = _override(config.pdf417, args, "correction", "row_height", "width", "columns", "truncated")
        return encode_pdf417(args.data, options)
    if args.command == "maxicode":
        return encode_maxicode(args.data, _override(config.maxicode, args, "mode"))
    if args.command == "barcode":
        return encode_barcode(args.data, args.type_code, config.barcode)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for thermalpos-render CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose or settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(args.config or settings.config_file)
    except (yaml.YAMLError, ValidationError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        data = render(args, config)
    except EncodingError as e:
        logger.error(f"Failed to encode {args.command}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        with open(args.output, "wb") as f:
            f.write(data)
        print(f"Wrote {len(data)} bytes to {args.output}")
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
