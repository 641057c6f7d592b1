"""
CLI for converting office documents with LibreOffice.

This module provides the office-convert command: convert one or more
documents to another format, extract their text, or render thumbnails.
"""

import logging
import os
import sys
import time

from tqdm import tqdm

from .. import config
from ..converter import Converter
from ..engine import find_engine_binary
from ..exceptions import ConverterError
from ..registry import DEFAULT_REGISTRY
from ..stats import ConversionStats
from ..utils import (
    BaseArgumentParser,
    check_input_path_exists,
    configure_logging_level,
    derive_output_filename,
    normalize_extension,
    print_processing_summary,
    setup_logging,
    validate_common_arguments,
)


def create_parser():
    """Create argument parser for convert command."""
    epilog = """
Examples:
  # Convert a document to PDF next to the source
  office-convert report.docx --to pdf

  # Convert to an exact destination (format taken from the suffix)
  office-convert report.docx --output out/annual-report.pdf

  # Convert several spreadsheets into a directory
  office-convert q1.xlsx q2.xlsx --to pdf --output-dir exports/

  # Print the plain text of a document
  office-convert notes.odt --text

  # Render a PNG preview next to each slide deck
  office-convert deck.pptx other.odp --thumbnail --to png

  # List supported formats
  office-convert --list-formats
        """

    parser = BaseArgumentParser.create_base_parser(
        prog="office-convert",
        description="Convert office documents using LibreOffice",
        epilog=epilog
    )

    BaseArgumentParser.add_input_paths_argument(
        parser,
        required=False,
        help="Paths to the documents to convert"
    )

    parser.add_argument(
        "--to",
        type=str,
        default=None,
        help="Target format extension (e.g. pdf, docx, png)"
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Destination file (single input only)"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for converted files (default: next to each input)"
    )
    parser.add_argument(
        "--text",
        action="store_true",
        help="Print the plain text of each document instead of saving a file"
    )
    parser.add_argument(
        "--thumbnail",
        action="store_true",
        help=f"Render a preview image next to each document (default format: {config.DEFAULT_THUMBNAIL_EXTENSION})"
    )
    parser.add_argument(
        "--filter",
        type=str,
        default=None,
        help="LibreOffice export filter appended to the target format"
    )
    parser.add_argument(
        "--binary",
        type=str,
        default=None,
        help="LibreOffice executable (default: soffice/libreoffice from PATH)"
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=config.DEFAULT_TIMEOUT,
        help=f"Seconds before a conversion is aborted (default: {config.DEFAULT_TIMEOUT})"
    )
    parser.add_argument(
        "--temp-dir",
        type=str,
        default=config.DEFAULT_TEMPORARY_PATH,
        help="Root for temporary directories (default: system temp directory)"
    )
    parser.add_argument(
        "--list-formats",
        action="store_true",
        help="List supported file formats and exit"
    )

    BaseArgumentParser.add_verbose_quiet_arguments(parser)

    return parser


def list_supported_formats(registry=DEFAULT_REGISTRY):
    """Display supported input and output formats per document category."""
    print("Supported file formats:")
    print("=====================")

    for handler in registry:
        print(f"\n{handler.name.capitalize()}:")
        print(f"  Input:  {', '.join(sorted(handler.accepted_extensions))}")
        print(f"  Output: {', '.join(sorted(handler.producible_extensions))}")

    print(f"\nTotal supported input formats: {len(registry.supported_extensions())}")


def validate_arguments(args):
    """Validate command line arguments."""
    if args.list_formats:
        return True

    if not args.input_paths:
        print("Error: at least one input path is required (unless using --list-formats)")
        return False

    if args.text and args.thumbnail:
        print("Error: --text and --thumbnail cannot be used together")
        return False

    if args.output and len(args.input_paths) > 1:
        print("Error: --output can only be used with a single input")
        return False

    if args.output and args.output_dir:
        print("Error: --output and --output-dir cannot be used together")
        return False

    if not (args.text or args.thumbnail or args.to or args.output):
        print("Error: specify a target format with --to or a destination with --output")
        return False

    return validate_common_arguments(args)


def get_destination_path(input_path, args):
    """
    Determine where a converted document is saved.

    Args:
        input_path: Source document
        args: Parsed arguments

    Returns:
        Destination file path
    """
    if args.output:
        return args.output

    output_dir = args.output_dir or os.path.dirname(input_path)
    return os.path.join(output_dir, derive_output_filename(input_path, args.to))


def convert_file(input_path, args, binary_path):
    """
    Convert a single document according to the parsed arguments.

    Args:
        input_path: Source document
        args: Parsed arguments
        binary_path: LibreOffice executable

    Returns:
        Dictionary with conversion results containing:
        - file_path / file_name: The source document
        - success: Boolean indicating success
        - format: Target format
        - output: Written path, or extracted text for --text
        - processing_time: Time taken in seconds
        - error: Error message if failed
    """
    if args.text:
        target_format = config.DEFAULT_TEXT_EXTENSION
    elif args.thumbnail:
        target_format = normalize_extension(args.to) or config.DEFAULT_THUMBNAIL_EXTENSION
    else:
        target_format = normalize_extension(args.to) or os.path.splitext(args.output)[1].lstrip('.').lower()

    result = {
        'file_path': input_path,
        'file_name': os.path.basename(input_path),
        'success': False,
        'format': target_format,
        'output': '',
        'processing_time': 0,
        'error': '',
    }

    start_time = time.time()
    try:
        converter = (
            Converter(input_path)
            .set_binary_path(binary_path)
            .set_timeout(args.timeout)
            .set_temporary_path(args.temp_dir)
        )

        if args.text:
            result['output'] = converter.text()
        elif args.thumbnail:
            result['output'] = converter.thumbnail(target_format, args.filter)
        else:
            destination = get_destination_path(input_path, args)
            converter.save(destination, args.to, args.filter)
            result['output'] = destination

        result['success'] = True
    except (ConverterError, OSError) as e:
        result['error'] = str(e)

    result['processing_time'] = time.time() - start_time
    return result


def main(argv=None):
    """Main entry point for office-convert command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.list_formats:
        list_supported_formats()
        return

    if not validate_arguments(args):
        parser.print_help()
        sys.exit(1)

    setup_logging()
    configure_logging_level(args)

    input_paths = [path for path in args.input_paths if check_input_path_exists(path)]
    missing = len(args.input_paths) - len(input_paths)

    binary_path = args.binary or find_engine_binary()
    logging.debug(f"Using LibreOffice binary: {binary_path}")

    stats = ConversionStats()
    conversion_start_time = time.time()

    try:
        progress = tqdm(
            input_paths,
            desc="Converting",
            unit="file",
            disable=len(input_paths) < 2 or args.quiet or args.text,
        )
        for file_path in progress:
            logging.info(f"Processing: {file_path}")
            result = convert_file(file_path, args, binary_path)
            stats.add_result(
                result['format'],
                result['success'],
                result['processing_time'],
                file_path=file_path,
                error=result['error'],
            )

            if result['success']:
                if args.text:
                    print(result['output'])
                else:
                    logging.info(f"  -> SUCCESS ({result['output']}, {result['processing_time']:.2f}s)")
            else:
                logging.error(f"  -> FAILED: {result['error']}")

    except KeyboardInterrupt:
        logging.info("Conversion cancelled by user.")
        sys.exit(1)

    summary = stats.get_summary()
    failed = summary['failed_processed'] + missing

    if not args.text and not args.quiet:
        print_processing_summary(
            summary['total_processed'] + missing,
            summary['successful_processed'],
            failed,
            time.time() - conversion_start_time,
            extra_stats=summary['format_stats'] or None,
        )
        if stats.failures:
            print("\nFailed files:")
            for path, error in stats.failures.items():
                print(f"  - {os.path.basename(path)}: {error}")

    if failed > 0:
        sys.exit(1)


if __name__ == "__main__":
    main()
