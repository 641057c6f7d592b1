"""
Common CLI utilities shared across command-line interfaces.

This module provides the logging setup, parser construction and summary
output used by the office toolkit commands.
"""

import argparse
import logging
import os
from typing import Optional, Dict, Any


def setup_logging() -> None:
    """
    Configure logging for CLI usage.

    Sets up a standard logging configuration with timestamp, level, and message
    formatting that is consistent across all CLI commands.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )


class BaseArgumentParser:
    """
    Base argument parser class that provides common CLI argument patterns.
    """

    @staticmethod
    def create_base_parser(prog: str, description: str, epilog: Optional[str] = None) -> argparse.ArgumentParser:
        """
        Create a base argument parser with standard configuration.

        Args:
            prog: Program name for the parser
            description: Description of the command
            epilog: Optional epilog text with examples

        Returns:
            Configured ArgumentParser instance
        """
        return argparse.ArgumentParser(
            prog=prog,
            description=description,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=epilog
        )

    @staticmethod
    def add_input_paths_argument(parser: argparse.ArgumentParser, required: bool = True,
                                 help: str = "Paths to document files") -> None:
        """
        Add the positional input paths argument.

        Args:
            parser: ArgumentParser to add argument to
            required: Whether at least one path is required
            help: Help text for the argument
        """
        parser.add_argument("input_paths", nargs='+' if required else '*', help=help)

    @staticmethod
    def add_verbose_quiet_arguments(parser: argparse.ArgumentParser) -> None:
        """
        Add verbose and quiet logging arguments.

        Args:
            parser: ArgumentParser to add arguments to
        """
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )


def validate_common_arguments(args: argparse.Namespace) -> bool:
    """
    Validate common argument patterns.

    Args:
        args: Parsed arguments namespace

    Returns:
        True if arguments are valid, False otherwise
    """
    if getattr(args, 'verbose', False) and getattr(args, 'quiet', False):
        print("Error: --verbose and --quiet cannot be used together")
        return False

    timeout = getattr(args, 'timeout', None)
    if timeout is not None and timeout < 1:
        print("Error: --timeout must be at least 1 second")
        return False

    return True


def configure_logging_level(args: argparse.Namespace) -> None:
    """
    Configure logging level based on verbose/quiet arguments.

    Args:
        args: Parsed arguments with potential verbose/quiet flags
    """
    if getattr(args, 'quiet', False):
        logging.getLogger().setLevel(logging.WARNING)
    elif getattr(args, 'verbose', False):
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def check_input_path_exists(path: str) -> bool:
    """
    Check if an input path exists, logging an error if it does not.

    Args:
        path: Path to check

    Returns:
        True if the path exists, False otherwise
    """
    if not os.path.exists(path):
        logging.error(f"Input path does not exist: {path}")
        return False
    return True


def print_processing_summary(total_files: int, successful: int, failed: int,
                             total_time: float, extra_stats: Optional[Dict[str, Any]] = None) -> None:
    """
    Print a standardized processing summary.

    Args:
        total_files: Total number of files processed
        successful: Number of successfully processed files
        failed: Number of failed files
        total_time: Total processing time in seconds
        extra_stats: Optional dictionary of additional statistics to display
    """
    success_rate = (successful / total_files * 100) if total_files > 0 else 0

    print("\n" + "="*60)
    print("CONVERSION SUMMARY")
    print("="*60)
    print(f"Total files processed: {total_files}")
    print(f"Successful: {successful}")
    print(f"Failed: {failed}")
    print(f"Success rate: {success_rate:.1f}%")
    print(f"Total time: {total_time:.2f}s")

    if extra_stats:
        print("\nAdditional Statistics:")
        for key, value in extra_stats.items():
            print(f"  {key}: {value}")
