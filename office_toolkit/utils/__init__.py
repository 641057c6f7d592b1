"""
Utility modules for office toolkit.

This package provides helpers that support the converter: path handling,
scoped temporary directories and shared CLI plumbing.
"""

from .paths import normalize_extension, get_extension, derive_output_filename, parent_directory
from .temp_dir import scoped_temp_dir
from .cli_common import setup_logging, BaseArgumentParser, validate_common_arguments, configure_logging_level, check_input_path_exists, print_processing_summary

__all__ = [
    'normalize_extension', 'get_extension', 'derive_output_filename', 'parent_directory',
    'scoped_temp_dir',
    'setup_logging', 'BaseArgumentParser', 'validate_common_arguments', 'configure_logging_level', 'check_input_path_exists', 'print_processing_summary'
]
