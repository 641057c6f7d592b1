"""
Configuration module for office toolkit.

This module contains default configuration values used across the office toolkit,
including the engine binary, timeouts, temporary directory locations and
the default output formats of the convenience operations.
"""

from typing import Optional, Tuple

# Rendering engine
DEFAULT_BINARY_PATH = "libreoffice"
"""str: Default LibreOffice executable used when no binary path is configured.

Resolved through PATH by the operating system. Use Converter.set_binary_path()
or the --binary CLI option to point at a specific installation.
"""

ENGINE_BINARY_CANDIDATES: Tuple[str, ...] = ("soffice", "libreoffice")
"""Tuple[str, ...]: Executable names searched in PATH by find_engine_binary()."""

DEFAULT_TIMEOUT = 2000
"""int: Default engine timeout in seconds.

Large spreadsheets and presentations can take several minutes to render,
so the default is generous. The process is killed when it is exceeded.
A timeout of 0 means no timeout.
"""

# Temporary directories
DEFAULT_TEMPORARY_PATH: Optional[str] = None
"""Optional[str]: Root directory for scoped temporary directories.

None means the system temporary directory (tempfile.gettempdir()).
"""

TEMP_DIR_PREFIX = "office_toolkit_"
"""str: Prefix of the scoped temporary directories created for content()."""

# Convenience operation defaults
DEFAULT_THUMBNAIL_EXTENSION = "jpg"
"""str: Image format produced by Converter.thumbnail() when none is given."""

DEFAULT_TEXT_EXTENSION = "txt"
"""str: Plain-text format used by Converter.text()."""

OUTPUT_TAIL_CHARS = 2000
"""int: Number of trailing characters of engine output kept in error messages."""
