"""
LibreOffice engine invocation.

Builds the headless command line for a single conversion and runs it as a
subprocess. The argument vector is assembled fresh for every call and passed
to subprocess.run() directly, so no shell quoting is involved.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Optional

from . import config
from .exceptions import EngineExecutionError, EngineTimeoutError
from .utils.paths import normalize_extension

logger = logging.getLogger(__name__)


def find_engine_binary() -> str:
    """
    Locate the LibreOffice executable in PATH.

    Returns:
        Full path of the first candidate found, or the default binary name
        when none is installed
    """
    for candidate in config.ENGINE_BINARY_CANDIDATES:
        found = shutil.which(candidate)
        if found:
            return found
    return config.DEFAULT_BINARY_PATH


def format_convert_to(extension: str, output_filter: Optional[str] = None) -> str:
    """
    Build the value of the --convert-to option.

    Args:
        extension: Target extension (e.g. 'pdf')
        output_filter: Optional LibreOffice export filter (e.g. 'writer_pdf_Export')

    Returns:
        'ext' or 'ext:filter'
    """
    ext = normalize_extension(extension)
    return f"{ext}:{output_filter}" if output_filter else ext


def build_command(
    binary_path: str,
    source_path: str,
    output_dir: str,
    extension: str,
    output_filter: Optional[str] = None,
) -> list[str]:
    """
    Assemble the argument vector for one conversion.

    Returns:
        [binary, '--headless', '--outdir', dir, '--convert-to', fmt, source]
    """
    return [
        binary_path,
        "--headless",
        "--outdir",
        str(output_dir),
        "--convert-to",
        format_convert_to(extension, output_filter),
        str(source_path),
    ]


def run_engine(
    binary_path: str,
    source_path: str,
    output_dir: str,
    extension: str,
    *,
    output_filter: Optional[str] = None,
    timeout: Optional[float] = config.DEFAULT_TIMEOUT,
) -> str:
    """
    Run LibreOffice headless to convert one document.

    Args:
        binary_path: LibreOffice executable
        source_path: Document to convert
        output_dir: Directory the engine writes into
        extension: Target extension
        output_filter: Optional export filter name
        timeout: Seconds before the process is killed; 0 or None disables it

    Returns:
        Captured standard output and error of the engine

    Raises:
        EngineTimeoutError: If the process exceeds the timeout
        EngineExecutionError: If the process cannot start or exits non-zero
    """
    cmd = build_command(binary_path, source_path, output_dir, extension, output_filter)
    logger.debug(f"Running LibreOffice: {' '.join(cmd)}")

    try:
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=timeout or None,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        output = e.output or ""
        if isinstance(output, bytes):
            output = output.decode("utf-8", errors="replace")
        raise EngineTimeoutError(timeout, output) from e
    except OSError as e:
        raise EngineExecutionError(None, str(e), cmd) from e

    output = proc.stdout or ""
    if proc.returncode != 0:
        raise EngineExecutionError(proc.returncode, output, cmd)

    if output.strip():
        logger.debug(f"LibreOffice output: {output.strip()}")
    return output
