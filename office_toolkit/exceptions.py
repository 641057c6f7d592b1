"""
Exception hierarchy for office document conversion.

Every failure raised by the converter derives from ConverterError so callers
can catch the whole family at once, while the concrete classes carry the
context needed to diagnose a failure without re-running it.
"""

from typing import Optional, Sequence

from . import config


class ConverterError(Exception):
    """Base class for all conversion failures."""


class SourceNotFoundError(ConverterError, FileNotFoundError):
    """Raised when the source document does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File {path} not found!")


class UnsupportedFormatError(ConverterError):
    """Raised when no handler accepts the source extension."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Can not handle file type {extension!r}")


class InvalidConversionError(ConverterError):
    """Raised when the selected handler cannot produce the target extension."""

    def __init__(self, source_extension: str, target_extension: Optional[str], message: Optional[str] = None):
        self.source_extension = source_extension
        self.target_extension = target_extension
        if message is None:
            message = f"Invalid conversion. Can not convert {source_extension} to {target_extension}"
        super().__init__(message)


class MissingExtensionError(InvalidConversionError):
    """Raised when an operation needs a target extension and none was given."""

    def __init__(self, source_extension: str = ""):
        super().__init__(source_extension, None, "No extension is set.")


class EngineError(ConverterError):
    """Base class for failures of the external rendering engine."""


class EngineExecutionError(EngineError):
    """Raised when the engine cannot be started or exits with a non-zero status."""

    def __init__(self, returncode: Optional[int], output: str = "", command: Sequence[str] = ()):
        self.returncode = returncode
        self.output = output or ""
        self.command = list(command)

        if returncode is None:
            message = "LibreOffice could not be started"
        else:
            message = f"LibreOffice conversion failed (code={returncode})."
        tail = self.output.strip()[-config.OUTPUT_TAIL_CHARS:]
        if tail:
            message += f" Output: {tail}"
        super().__init__(message)


class EngineTimeoutError(EngineError):
    """Raised when the engine runs longer than the configured timeout."""

    def __init__(self, timeout: float, output: str = ""):
        self.timeout = timeout
        self.output = output or ""
        super().__init__(f"LibreOffice conversion timed out after {timeout}s")


class OutputNotFoundError(ConverterError):
    """Raised when the engine reported success but the expected file is missing."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Converted file not found: {path}")
