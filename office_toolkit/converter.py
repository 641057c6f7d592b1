"""
Office document converter driven by LibreOffice.

A Converter is bound to one source document. At construction it picks the
handler for the document's extension; each operation then checks that the
requested output format is legal for that handler before running the engine.

Example:
    >>> converter = Converter('report.docx').set_timeout(120)
    >>> converter.save('out/report.pdf')
    True
    >>> pdf_bytes = converter.content('pdf')
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from . import config
from .engine import run_engine
from .exceptions import (
    InvalidConversionError,
    MissingExtensionError,
    OutputNotFoundError,
    SourceNotFoundError,
    UnsupportedFormatError,
)
from .handlers import DocumentHandler
from .registry import DEFAULT_REGISTRY, HandlerRegistry
from .utils.paths import derive_output_filename, get_extension, normalize_extension, parent_directory
from .utils.temp_dir import scoped_temp_dir


class Converter:
    """
    Convert a single office document into other formats.

    Settings (binary path, temporary path, timeout) can be changed at any
    time through the chainable setters and apply to the next operation.
    Operations are synchronous; one instance runs one operation at a time.
    """

    def __init__(self, file: str | os.PathLike, file_type: str | None = None,
                 *, registry: HandlerRegistry | None = None):
        """
        Bind the converter to a source document.

        Args:
            file: Path to the source document
            file_type: Extension to use instead of the path's own suffix
            registry: Handler registry to resolve against (default registry if None)

        Raises:
            SourceNotFoundError: If the file does not exist
            UnsupportedFormatError: If no handler accepts the extension
        """
        path = os.fspath(file)
        if not os.path.exists(path):
            raise SourceNotFoundError(path)

        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        extension = normalize_extension(file_type) if file_type else get_extension(path)

        handler = self.registry.resolve(extension)
        if handler is None:
            raise UnsupportedFormatError(extension)

        self._file = path
        self._handler = handler
        self._source_extension = extension
        self._directory = parent_directory(path)
        self._basename = os.path.basename(path)

        self.binary_path = config.DEFAULT_BINARY_PATH
        self.temporary_path = config.DEFAULT_TEMPORARY_PATH
        self.timeout = config.DEFAULT_TIMEOUT
        self.logger = logging.getLogger(__name__)
        self.logger.debug(f"Selected {handler.name} handler for {path}")

    @classmethod
    def file(cls, file: str | os.PathLike, file_type: str | None = None,
             *, registry: HandlerRegistry | None = None) -> "Converter":
        """Alternate constructor reading naturally in chains: Converter.file(p).save(...)."""
        return cls(file, file_type, registry=registry)

    @staticmethod
    def can_handle_extension(extension: str) -> bool:
        """Check if the default registry accepts source files with this extension."""
        return DEFAULT_REGISTRY.can_handle(extension)

    @property
    def source_path(self) -> str:
        return self._file

    @property
    def source_extension(self) -> str:
        return self._source_extension

    @property
    def handler(self) -> DocumentHandler:
        return self._handler

    # Configuration

    def set_binary_path(self, path: str) -> "Converter":
        self.binary_path = path
        return self

    # Alias matching the engine name, for callers used to it.
    set_libreoffice_binary_path = set_binary_path

    def set_temporary_path(self, path: str) -> "Converter":
        self.temporary_path = path
        return self

    def set_timeout(self, timeout: int) -> "Converter":
        """Set the engine timeout in seconds; 0 disables the timeout."""
        self.timeout = timeout
        return self

    # Legality check

    def is_convertible(self, extension: str | None) -> bool:
        """
        Check if the source can be converted to the given extension.

        Args:
            extension: Target extension

        Returns:
            True if the selected handler can produce it

        Raises:
            MissingExtensionError: If extension is empty or None
        """
        ext = normalize_extension(extension)
        if not ext:
            raise MissingExtensionError(self._source_extension)
        return self.registry.can_produce(self._handler, ext)

    def _check_conversion(self, extension: str | None) -> str:
        if not self.is_convertible(extension):
            raise InvalidConversionError(self._source_extension, normalize_extension(extension))
        return normalize_extension(extension)

    # Operations

    def content(self, extension: str | None = None, output_filter: str | None = None) -> bytes:
        """
        Convert the document and return the result as bytes.

        The engine writes into a scoped temporary directory under the
        temporary path, which is removed before this method returns or raises.

        Args:
            extension: Target extension (required)
            output_filter: Optional LibreOffice export filter name

        Returns:
            Content of the converted file

        Raises:
            MissingExtensionError: If no extension is given
            InvalidConversionError: If the conversion is not legal
            EngineExecutionError: If LibreOffice fails
            EngineTimeoutError: If LibreOffice exceeds the timeout
            OutputNotFoundError: If the expected output file is missing
        """
        ext = self._check_conversion(extension)

        with scoped_temp_dir(self.temporary_path) as temp_dir:
            self._call_engine(str(temp_dir), ext, output_filter)

            produced = temp_dir / derive_output_filename(self._file, ext)
            if not produced.is_file():
                raise OutputNotFoundError(str(produced))
            data = produced.read_bytes()

        self.logger.info(f"Converted {self._basename} to {ext} ({len(data)} bytes)")
        return data

    def text(self) -> str:
        """Extract the plain text of the document, with surrounding whitespace removed."""
        data = self.content(config.DEFAULT_TEXT_EXTENSION)
        return data.decode("utf-8-sig", errors="replace").strip()

    def save(self, path: str | os.PathLike, extension: str | None = None,
             output_filter: str | None = None) -> bool:
        """
        Convert the document and write the result to a path.

        The target extension is the explicit one if given, otherwise the
        destination's own suffix. LibreOffice writes '<source stem>.<ext>'
        into the destination's directory and the file is then renamed to the
        destination's filename. If the destination is an existing directory,
        the output is left there under the engine's name.

        When a different file named '<source stem>.<ext>' already exists next
        to the destination, the engine writes into a scoped directory inside
        the destination's directory instead, so that file is left untouched.
        A pre-existing file at the destination itself is overwritten by the
        engine in place.

        Args:
            path: Destination file (or existing directory)
            extension: Target extension overriding the destination suffix
            output_filter: Optional LibreOffice export filter name

        Returns:
            True on success

        Raises:
            MissingExtensionError: If no target extension can be determined
            InvalidConversionError: If the conversion is not legal
            EngineExecutionError: If LibreOffice fails
            EngineTimeoutError: If LibreOffice exceeds the timeout
            OutputNotFoundError: If the expected output file is missing
        """
        destination = os.fspath(path)
        into_directory = os.path.isdir(destination)

        if extension is None and not into_directory:
            extension = get_extension(destination)
        ext = self._check_conversion(extension)

        if into_directory:
            output_dir = destination
            destination = os.path.join(output_dir, derive_output_filename(self._file, ext))
        else:
            output_dir = parent_directory(destination)
        Path(output_dir).mkdir(parents=True, exist_ok=True)

        produced = os.path.join(output_dir, derive_output_filename(self._file, ext))
        renaming = os.path.abspath(produced) != os.path.abspath(destination)

        if renaming and os.path.lexists(produced):
            self.logger.debug(f"{produced} already exists, converting in a scoped directory")
            with scoped_temp_dir(output_dir) as temp_dir:
                self._call_engine(str(temp_dir), ext, output_filter)
                produced = str(temp_dir / derive_output_filename(self._file, ext))
                if not os.path.isfile(produced):
                    raise OutputNotFoundError(produced)
                os.replace(produced, destination)
        else:
            self._call_engine(output_dir, ext, output_filter)
            if not os.path.isfile(produced):
                raise OutputNotFoundError(produced)
            if renaming:
                os.replace(produced, destination)

        self.logger.info(f"Saved {self._basename} as {destination}")
        return True

    def thumbnail(self, extension: str = config.DEFAULT_THUMBNAIL_EXTENSION,
                  output_filter: str | None = None) -> str:
        """
        Render a preview image next to the source document.

        Args:
            extension: Image format (default 'jpg')
            output_filter: Optional LibreOffice export filter name

        Returns:
            Path of the written image, '<source dir>/<source stem>.<ext>'
        """
        ext = self._check_conversion(extension)
        destination = os.path.join(self._directory, derive_output_filename(self._file, ext))
        self.save(destination, ext, output_filter)
        return destination

    def _call_engine(self, output_dir: str, extension: str, output_filter: str | None) -> str:
        return run_engine(
            self.binary_path,
            self._file,
            output_dir,
            extension,
            output_filter=output_filter,
            timeout=self.timeout,
        )

    def __repr__(self) -> str:
        return f"Converter(file={self._file!r}, handler={self._handler.name!r})"
