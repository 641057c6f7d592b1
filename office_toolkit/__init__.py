"""
Office document conversion toolkit.

Converts word processing, spreadsheet, presentation and drawing documents
into other formats by driving LibreOffice in headless mode.
"""

from .converter import Converter
from .exceptions import (
    ConverterError,
    EngineError,
    EngineExecutionError,
    EngineTimeoutError,
    InvalidConversionError,
    MissingExtensionError,
    OutputNotFoundError,
    SourceNotFoundError,
    UnsupportedFormatError,
)
from .handlers import CalcHandler, DocumentHandler, DrawHandler, ImpressHandler, WriterHandler
from .registry import DEFAULT_REGISTRY, HandlerRegistry, can_handle_extension, create_default_registry

__version__ = "0.1.0"

__all__ = [
    'Converter',
    'HandlerRegistry', 'DEFAULT_REGISTRY', 'create_default_registry', 'can_handle_extension',
    'DocumentHandler', 'WriterHandler', 'CalcHandler', 'ImpressHandler', 'DrawHandler',
    'ConverterError', 'SourceNotFoundError', 'UnsupportedFormatError', 'InvalidConversionError',
    'MissingExtensionError', 'EngineError', 'EngineExecutionError', 'EngineTimeoutError',
    'OutputNotFoundError',
]
