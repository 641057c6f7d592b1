"""
Document category handlers.

Each handler declares which input extensions a LibreOffice application
recognizes and which output formats it can export.
"""

from .base import DocumentHandler
from .calc import CalcHandler
from .draw import DrawHandler
from .impress import ImpressHandler
from .writer import WriterHandler

__all__ = [
    'DocumentHandler',
    'WriterHandler',
    'CalcHandler',
    'ImpressHandler',
    'DrawHandler',
]
