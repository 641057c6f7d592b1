"""
Path helpers for extension handling and output filename derivation.
"""

import os
from pathlib import Path
from typing import Optional


def normalize_extension(extension: Optional[str]) -> str:
    """
    Normalize a file extension for comparison.

    Args:
        extension: Extension with or without a leading dot (e.g. '.DOCX', 'pdf')

    Returns:
        Lowercase extension without the leading dot, '' for None
    """
    if not extension:
        return ""
    return extension.strip().lstrip(".").lower()


def get_extension(path: str) -> str:
    """Return the normalized extension of a path ('' if it has none)."""
    return normalize_extension(Path(path).suffix)


def derive_output_filename(source_path: str, target_extension: str) -> str:
    """
    Build the filename LibreOffice gives a converted document.

    The engine keeps the source stem and appends the target extension,
    so 'notes.txt.txt' converted to 'pdf' becomes 'notes.txt.pdf'.

    Args:
        source_path: Path of the source document
        target_extension: Extension of the produced file

    Returns:
        Bare filename (no directory component)
    """
    stem = Path(source_path).stem
    return f"{stem}.{normalize_extension(target_extension)}"


def parent_directory(path: str) -> str:
    """Return the directory part of a path, '.' when it has none."""
    return os.path.dirname(path) or "."
