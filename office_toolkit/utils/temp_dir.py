"""
Scoped temporary directory management.

Conversions that read their result back into memory need somewhere for the
engine to write. The directory is created at the start of the operation and
removed when the operation ends, whether it succeeded or raised.
"""

from __future__ import annotations

import contextlib
import logging
import shutil
import tempfile
from pathlib import Path
from typing import Iterator

from .. import config

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def scoped_temp_dir(
    root: str | None = None,
    *,
    prefix: str = config.TEMP_DIR_PREFIX,
) -> Iterator[Path]:
    """
    Create a temporary directory that lives for the duration of a with-block.

    Args:
        root: Parent directory (created if missing); None means the system temp dir
        prefix: Prefix for generated names

    Yields:
        Resolved path of the temporary directory
    """
    base = Path(root) if root else Path(tempfile.gettempdir())
    base.mkdir(parents=True, exist_ok=True)

    temp_path = Path(tempfile.mkdtemp(prefix=prefix, dir=str(base))).resolve()
    logger.debug(f"Created temporary directory: {temp_path}")

    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)
        logger.debug(f"Removed temporary directory: {temp_path}")
