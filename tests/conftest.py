"""
Pytest configuration and fixtures for office toolkit tests.
"""

import pytest
import os
import sys
import tempfile
import shutil
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def sample_docx(temp_dir):
    """Create a placeholder .docx file (contents are never parsed)."""
    file_path = os.path.join(temp_dir, "report.docx")
    with open(file_path, 'wb') as f:
        f.write(b"PK\x03\x04 placeholder")
    return file_path


@pytest.fixture
def sample_xlsx(temp_dir):
    """Create a placeholder .xlsx file."""
    file_path = os.path.join(temp_dir, "budget.xlsx")
    with open(file_path, 'wb') as f:
        f.write(b"PK\x03\x04 placeholder")
    return file_path
