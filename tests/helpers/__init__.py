"""
Test helpers package for office toolkit.

Provides stand-ins for the LibreOffice engine used across the tests.
"""

from .test_utils import (
    FakeEngineRun,
    completed_process,
    write_fake_engine_script,
    suppress_logging,
)

__all__ = [
    'FakeEngineRun',
    'completed_process',
    'write_fake_engine_script',
    'suppress_logging',
]
