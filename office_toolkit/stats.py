"""
Conversion statistics tracking module.

Keeps the bookkeeping of batch conversions out of the CLI loop.
"""

from typing import Dict, Any
from dataclasses import dataclass, field


@dataclass
class ConversionStats:
    """
    Tracks statistics for a batch of document conversions.

    Results are counted per target format so the summary can show what
    was produced.
    """
    total_processed: int = 0
    successful_processed: int = 0
    failed_processed: int = 0
    total_processing_time: float = 0.0
    format_stats: Dict[str, int] = field(default_factory=dict)
    failures: Dict[str, str] = field(default_factory=dict)

    def add_result(self, target_format: str, success: bool, processing_time: float = 0.0,
                   file_path: str = '', error: str = ''):
        """
        Add a conversion result to the statistics.

        Args:
            target_format: Output format of the conversion ('pdf', 'txt', ...)
            success: Whether the conversion succeeded
            processing_time: Time taken in seconds
            file_path: Source document, recorded for failures
            error: Error message, recorded for failures
        """
        self.total_processed += 1
        self.total_processing_time += processing_time

        if success:
            self.successful_processed += 1
        else:
            self.failed_processed += 1
            if file_path:
                self.failures[file_path] = error or 'Unknown error'

        self.format_stats[target_format] = self.format_stats.get(target_format, 0) + 1

    def get_summary(self) -> Dict[str, Any]:
        """
        Get a summary of the statistics.

        Returns:
            Dictionary with counts, success rate and timings
        """
        if self.total_processed == 0:
            return {
                'total_processed': 0,
                'successful_processed': 0,
                'failed_processed': 0,
                'success_rate': 0.0,
                'average_time_per_file': 0.0,
                'total_processing_time': 0.0,
                'format_stats': {}
            }

        return {
            'total_processed': self.total_processed,
            'successful_processed': self.successful_processed,
            'failed_processed': self.failed_processed,
            'success_rate': (self.successful_processed / self.total_processed) * 100,
            'average_time_per_file': self.total_processing_time / self.total_processed,
            'total_processing_time': self.total_processing_time,
            'format_stats': self.format_stats.copy()
        }

    def reset(self):
        """Reset all statistics to zero."""
        self.total_processed = 0
        self.successful_processed = 0
        self.failed_processed = 0
        self.total_processing_time = 0.0
        self.format_stats.clear()
        self.failures.clear()
