"""Mini README: Display formatting for classification results."""

from .formatter import NO_RESULTS_TEXT, ResultFormatter, format_classifications, format_line

__all__ = ["NO_RESULTS_TEXT", "ResultFormatter", "format_classifications", "format_line"]
