"""
Logging utilities for recognition results and training events.
"""

import datetime
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class RecognitionLogger:
    """Handles console and debug-file logging of recognized gestures."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w', encoding='utf-8')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file '{debug_file}': {e}")

    @staticmethod
    def _timestamp() -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def log_result(self, result, stroke_count: int = 1) -> str:
        """Log a recognition result and return the printed line."""
        timestamp = self._timestamp()

        if result.matched:
            line = (f"[{timestamp}] ✅ RECOGNIZED: {result.name} "
                    f"(score {result.score:.2f}, {stroke_count} stroke(s), "
                    f"{result.comparisons} comparisons, {result.time_ms:.1f}ms)")
        else:
            line = f"[{timestamp}] ❓ NO MATCH: {stroke_count} stroke(s)"

        print(line)
        self._write(f"[{timestamp}] {result}\n")
        return line

    def log_training(self, name: str, variant_count: int) -> str:
        """Log a template being added to the library."""
        timestamp = self._timestamp()
        line = f"[{timestamp}] 📚 TEMPLATE: {name} ({variant_count} variant(s))"
        print(line)
        self._write(line + "\n")
        return line

    def _write(self, message: str):
        if self.debug_file:
            try:
                self.debug_file.write(message)
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not write to debug file: {e}")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
