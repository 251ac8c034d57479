"""
Logging utilities for recognition events.
"""

import datetime
import logging
from typing import Optional, TextIO

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def setup_logging(level: int = logging.INFO):
    """Configure root logging for the command line tools."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


class MatchLogger:
    """Prints recognition events and optionally mirrors them to a debug file."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file: Optional[TextIO] = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'a', encoding='utf-8')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file '{debug_file}': {e}")
                self.debug_file = None

    @staticmethod
    def _timestamp() -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def _emit(self, message: str):
        line = f"[{self._timestamp()}] {message}"
        print(line)
        if self.debug_file:
            try:
                self.debug_file.write(line + "\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not write to debug file: {e}")

    def log_match(self, name: str, score: float, threshold: Optional[float] = None):
        """Log a match result, flagging scores under the threshold."""
        if threshold is not None and score < threshold:
            self._emit(f"🤔 MATCHED {name} but with score {score:.3f} (threshold {threshold:.2f})")
        else:
            self._emit(f"✅ MATCHED {name} with score {score:.3f}")

    def log_failure(self, error: Exception):
        """Log a failed match attempt."""
        self._emit(f"❌ FAILED TO MATCH: {error}")

    def log_template(self, name: str, point_count: int):
        """Log a newly recorded template."""
        self._emit(f"✏️ TEMPLATE {name} recorded from {point_count} point(s)")

    def log_message(self, message: str):
        self._emit(message)

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
