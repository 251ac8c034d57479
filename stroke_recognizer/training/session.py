"""
Template training session.

Keeps the state of the interactive trainer independent of any UI: record
templates, attempt gestures against them, and save or load the template
file. Every action returns a short status message for display.
"""

import logging
from enum import Enum
from typing import List, Optional, Tuple

from ..config.settings import RecognizerConfig
from ..core.exceptions import DegeneratePathError, RecognitionError
from ..gestures.dollar_recognizer import DollarRecognizer
from ..recording.recorder import GestureRecorder
from ..utils.logger import MatchLogger

logger = logging.getLogger(__name__)


class RecordMode(Enum):
    TEMPLATE = 'template'
    ATTEMPT = 'attempt'


class TrainerSession:
    """Records templates and gesture attempts for a recognizer."""

    def __init__(self, recognizer: Optional[DollarRecognizer] = None,
                 template_file: str = RecognizerConfig.TEMPLATE_FILE,
                 match_logger: Optional[MatchLogger] = None):
        self.recognizer = recognizer or DollarRecognizer()
        self.template_file = template_file
        self.match_logger = match_logger or MatchLogger()
        self.recorder = GestureRecorder()
        self.mode: Optional[RecordMode] = None
        # Last finished path and what it was used for, for display
        self.last_path: List[Tuple[float, float]] = []
        self.last_mode: Optional[RecordMode] = None
        self.last_matched = False

    @property
    def is_recording(self) -> bool:
        return self.recorder.is_recording

    def begin(self, mode: RecordMode) -> str:
        """Start recording a template or an attempt."""
        self.mode = mode
        self.recorder.start()
        return "Recording template" if mode is RecordMode.TEMPLATE else "Recording"

    def add_point(self, x: float, y: float) -> bool:
        return self.recorder.add_point(x, y)

    def finish(self) -> str:
        """Stop recording and act on the recorded path."""
        path = self.recorder.stop()
        mode, self.mode = self.mode, None
        if path is None or mode is None:
            return ""

        self.last_path = path.points()
        self.last_mode = mode
        self.last_matched = False

        if mode is RecordMode.TEMPLATE:
            name = str(len(self.recognizer.templates))
            try:
                self.recognizer.add_template(name, path)
            except DegeneratePathError as e:
                self.match_logger.log_failure(e)
                return f"Template rejected: {e}"
            self.match_logger.log_template(name, len(path))
            return f"Done recording template {name}"

        try:
            result = self.recognizer.match(path)
        except RecognitionError as e:
            self.match_logger.log_failure(e)
            return f"Failed to match: {e}"

        threshold = self.recognizer.get_threshold()
        self.match_logger.log_match(result.name, result.score, threshold)
        if result.score >= threshold:
            self.last_matched = True
            return f"Matched {result.name} with score {result.score:.2f}"
        return f"Matched {result.name} but with score {result.score:.2f}"

    def save(self) -> str:
        """Write all templates to the template file."""
        try:
            count = self.recognizer.save_templates(self.template_file)
        except OSError as e:
            logger.error(f"Failed to save templates: {e}")
            return "Error saving templates"
        return f"Saved {count} templates"

    def load(self) -> str:
        """Append the templates stored in the template file."""
        try:
            count = self.recognizer.load_templates(self.template_file)
        except (OSError, RecognitionError) as e:
            logger.error(f"Failed to load templates: {e}")
            return "Error loading templates"
        return f"Loaded {count} templates"
