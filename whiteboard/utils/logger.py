"""
Logging utilities for board events and shape recognition.
"""

import datetime
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class BoardLogger:
    """Handles console logging of recognition results and board events."""

    def __init__(self, debug_file: Optional[str] = None, verbose: bool = True):
        self.verbose = verbose
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file: {e}")

    def _timestamp(self) -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def _emit(self, message: str):
        if self.verbose:
            print(message)
        if self.debug_file:
            try:
                self.debug_file.write(message + "\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not write debug file: {e}")

    def log_recognition(self, verdict, point_count: int, stats: Optional[Dict[str, Any]] = None):
        """Log the outcome of classifying a freehand stroke."""
        timestamp = self._timestamp()

        if verdict.kind == 'circle':
            self._emit(f"[{timestamp}] ⭕ CIRCLE recognized from {point_count} points")
        elif verdict.kind == 'rectangle':
            self._emit(f"[{timestamp}] ⬜ RECTANGLE recognized from {point_count} points")
        else:
            self._emit(f"[{timestamp}] ✏️ FREEHAND kept ({point_count} points)")
            return

        self._emit(f"   Box: ({verdict.x:.0f}, {verdict.y:.0f}) "
                   f"{verdict.width:.0f}x{verdict.height:.0f}")
        if stats:
            self._emit(f"   Circle error: {stats['circle_error']:.3f}, "
                       f"rect error: {stats['rect_error']:.3f}")

    def log_event(self, event: str, detail: str = ""):
        """Log a board event such as undo, clear or a mode change."""
        timestamp = self._timestamp()
        suffix = f": {detail}" if detail else ""
        self._emit(f"[{timestamp}] 🖊️ {event.upper()}{suffix}")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
