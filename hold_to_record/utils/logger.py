"""
Logging utilities for record gesture events.
"""

import datetime
import logging
import time
from typing import Any, Optional

from .gesture_utils import Point

logger = logging.getLogger(__name__)


class RecorderLogger:
    """Handles console and debug-file logging of record gesture events."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file {debug_file}: {e}")

    @staticmethod
    def _print_line(text: str, transient: bool = False):
        # Wipe any transient line left by a previous drag update
        print("\r" + " " * 80 + "\r" + text, end="" if transient else "\n", flush=True)

    @staticmethod
    def _timestamp() -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def log_press(self, point: Point):
        """Log the finger going down on the record button."""
        self._print_line(f"[{self._timestamp()}] 🎙️ RECORDING STARTED at ({int(point.x)}, {int(point.y)})")
        self._write_debug('press', point)

    def log_state(self, state: Any, point: Optional[Point] = None):
        """Log a recording state change."""
        name = getattr(state, 'name', None)
        timestamp = self._timestamp()

        if name == 'LOCKED':
            self._print_line(f"[{timestamp}] 🔒 RECORDING LOCKED")
        elif name == 'CANCELLED':
            self._print_line(f"[{timestamp}] 🗑️ RECORDING CANCELLED")
        elif name == 'STOPPED':
            self._print_line(f"[{timestamp}] ⏹️ RECORDING STOPPED")
        elif name == 'STARTED':
            self._print_line(f"[{timestamp}] 🎙️ RECORDING")
        elif name == 'IDLE':
            self._print_line(f"[{timestamp}] 💤 IDLE")
        else:
            self._print_line(f"[{timestamp}] 👉 {state}", transient=True)

        self._write_debug(str(state), point)

    def log_release(self, point: Optional[Point], start_time: float):
        """Log the finger leaving the screen."""
        duration = time.time() - start_time
        where = f" at ({int(point.x)}, {int(point.y)})" if point else ""
        self._print_line(f"[{self._timestamp()}] ✋ RELEASED{where}")
        print(f"   Hold duration: {duration:.1f}s")
        self._write_debug('release', point)

    def _write_debug(self, event: str, point: Optional[Point]):
        if not self.debug_file:
            return
        try:
            self.debug_file.write(f"[{self._timestamp()}] {event} {point!r}\n")
            self.debug_file.flush()
        except OSError as e:
            logger.warning(f"Could not write debug file: {e}")
            self.close()

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
