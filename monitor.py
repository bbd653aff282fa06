#!/usr/bin/env python3
"""
Real-time record gesture monitor.
Shows the live recording state and drag distance while you hold the screen.
"""

import time
from hold_to_record.core.listener import TouchListener
from hold_to_record.gestures.states import Cancelling, Locking

class GestureMonitor:
    def __init__(self):
        self.listener = TouchListener()
        self.running = False

    def start(self):
        """Start monitoring the record gesture."""
        if not self.listener.start():
            return False

        self.running = True
        print("🎯 Record Gesture Monitor Started")
        print("=" * 50)
        print("📱 Hold the screen, then slide up or sideways")
        print("🖱️  Press Ctrl+C to stop")
        print()

        try:
            self._monitor_loop()
        except KeyboardInterrupt:
            self.stop()

        return True

    def stop(self):
        """Stop monitoring."""
        self.running = False
        self.listener.stop()
        print("\n✅ Monitoring stopped")

    def _monitor_loop(self):
        """Main monitoring loop."""
        last_line = None

        while self.running and self.listener.running:
            line = self._format_state()
            if line != last_line:
                print("\r" + " " * 80 + "\r" + line, end="", flush=True)
                last_line = line

            time.sleep(0.05)

    def _format_state(self):
        """Format the current state and the latest displacement."""
        state = self.listener.state
        processor = self.listener.processor
        if not self.listener.tracker.is_active:
            return f"🤏 {state} (not touching)"

        bar = ""
        if isinstance(state, Cancelling):
            filled = int(20 * min(state.distance_x / processor.distance_to_cancel, 1.0))
            bar = "🗑️ [" + "#" * filled + "." * (20 - filled) + "]"
        elif isinstance(state, Locking):
            filled = int(20 * min(state.distance_y / processor.distance_to_lock, 1.0))
            bar = "🔒 [" + "#" * filled + "." * (20 - filled) + "]"

        return (f"👆 {state} | dx={processor.last_distance_x:6.0f} "
                f"dy={processor.last_distance_y:6.0f} {bar}")

def main():
    """Main entry point."""
    monitor = GestureMonitor()
    monitor.start()

if __name__ == "__main__":
    main()
