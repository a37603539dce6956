#!/usr/bin/env python3
"""
Real-time stroke recognition monitor.
Shows live shape statistics as you draw on your touchscreen.
"""

import time

from whiteboard.core.listener import TouchInput
from whiteboard.gestures.shape_recognizer import get_stroke_stats

VERDICT_ICONS = {'circle': '⭕', 'rectangle': '⬜', 'none': '✏️'}

class StrokeMonitor:
    def __init__(self, width: int = 1000, height: int = 1000):
        self.touch_input = TouchInput((width, height))
        self.running = False

    def start(self):
        """Start monitoring touchscreen strokes."""
        if not self.touch_input.start():
            print("❌ No touchscreen found")
            return False

        self.running = True
        print("🎯 Stroke Recognition Monitor Started")
        print("=" * 50)
        print("📱 Draw circles and rectangles to see how they score")
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
        self.touch_input.stop()
        print("\n✅ Monitoring stopped")

    def _monitor_loop(self):
        """Main monitoring loop."""
        last_count = 0

        while self.running:
            self.touch_input.drain()
            path = self.touch_input.snapshot_path()

            if len(path) != last_count:
                self._display_stats(path)
                last_count = len(path)

            time.sleep(0.1)  # Update every 100ms

    def _display_stats(self, path):
        """Display statistics for the current stroke."""
        stats = get_stroke_stats(path)
        if not stats:
            print("🤏 No stroke yet...", end="\r")
            return

        print("\r" + " " * 100 + "\r", end="")
        icon = VERDICT_ICONS[stats['verdict']]
        print(f"{icon} {stats['point_count']:3d} pts | "
              f"{stats['width']:4.0f}x{stats['height']:4.0f} | "
              f"closure {stats['closure_distance']:5.1f} | "
              f"circle {stats['circle_error']:.3f} | "
              f"rect {stats['rect_error']:.3f} | "
              f"{stats['verdict']}", end="", flush=True)

def main():
    """Main entry point."""
    monitor = StrokeMonitor()
    monitor.start()

if __name__ == "__main__":
    main()
