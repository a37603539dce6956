"""
Device management for touchscreen discovery and initialization.
"""

import evdev
from evdev import ecodes
import logging
from typing import Tuple

logger = logging.getLogger(__name__)

class DeviceManager:
    """Manages touchscreen device discovery and coordinate mapping."""

    def __init__(self):
        self.device = None
        self.min_x = 0
        self.min_y = 0
        self.screen_width = 1920  # Default
        self.screen_height = 1080   # Default

    def find_device(self):
        """Find and configure the touchscreen device."""
        devices = [evdev.InputDevice(path) for path in evdev.list_devices()]

        for device in devices:
            caps = device.capabilities()
            if ecodes.EV_ABS not in caps:
                continue

            abs_info = {code: info for code, info in caps.get(ecodes.EV_ABS, [])}

            # Look for multitouch slots
            if ecodes.ABS_MT_SLOT not in abs_info:
                continue

            if ecodes.ABS_MT_POSITION_X in abs_info:
                info = abs_info[ecodes.ABS_MT_POSITION_X]
                self.min_x = info.min
                self.screen_width = info.max - info.min + 1
            if ecodes.ABS_MT_POSITION_Y in abs_info:
                info = abs_info[ecodes.ABS_MT_POSITION_Y]
                self.min_y = info.min
                self.screen_height = info.max - info.min + 1

            self.device = device
            logger.info(f"Found touchscreen: {device.name}")
            logger.info(f"Touch resolution: {self.screen_width}x{self.screen_height}")
            return device

        logger.error("No touchscreen device found")
        return None

    def scale_to_surface(self, x: float, y: float, width: int, height: int) -> Tuple[float, float]:
        """Map device coordinates onto a surface of the given pixel size."""
        return ((x - self.min_x) * width / self.screen_width,
                (y - self.min_y) * height / self.screen_height)

    def get_device_info(self):
        """Get device and screen information."""
        return {
            'device': self.device,
            'name': self.device.name if self.device else None,
            'screen_width': self.screen_width,
            'screen_height': self.screen_height
        }
