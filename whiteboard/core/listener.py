"""
Touchscreen input source that turns single-finger drags into pointer events.
"""

import time
import threading
import queue
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from evdev import ecodes

from ..device.device_manager import DeviceManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointerEvent:
    """Pointer event in surface pixels; kind is 'down', 'move' or 'up'."""
    kind: str
    x: float
    y: float


class TouchInput:
    """
    Reads a multitouch device in a background thread and queues pointer
    events for the thread that owns the drawing surface.

    Only one finger is followed at a time; other fingers are ignored
    until it is lifted.
    """

    def __init__(self, surface_size: Tuple[int, int], device_manager: Optional[DeviceManager] = None):
        self.device_manager = device_manager or DeviceManager()
        self.surface_size = surface_size
        self.events: "queue.Queue[PointerEvent]" = queue.Queue()

        # State management
        self.running = False
        self.current_slot = 0
        self.slot_data: Dict[int, Dict[str, Optional[int]]] = {}
        self.active_slots = set()
        self.tracked_slot: Optional[int] = None
        self.pending_down = False
        self.moved = False
        self.lifted = False

        # Path of the followed finger, in surface pixels
        self.path: List[Dict[str, float]] = []
        self.last_path: List[Dict[str, float]] = []

        # Thread management
        self.thread = None
        self.state_lock = threading.Lock()

    def start(self) -> bool:
        """Start reading the touchscreen; False when none is present."""
        device = self.device_manager.find_device()
        if not device:
            return False

        info = self.device_manager.get_device_info()
        logger.info(f"Reading touch input from {info['name']} "
                    f"({info['screen_width']}x{info['screen_height']})")

        self.running = True
        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()
        return True

    def stop(self):
        """Stop the touchscreen reader."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=1)

    def set_surface_size(self, width: int, height: int):
        with self.state_lock:
            self.surface_size = (width, height)

    def drain(self) -> List[PointerEvent]:
        """Return all pending pointer events without blocking."""
        pending = []
        while True:
            try:
                pending.append(self.events.get_nowait())
            except queue.Empty:
                return pending

    def snapshot_path(self) -> List[Dict[str, float]]:
        """Copy of the current path, or of the last finished one."""
        with self.state_lock:
            return list(self.path or self.last_path)

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    with self.state_lock:
                        self._process_event_batch(event_batch)
                    event_batch = []

        except OSError as e:
            logger.error(f"Error in touch event loop: {e}")
            self.running = False

    def _process_event_batch(self, event_batch):
        """Process one SYN_REPORT worth of events."""
        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                self._handle_abs_event(ev)

        self._emit_pending()

    def _handle_abs_event(self, ev):
        """Handle absolute coordinate events."""
        if ev.code == ecodes.ABS_MT_SLOT:
            self.current_slot = ev.value
        elif ev.code == ecodes.ABS_MT_TRACKING_ID:
            self._handle_tracking_id(ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_X:
            self._handle_position('x', ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_Y:
            self._handle_position('y', ev.value)

    def _handle_tracking_id(self, value: int):
        """Handle finger tracking ID changes."""
        slot = self.current_slot

        if value == -1:
            # Finger lifted
            self.active_slots.discard(slot)
            if slot == self.tracked_slot:
                self.lifted = True
        else:
            # Finger placed
            self.slot_data.setdefault(slot, {'x': None, 'y': None})
            self.active_slots.add(slot)
            if self.tracked_slot is None:
                self.tracked_slot = slot
                self.pending_down = True

    def _handle_position(self, axis: str, value: int):
        slot = self.current_slot
        self.slot_data.setdefault(slot, {'x': None, 'y': None})[axis] = value
        if slot == self.tracked_slot:
            self.moved = True

    def _emit_pending(self):
        if self.tracked_slot is None:
            return

        data = self.slot_data.get(self.tracked_slot, {})
        if data.get('x') is None or data.get('y') is None:
            if self.lifted:
                self._reset_tracking()
            return

        width, height = self.surface_size
        x, y = self.device_manager.scale_to_surface(data['x'], data['y'], width, height)

        if self.pending_down:
            self.pending_down = False
            self.path = []
            self._push('down', x, y)
        elif self.moved:
            self._push('move', x, y)

        if self.lifted:
            self.events.put(PointerEvent('up', x, y))
            self.last_path = self.path
            self.path = []
            self._reset_tracking()

        self.moved = False

    def _push(self, kind: str, x: float, y: float):
        self.path.append({'x': x, 'y': y, 't': time.time()})
        self.events.put(PointerEvent(kind, x, y))

    def _reset_tracking(self):
        self.tracked_slot = None
        self.pending_down = False
        self.moved = False
        self.lifted = False
