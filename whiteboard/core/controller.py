"""
Board controller: turns pointer and keyboard input into document changes.
"""

import enum
from typing import Optional

from ..config.settings import BoardConfig
from ..gestures.shape_recognizer import ShapeRecognizer
from ..utils.logger import BoardLogger
from .document import Document, DocumentStore
from .elements import LabelElement, PenElement, ShapeElement

VERDICT_TYPES = {'circle': 'CIRCLE', 'rectangle': 'RECTANGLE'}


class BoardState(enum.Enum):
    IDLE = 'idle'
    DRAWING = 'drawing'
    EDITING_LABEL = 'editing_label'


class BoardController:
    """
    State machine for a drawing surface.

    All handlers return True when the surface needs a redraw. The controller
    is not thread safe; input from other threads has to be queued to the
    thread that owns it.
    """

    def __init__(self, document: Optional[Document] = None,
                 store: Optional[DocumentStore] = None,
                 recognizer: Optional[ShapeRecognizer] = None,
                 logger: Optional[BoardLogger] = None):
        self.document = document if document is not None else Document()
        self.store = store
        self.recognizer = recognizer or ShapeRecognizer()
        self.logger = logger or BoardLogger(verbose=False)
        self.config = BoardConfig()

        self.state = BoardState.IDLE
        self.mode = self.config.DEFAULT_MODE
        self.color_index = 0

        self.hovered_id: Optional[int] = None
        self.active_label_id: Optional[int] = None
        self.drawing_id: Optional[int] = None
        self.start_x = 0.0
        self.start_y = 0.0
        self.pointer_x = 0.0
        self.pointer_y = 0.0

    @property
    def current_color(self) -> str:
        return self.config.COLORS[self.color_index]

    # --- Persistence ---

    def save(self):
        if self.store is not None:
            self.store.save(self.document)

    # --- Modes and colors ---

    def set_mode(self, mode: str):
        if mode not in self.config.MODES:
            raise ValueError(f"Unknown mode: {mode}")
        self.mode = mode
        self.logger.log_event('mode', mode)

    def toggle_mode(self):
        """Switch between RECTANGLE and PEN; any other mode goes to RECTANGLE."""
        self.set_mode('PEN' if self.mode == 'RECTANGLE' else 'RECTANGLE')

    def cycle_color(self) -> str:
        self.color_index = (self.color_index + 1) % len(self.config.COLORS)
        self.logger.log_event('color', self.current_color)
        return self.current_color

    # --- Pointer ---

    def pointer_down(self, x: float, y: float, button: int = 1) -> bool:
        if self.state == BoardState.EDITING_LABEL:
            self._finish_label()
            return True
        if button != 1 or self.state == BoardState.DRAWING:
            return False

        self.start_x, self.start_y = x, y
        self.pointer_x, self.pointer_y = x, y
        if self.mode == 'PEN':
            element = PenElement('PEN', self.current_color, points=[(x, y)])
        else:
            element = ShapeElement(self.mode, self.current_color, x=x, y=y)
        self.drawing_id = self.document.add(element)
        self.state = BoardState.DRAWING
        return True

    def pointer_move(self, x: float, y: float) -> bool:
        self.pointer_x, self.pointer_y = x, y

        if self.state == BoardState.DRAWING:
            element = self.document.get(self.drawing_id)
            if isinstance(element, PenElement):
                element.points.append((x, y))
            elif isinstance(element, ShapeElement):
                element.w = x - self.start_x
                element.h = y - self.start_y
            return True

        return self._update_hover(x, y)

    def pointer_up(self) -> bool:
        if self.state != BoardState.DRAWING:
            return False
        self.state = BoardState.IDLE
        element = self.document.get(self.drawing_id)
        self.drawing_id = None
        if element is None:
            return True

        if isinstance(element, PenElement):
            self._recognize(element)
        elif abs(element.w) < self.config.MIN_DRAG_SIZE and abs(element.h) < self.config.MIN_DRAG_SIZE:
            self.document.remove(element.id)

        self.save()
        return True

    def _recognize(self, stroke: PenElement):
        verdict = self.recognizer.classify(stroke.points)
        stats = self.recognizer.get_stroke_stats(stroke.points) if self.logger.verbose else None
        self.logger.log_recognition(verdict, len(stroke.points), stats)
        if not verdict:
            return
        shape = ShapeElement(VERDICT_TYPES[verdict.kind], stroke.color,
                             x=verdict.x, y=verdict.y, w=verdict.width, h=verdict.height)
        self.document.replace(stroke.id, shape)

    def _update_hover(self, x: float, y: float) -> bool:
        hit_id = self.document.hit_test(x, y)
        changed = hit_id != self.hovered_id
        for element in self.document:
            element.is_hovered = element.id == hit_id
        self.hovered_id = hit_id
        return changed

    def _finish_label(self):
        self.state = BoardState.IDLE
        self.active_label_id = None
        self.save()

    # --- Keyboard ---

    def key_down(self, key: str, ctrl: bool = False, alt: bool = False, meta: bool = False) -> bool:
        """
        Handle a key press.

        Args:
            key: Key name; printable characters as themselves, plus 'Alt'
                 and 'Backspace'
            ctrl, alt, meta: Modifier state
        """
        if key == 'Alt':
            self.toggle_mode()
            return True

        if ctrl:
            return self._handle_shortcut(key.lower())

        # Text edits wait until the current gesture ends
        if self.state == BoardState.DRAWING:
            return False

        if len(key) == 1 and not alt and not meta:
            self._type_character(key)
            return True

        if key == 'Backspace':
            return self._backspace()

        return False

    def _handle_shortcut(self, key: str) -> bool:
        if key == 'o':
            self.set_mode('CIRCLE')
        elif key == 'l':
            self.set_mode('LINE')
        elif key == 'z':
            self.undo()
        elif key == 'r':
            self.clear()
        elif key == 'q':
            shape = self._hovered_shape()
            if shape is None:
                return False
            shape.text = ''
            self.save()
        elif key == 'k':
            self.cycle_color()
        else:
            return False
        return True

    def _hovered_shape(self) -> Optional[ShapeElement]:
        element = self.document.get(self.hovered_id)
        if element is None:
            self.hovered_id = None
        return element

    def _type_character(self, char: str):
        target = self._hovered_shape() or self.document.get(self.active_label_id)
        if target is not None:
            target.text += char
        else:
            label = LabelElement('LABEL', self.current_color,
                                 x=self.pointer_x, y=self.pointer_y, text=char)
            self.active_label_id = self.document.add(label)
            self.state = BoardState.EDITING_LABEL
        self.save()

    def _backspace(self) -> bool:
        target = self._hovered_shape() or self.document.get(self.active_label_id)
        if target is None:
            return False
        target.text = target.text[:-1]
        self.save()
        return True

    def undo(self):
        """Remove the topmost element and leave any drawing or label editing."""
        removed = self.document.pop()
        self._reset_interaction()
        self.logger.log_event('undo', removed.type if removed else 'nothing to undo')
        self.save()

    def clear(self):
        self.document.clear()
        self._reset_interaction()
        self.logger.log_event('clear')
        self.save()

    def _reset_interaction(self):
        self.state = BoardState.IDLE
        self.drawing_id = None
        self.active_label_id = None
        if self.document.get(self.hovered_id) is None:
            self.hovered_id = None
