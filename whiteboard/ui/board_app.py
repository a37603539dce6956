"""Whiteboard window.

Runs the pygame event loop, translates mouse, keyboard and optional
touchscreen input into controller calls and redraws the board.
"""

import logging
from typing import Optional

import pygame

from ..config.settings import BoardConfig
from ..core.controller import BoardController
from .renderer import draw_board, draw_indicators

logger = logging.getLogger(__name__)

ALT_KEYS = (pygame.K_LALT, pygame.K_RALT)


def translate_key(event) -> Optional[str]:
    """Map a pygame KEYDOWN event to the controller's key names."""
    if event.key in ALT_KEYS:
        return 'Alt'
    if event.key == pygame.K_BACKSPACE:
        return 'Backspace'
    if event.mod & pygame.KMOD_CTRL:
        name = pygame.key.name(event.key)
        return name if len(name) == 1 else None
    if len(event.unicode) == 1 and event.unicode.isprintable():
        return event.unicode
    return None


class WhiteboardApp:
    """Interactive whiteboard window."""

    def __init__(self, controller: BoardController, size=(BoardConfig.WINDOW_WIDTH, BoardConfig.WINDOW_HEIGHT),
                 touch_input=None) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption("Whiteboard")

        self.controller = controller
        self.touch_input = touch_input
        self.font = pygame.font.Font(None, BoardConfig.FONT_SIZE)
        self.hovering = False
        self._set_cursor(False)

    def run(self) -> None:
        """Run the event loop until the window is closed."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                self.handle_event(event)

            if self.touch_input is not None:
                self.handle_touch()

            self._update_cursor()
            self.draw()
            clock.tick(BoardConfig.FPS)

    def handle_event(self, event) -> None:
        """Dispatch one pygame event to the controller."""
        controller = self.controller
        if event.type == pygame.VIDEORESIZE:
            self.screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
            if self.touch_input is not None:
                self.touch_input.set_surface_size(*event.size)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            # buttons 4+ are wheel steps
            if event.button <= 3:
                controller.pointer_down(*event.pos, button=event.button)
        elif event.type == pygame.MOUSEMOTION:
            controller.pointer_move(*event.pos)
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1:
                controller.pointer_up()
        elif event.type == pygame.KEYDOWN:
            key = translate_key(event)
            if key is not None:
                controller.key_down(
                    key,
                    ctrl=bool(event.mod & pygame.KMOD_CTRL),
                    alt=bool(event.mod & pygame.KMOD_ALT) and key != 'Alt',
                    meta=bool(event.mod & (pygame.KMOD_META | pygame.KMOD_GUI)),
                )

    def handle_touch(self) -> None:
        """Feed queued touchscreen events to the controller."""
        for event in self.touch_input.drain():
            if event.kind == 'down':
                self.controller.pointer_down(event.x, event.y)
            elif event.kind == 'move':
                self.controller.pointer_move(event.x, event.y)
            elif event.kind == 'up':
                self.controller.pointer_move(event.x, event.y)
                self.controller.pointer_up()

    def _update_cursor(self) -> None:
        hovering = self.controller.hovered_id is not None
        if hovering != self.hovering:
            self._set_cursor(hovering)

    def _set_cursor(self, hovering: bool) -> None:
        self.hovering = hovering
        cursor = pygame.SYSTEM_CURSOR_IBEAM if hovering else pygame.SYSTEM_CURSOR_CROSSHAIR
        try:
            pygame.mouse.set_system_cursor(cursor)
        except pygame.error as e:
            logger.debug(f"System cursor unavailable: {e}")

    def draw(self) -> None:
        """Render the board and indicators."""
        controller = self.controller
        draw_board(self.screen, controller.document, self.font, controller.active_label_id)
        draw_indicators(self.screen, self.font, controller.mode, controller.current_color)
        pygame.display.flip()

    def close(self) -> None:
        if self.touch_input is not None:
            self.touch_input.stop()
        pygame.quit()
