"""Tests for pygame rendering and the window's event translation.

Runs against SDL's dummy video driver (see conftest.py).
"""

from types import SimpleNamespace

import pytest

pygame = pytest.importorskip("pygame")

from whiteboard.core.controller import BoardController, BoardState
from whiteboard.core.document import Document
from whiteboard.core.elements import LabelElement, PenElement, ShapeElement
from whiteboard.ui.board_app import WhiteboardApp, translate_key
from whiteboard.ui.renderer import draw_board, draw_element, resolve_color

WHITE = (255, 255, 255, 255)


@pytest.fixture(scope="module")
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 16)
    pygame.font.quit()


@pytest.fixture
def surface():
    surface = pygame.Surface((200, 200))
    surface.fill((255, 255, 255))
    return surface


def region_has_ink(surface, rect):
    left, top, width, height = rect
    return any(surface.get_at((x, y)) != WHITE
               for x in range(left, left + width)
               for y in range(top, top + height))


class TestResolveColor:

    def test_board_colors(self):
        assert tuple(resolve_color('green'))[:3] == (0, 128, 0)
        assert tuple(resolve_color('red'))[:3] == (255, 0, 0)

    def test_other_named_colors(self):
        assert tuple(resolve_color('purple'))[:3] == tuple(pygame.Color('purple'))[:3]

    def test_unknown_color_is_black(self):
        assert tuple(resolve_color('not-a-color'))[:3] == (0, 0, 0)


class TestRenderer:

    def test_rectangle_outline(self, surface, font):
        draw_element(surface, ShapeElement('RECTANGLE', x=20, y=20, w=100, h=60), font)
        assert surface.get_at((20, 50)) == (0, 0, 0, 255)
        assert surface.get_at((70, 50)) == WHITE

    def test_negative_rectangle(self, surface, font):
        draw_element(surface, ShapeElement('RECTANGLE', 'blue', x=120, y=80, w=-100, h=-60), font)
        assert surface.get_at((20, 50)) == (0, 0, 255, 255)

    def test_hovered_rectangle_is_filled_and_faded(self, surface, font):
        shape = ShapeElement('RECTANGLE', x=20, y=20, w=100, h=60, is_hovered=True)
        draw_element(surface, shape, font)
        inside = surface.get_at((70, 50))
        border = surface.get_at((20, 50))
        assert inside != WHITE
        assert border != WHITE and border != (0, 0, 0, 255)

    def test_circle(self, surface, font):
        draw_element(surface, ShapeElement('CIRCLE', x=20, y=20, w=100, h=100), font)
        assert region_has_ink(surface, (18, 66, 6, 8))
        assert surface.get_at((70, 70)) == WHITE

    def test_line(self, surface, font):
        draw_element(surface, ShapeElement('LINE', 'red', x=0, y=100, w=200, h=0), font)
        assert surface.get_at((100, 100)) == (255, 0, 0, 255)

    def test_pen(self, surface, font):
        draw_element(surface, PenElement('PEN', points=[(10, 10), (190, 10)]), font)
        assert surface.get_at((100, 10)) == (0, 0, 0, 255)

    def test_single_point_pen(self, surface, font):
        draw_element(surface, PenElement('PEN', points=[(50, 50)]), font)
        assert region_has_ink(surface, (48, 48, 5, 5))

    def test_label_and_shape_text(self, surface, font):
        draw_element(surface, LabelElement('LABEL', x=10, y=150, text='Hello'), font)
        assert region_has_ink(surface, (10, 135, 40, 16))
        draw_element(surface, ShapeElement('RECTANGLE', x=100, y=0, w=100, h=100, text='Hi'), font)
        assert region_has_ink(surface, (140, 40, 20, 20))

    def test_empty_label_has_cursor_only_when_active(self, surface, font):
        label = LabelElement('LABEL', x=10, y=150, text='')
        draw_element(surface, label, font)
        assert not region_has_ink(surface, (5, 130, 30, 25))
        draw_element(surface, label, font, is_active_label=True)
        assert region_has_ink(surface, (5, 130, 30, 25))

    def test_draw_board_clears_background(self, surface, font):
        surface.fill((10, 10, 10))
        draw_board(surface, Document(), font)
        assert surface.get_at((100, 100)) == WHITE


class TestTranslateKey:

    @pytest.fixture(autouse=True)
    def pygame_init(self):
        pygame.init()
        yield
        pygame.quit()

    def test_printable(self):
        event = SimpleNamespace(key=pygame.K_a, mod=0, unicode='a')
        assert translate_key(event) == 'a'

    def test_shifted_character(self):
        event = SimpleNamespace(key=pygame.K_1, mod=pygame.KMOD_LSHIFT, unicode='!')
        assert translate_key(event) == '!'

    def test_ctrl_shortcut_uses_key_name(self):
        event = SimpleNamespace(key=pygame.K_z, mod=pygame.KMOD_LCTRL, unicode='\x1a')
        assert translate_key(event) == 'z'

    def test_special_keys(self):
        assert translate_key(SimpleNamespace(key=pygame.K_LALT, mod=0, unicode='')) == 'Alt'
        assert translate_key(SimpleNamespace(key=pygame.K_BACKSPACE, mod=0, unicode='\b')) == 'Backspace'
        assert translate_key(SimpleNamespace(key=pygame.K_LSHIFT, mod=0, unicode='')) is None


class TestWhiteboardApp:

    @pytest.fixture
    def app(self):
        app = WhiteboardApp(BoardController(), (300, 200))
        yield app
        app.close()

    def test_mouse_drag_draws_rectangle(self, app):
        app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=1))
        app.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(60, 60), rel=(50, 50), buttons=(1, 0, 0)))
        assert app.controller.state == BoardState.DRAWING
        app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(60, 60), button=1))
        assert [e.type for e in app.controller.document] == ['RECTANGLE']
        app.draw()

    @pytest.mark.parametrize("button", [4, 5])
    def test_wheel_keeps_label_editing(self, app, button):
        app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_h, mod=0, unicode='h'))
        app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=button))
        assert app.controller.state == BoardState.EDITING_LABEL
        app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_i, mod=0, unicode='i'))
        [label] = app.controller.document
        assert label.text == 'hi'

    def test_right_click_does_not_draw(self, app):
        app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=3))
        app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(60, 60), button=3))
        assert len(app.controller.document) == 0

    def test_keyboard_shortcut(self, app):
        app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_o, mod=pygame.KMOD_LCTRL, unicode='\x0f'))
        assert app.controller.mode == 'CIRCLE'

    def test_typing_creates_label(self, app):
        app.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(100, 100), rel=(0, 0), buttons=(0, 0, 0)))
        app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_h, mod=0, unicode='h'))
        [label] = app.controller.document
        assert (label.type, label.text, label.x, label.y) == ('LABEL', 'h', 100, 100)
        app.draw()

    def test_touch_events_reach_controller(self, app):
        events = [SimpleNamespace(kind='down', x=10, y=10),
                  SimpleNamespace(kind='move', x=50, y=40),
                  SimpleNamespace(kind='up', x=80, y=70)]
        app.touch_input = SimpleNamespace(drain=lambda: events, stop=lambda: None)
        app.handle_touch()
        [shape] = app.controller.document
        assert (shape.w, shape.h) == (70, 60)
