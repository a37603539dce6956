"""
pygame rendering of whiteboard documents.
"""

from typing import Optional, Tuple

import pygame

from ..config.settings import BoardConfig
from ..core.document import Document
from ..core.elements import Element, LabelElement, PenElement, ShapeElement


def resolve_color(name: str) -> pygame.Color:
    """Board color name to RGB; unknown names fall back to pygame's table, then black."""
    if name in BoardConfig.COLOR_RGB:
        return pygame.Color(*BoardConfig.COLOR_RGB[name])
    try:
        return pygame.Color(name)
    except ValueError:
        return pygame.Color(*BoardConfig.COLOR_RGB[BoardConfig.DEFAULT_COLOR])


def _hover_fill(name: str) -> Tuple[int, int, int, int]:
    return BoardConfig.HOVER_FILL.get(name, BoardConfig.HOVER_FILL['black'])


def draw_shape(surface: pygame.Surface, element: ShapeElement, color: pygame.Color):
    width = BoardConfig.LINE_WIDTH
    if element.type == 'LINE':
        pygame.draw.line(surface, color, (element.x, element.y),
                         (element.x + element.w, element.y + element.h), width)
        return

    rect = pygame.Rect(element.normalized_box())
    if element.type == 'RECTANGLE':
        if element.is_hovered:
            pygame.draw.rect(surface, _hover_fill(element.color), rect)
        pygame.draw.rect(surface, color, rect, width)
    elif element.type == 'CIRCLE':
        if element.is_hovered:
            pygame.draw.ellipse(surface, _hover_fill(element.color), rect)
        pygame.draw.ellipse(surface, color, rect, width)


def draw_pen(surface: pygame.Surface, element: PenElement, color: pygame.Color):
    width = BoardConfig.LINE_WIDTH
    if len(element.points) == 1:
        pygame.draw.circle(surface, color, element.points[0], width / 2)
    elif element.points:
        pygame.draw.lines(surface, color, False, element.points, width)
        # round joins
        for point in element.points:
            pygame.draw.circle(surface, color, point, width / 2)


def draw_text(surface: pygame.Surface, font: pygame.font.Font, text: str,
              color: pygame.Color, center: Optional[Tuple[float, float]] = None,
              baseline: Optional[Tuple[float, float]] = None):
    rendered = font.render(text, True, color)
    if center is not None:
        surface.blit(rendered, rendered.get_rect(center=(int(center[0]), int(center[1]))))
    elif baseline is not None:
        surface.blit(rendered, (baseline[0], baseline[1] - font.get_ascent()))


def draw_element(surface: pygame.Surface, element: Element, font: pygame.font.Font,
                 is_active_label: bool = False):
    """Draw one element; hovered shapes get a faded outline and a light fill."""
    color = resolve_color(element.color)

    if isinstance(element, LabelElement):
        text = element.text + (BoardConfig.LABEL_CURSOR if is_active_label else '')
        draw_text(surface, font, text, color, baseline=(element.x, element.y))
        return

    if element.is_hovered and isinstance(element, ShapeElement):
        layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        outline = pygame.Color(color.r, color.g, color.b, BoardConfig.HOVER_OUTLINE_ALPHA)
        draw_shape(layer, element, outline)
        surface.blit(layer, (0, 0))
    elif isinstance(element, ShapeElement):
        draw_shape(surface, element, color)
    elif isinstance(element, PenElement):
        draw_pen(surface, element, color)

    if isinstance(element, ShapeElement) and element.type != 'LINE' and element.text:
        center = (element.x + element.w / 2, element.y + element.h / 2)
        draw_text(surface, font, element.text, color, center=center)


def draw_board(surface: pygame.Surface, document: Document, font: pygame.font.Font,
               active_label_id: Optional[int] = None):
    """Clear the surface and draw every element bottom to top."""
    surface.fill(BoardConfig.BACKGROUND)
    for element in document:
        draw_element(surface, element, font, element.id == active_label_id)


def draw_indicators(surface: pygame.Surface, font: pygame.font.Font, mode: str, color_name: str):
    """Mode and color badges in the top-left corner."""
    color = resolve_color(color_name)
    x = 10
    for text, text_color in ((mode, pygame.Color(0, 0, 0)), (color_name, color)):
        rendered = font.render(text, True, text_color)
        box = rendered.get_rect(topleft=(x, 10)).inflate(12, 8)
        pygame.draw.rect(surface, BoardConfig.BACKGROUND, box)
        pygame.draw.rect(surface, text_color, box, 1)
        surface.blit(rendered, (x, 10))
        x = box.right + 10
