"""
Drawable elements of a whiteboard document.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from ..config.settings import BoardConfig
from ..utils.gesture_utils import DataValidator

SHAPE_TYPES = ('RECTANGLE', 'CIRCLE', 'LINE')


@dataclass
class Element:
    """Base class for everything drawn on the board."""
    type: str
    color: str = BoardConfig.DEFAULT_COLOR
    id: int = 0
    is_hovered: bool = False

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside the element's hover area."""
        return False

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Element':
        """
        Build an element from its stored form.

        Raises:
            ValueError: If the type is unknown or a field is missing/malformed
        """
        if not isinstance(data, dict):
            raise ValueError("Element must be a dictionary")
        el_type = data.get('type')
        color = str(data.get('color') or BoardConfig.DEFAULT_COLOR)
        try:
            if el_type in SHAPE_TYPES:
                return ShapeElement(el_type, color,
                                    x=float(data['x']), y=float(data['y']),
                                    w=float(data['w']), h=float(data['h']),
                                    text=str(data.get('text') or ''))
            if el_type == 'PEN':
                if not DataValidator.validate_path_data(data['points']):
                    raise ValueError("points must be a list of numeric {x, y} objects")
                points = [(float(p['x']), float(p['y'])) for p in data['points']]
                return PenElement(el_type, color, points=points)
            if el_type == 'LABEL':
                return LabelElement(el_type, color,
                                    x=float(data['x']), y=float(data['y']),
                                    text=str(data.get('text') or ''))
        except KeyError as e:
            raise ValueError(f"{el_type} element is missing field {e}")
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"{el_type} element has invalid data: {e}")
        raise ValueError(f"Unknown element type: {el_type!r}")


@dataclass
class ShapeElement(Element):
    """Rectangle, circle (ellipse in its box) or line; w/h may be negative while dragging."""
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    text: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type, 'x': self.x, 'y': self.y, 'w': self.w, 'h': self.h,
                'text': self.text, 'color': self.color}

    def normalized_box(self) -> Tuple[float, float, float, float]:
        """Box as (left, top, width, height) with non-negative size."""
        return (min(self.x, self.x + self.w), min(self.y, self.y + self.h),
                abs(self.w), abs(self.h))

    def contains(self, x: float, y: float) -> bool:
        if self.type == 'RECTANGLE':
            left, top, width, height = self.normalized_box()
            return left <= x <= left + width and top <= y <= top + height
        if self.type == 'CIRCLE':
            rx, ry = self.w / 2, self.h / 2
            if rx == 0 or ry == 0:
                return False
            cx, cy = self.x + rx, self.y + ry
            return ((x - cx) ** 2) / (rx ** 2) + ((y - cy) ** 2) / (ry ** 2) <= 1
        return False


@dataclass
class PenElement(Element):
    """Freehand stroke."""
    points: List[Tuple[float, float]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type, 'points': [{'x': x, 'y': y} for x, y in self.points],
                'color': self.color}


@dataclass
class LabelElement(Element):
    """Free-standing text; (x, y) is the baseline origin."""
    x: float = 0.0
    y: float = 0.0
    text: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type, 'x': self.x, 'y': self.y, 'text': self.text,
                'color': self.color}
