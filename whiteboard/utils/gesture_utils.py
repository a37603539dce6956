"""
Shared utilities for stroke processing.

This module provides the point type and the small geometric helpers used by
the shape recognizer, the document model and the touch input layer.
"""

import math
from typing import List, Optional, Sequence, Any

import numpy as np


class Point:
    """Represents a 2D point with optional timestamp."""

    __slots__ = ('x', 'y', 't')

    def __init__(self, x: float, y: float, timestamp: Optional[float] = None):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 't', float(timestamp) if timestamp is not None else 0.0)

    def __setattr__(self, name, value):
        raise AttributeError("Point is immutable")

    def __repr__(self):
        return f"Point({self.x:.1f}, {self.y:.1f})"

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return abs(self.x - other.x) < 1e-10 and abs(self.y - other.y) < 1e-10

    def __hash__(self):
        return hash((self.x, self.y))

    def __iter__(self):
        yield self.x
        yield self.y

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def calculate_centroid(points: List[Point]) -> Point:
        """Calculate the centroid of a list of points."""
        if not points:
            return Point(0, 0)
        sum_x = sum(p.x for p in points)
        sum_y = sum(p.y for p in points)
        return Point(sum_x / len(points), sum_y / len(points))

    @staticmethod
    def calculate_distance(p1: Point, p2: Point) -> float:
        """Calculate Euclidean distance between two points."""
        return p1.distance_to(p2)

    @staticmethod
    def calculate_path_length(points: List[Point]) -> float:
        """Calculate total path length."""
        if len(points) < 2:
            return 0.0

        length = 0.0
        for i in range(1, len(points)):
            length += GeometryUtils.calculate_distance(points[i-1], points[i])
        return length


class PathUtils:
    """Utility class for path processing."""

    @staticmethod
    def to_point(item: Any) -> Point:
        """Convert a Point, an (x, y) pair or an {'x', 'y'} dict to a Point."""
        if isinstance(item, Point):
            return item
        if isinstance(item, dict):
            if 'x' not in item or 'y' not in item:
                raise ValueError("Each point dict must contain 'x' and 'y'")
            return Point(item['x'], item['y'], item.get('t'))
        try:
            x, y = item[0], item[1]
        except (TypeError, IndexError, KeyError):
            raise ValueError(f"Cannot interpret {item!r} as a point")
        return Point(x, y)

    @staticmethod
    def to_points(path: Sequence[Any]) -> List[Point]:
        """Convert any supported point sequence to a list of Point objects."""
        return [PathUtils.to_point(p) for p in path]

    @staticmethod
    def to_array(path: Sequence[Any]) -> np.ndarray:
        """Convert any supported point sequence to an (n, 2) float array."""
        if len(path) == 0:
            return np.zeros((0, 2), dtype=float)
        return np.array([(p.x, p.y) for p in PathUtils.to_points(path)], dtype=float)


class DataValidator:
    """Utility class for validating stroke data."""

    @staticmethod
    def validate_path_data(path: Any) -> bool:
        """Validate that path data is a list of numeric {'x', 'y'} dicts."""
        if not isinstance(path, list):
            return False

        for point in path:
            if not isinstance(point, dict):
                return False
            if 'x' not in point or 'y' not in point:
                return False
            try:
                float(point['x'])
                float(point['y'])
                if 't' in point:
                    float(point['t'])
            except (ValueError, TypeError, OverflowError):
                return False

        return True
