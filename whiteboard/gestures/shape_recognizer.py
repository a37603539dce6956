"""
Shape Recognition for Freehand Strokes

Converts a completed freehand stroke into a geometric primitive. A stroke is
recognized as a circle or an axis-aligned rectangle when it is large enough,
approximately closed, and its points fit the hypothesis well:

- circle error: mean deviation of each point's distance to the bounding-box
  center from the average radius, normalized by that radius;
- rectangle error: mean distance of each point to the nearest side of the
  bounding box, normalized by (width + height) / 2.

Both metrics are scale invariant. The recognizer holds no state and never
raises for any finite point sequence; anything it cannot classify is NO_MATCH.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

import numpy as np

from ..config.settings import BoardConfig
from ..utils.gesture_utils import GeometryUtils, PathUtils


NONE = 'none'
CIRCLE = 'circle'
RECTANGLE = 'rectangle'


@dataclass(frozen=True)
class RecognitionConfig:
    """Thresholds used by the shape recognizer."""
    min_points: int = BoardConfig.RECOGNITION_MIN_POINTS
    min_size: float = BoardConfig.RECOGNITION_MIN_SIZE
    closure_ratio: float = BoardConfig.RECOGNITION_CLOSURE_RATIO
    circle_threshold: float = BoardConfig.CIRCLE_ERROR_THRESHOLD
    rect_threshold: float = BoardConfig.RECT_ERROR_THRESHOLD


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned envelope of a stroke."""
    min_x: float
    min_y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.min_x + self.width

    @property
    def max_y(self) -> float:
        return self.min_y + self.height

    @property
    def diagonal(self) -> float:
        return math.hypot(self.width, self.height)


@dataclass(frozen=True)
class ShapeVerdict:
    """Result of shape recognition. Geometry is zero for NO_MATCH."""
    kind: str = NONE
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def is_match(self) -> bool:
        return self.kind != NONE

    def __bool__(self) -> bool:
        return self.is_match

    @classmethod
    def from_box(cls, kind: str, box: BoundingBox) -> 'ShapeVerdict':
        return cls(kind, box.min_x, box.min_y, box.width, box.height)


NO_MATCH = ShapeVerdict()


def bounding_box(coords: np.ndarray) -> BoundingBox:
    """Bounding box of an (n, 2) coordinate array with n >= 1."""
    mins = coords.min(axis=0)
    maxs = coords.max(axis=0)
    return BoundingBox(float(mins[0]), float(mins[1]),
                       float(maxs[0] - mins[0]), float(maxs[1] - mins[1]))


def box_center(box: BoundingBox) -> np.ndarray:
    return np.array([box.min_x + box.width / 2, box.min_y + box.height / 2])


def closure_distance(coords: np.ndarray) -> float:
    """Straight-line distance between the first and last point."""
    start, end = coords[0], coords[-1]
    return float(math.hypot(start[0] - end[0], start[1] - end[1]))


def radial_distances(coords: np.ndarray, center: np.ndarray) -> np.ndarray:
    return np.hypot(coords[:, 0] - center[0], coords[:, 1] - center[1])


def circle_error(coords: np.ndarray, box: BoundingBox) -> float:
    """
    Mean absolute deviation of radial distances from their mean, divided by
    the mean radius. Returns inf when the mean radius is zero.
    """
    radii = radial_distances(coords, box_center(box))
    avg_r = float(radii.mean())
    if avg_r <= 0:
        return math.inf
    return float(np.abs(radii - avg_r).mean()) / avg_r


def rect_error(coords: np.ndarray, box: BoundingBox) -> float:
    """
    Mean distance from each point to the nearest bounding-box side, divided
    by (width + height) / 2. Returns inf for a degenerate box.
    """
    half_sum = (box.width + box.height) / 2
    if half_sum <= 0:
        return math.inf
    xs, ys = coords[:, 0], coords[:, 1]
    side_distances = np.stack([
        np.abs(xs - box.min_x),
        np.abs(xs - box.max_x),
        np.abs(ys - box.min_y),
        np.abs(ys - box.max_y),
    ])
    return float(side_distances.min(axis=0).mean()) / half_sum


def decide(c_error: float, r_error: float, config: Optional[RecognitionConfig] = None) -> str:
    """Pick a shape kind from the two errors. Circle wins only when strictly tighter."""
    config = config or RecognitionConfig()
    if c_error < config.circle_threshold and c_error < r_error:
        return CIRCLE
    if r_error < config.rect_threshold:
        return RECTANGLE
    return NONE


class ShapeRecognizer:
    """
    Classifies a freehand stroke as a circle, a rectangle, or neither.
    """

    def __init__(self, config: Optional[RecognitionConfig] = None):
        self.config = config or RecognitionConfig()

    def classify(self, points: Sequence[Any]) -> ShapeVerdict:
        """
        Classify a stroke.

        Args:
            points: Ordered stroke points (Point objects, (x, y) pairs or
                    {'x', 'y'} dicts)

        Returns:
            ShapeVerdict; NO_MATCH when the stroke should stay freehand
        """
        if len(points) < self.config.min_points:
            return NO_MATCH

        coords = PathUtils.to_array(points)
        box = bounding_box(coords)
        if box.width < self.config.min_size or box.height < self.config.min_size:
            return NO_MATCH

        if closure_distance(coords) > box.diagonal * self.config.closure_ratio:
            return NO_MATCH

        kind = decide(circle_error(coords, box), rect_error(coords, box), self.config)
        if kind == NONE:
            return NO_MATCH
        return ShapeVerdict.from_box(kind, box)

    def get_stroke_stats(self, points: Sequence[Any]) -> Dict[str, Any]:
        """
        Get detailed statistics about a stroke for debugging/analysis.

        Returns:
            Dictionary with point_count, path_length, centroid, bounding_box,
            width, height, closure_distance, circle_error, rect_error and verdict
        """
        if len(points) == 0:
            return {}

        path = PathUtils.to_points(points)
        coords = PathUtils.to_array(path)
        box = bounding_box(coords)
        centroid = GeometryUtils.calculate_centroid(path)

        return {
            'point_count': len(coords),
            'path_length': GeometryUtils.calculate_path_length(path),
            'centroid': (centroid.x, centroid.y),
            'bounding_box': (box.min_x, box.min_y, box.max_x, box.max_y),
            'width': box.width,
            'height': box.height,
            'closure_distance': closure_distance(coords),
            'circle_error': circle_error(coords, box),
            'rect_error': rect_error(coords, box),
            'verdict': self.classify(points).kind,
        }


# Convenience functions
recognizer = ShapeRecognizer()


def recognize_shape(points: Sequence[Any]) -> ShapeVerdict:
    """Classify a stroke with the default thresholds."""
    return recognizer.classify(points)


def get_stroke_stats(points: Sequence[Any]) -> Dict[str, Any]:
    """Get stroke statistics with the default thresholds."""
    return recognizer.get_stroke_stats(points)
