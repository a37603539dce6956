"""
Utilities package for stroke processing.

This package provides shared point and geometry helpers used by the
recognizer, the document model and the input layer.
"""

from .gesture_utils import (
    Point,
    GeometryUtils,
    PathUtils,
    DataValidator
)

__all__ = [
    'Point',
    'GeometryUtils',
    'PathUtils',
    'DataValidator'
]
