"""
Shape recognition for freehand strokes.

This module provides functionality for recognizing completed freehand strokes
as circles or rectangles, or leaving them as freehand drawings.
"""

from .shape_recognizer import (
    ShapeRecognizer,
    ShapeVerdict,
    RecognitionConfig,
    NO_MATCH,
    recognize_shape,
    get_stroke_stats
)

__all__ = [
    'ShapeRecognizer',
    'ShapeVerdict',
    'RecognitionConfig',
    'NO_MATCH',
    'recognize_shape',
    'get_stroke_stats'
]
