"""
Whiteboard Package
A freehand whiteboard with automatic circle and rectangle recognition.
"""

from .core.controller import BoardController, BoardState
from .core.document import Document, DocumentStore
from .gestures.shape_recognizer import ShapeRecognizer, ShapeVerdict, recognize_shape

__version__ = "1.0.0"
__all__ = [
    "BoardController",
    "BoardState",
    "Document",
    "DocumentStore",
    "ShapeRecognizer",
    "ShapeVerdict",
    "recognize_shape",
]
