"""
Whiteboard document: the ordered element list and its JSON storage.
"""

import itertools
import json
import logging
import os
from typing import Iterator, List, Optional

from ..config.settings import BoardConfig
from .elements import Element

logger = logging.getLogger(__name__)


class Document:
    """
    Ordered collection of elements, bottom to top.

    Every element added gets a stable id that survives insertions and
    removals elsewhere in the list.
    """

    def __init__(self, elements: Optional[List[Element]] = None):
        self._elements: List[Element] = []
        self._ids = itertools.count(1)
        for element in elements or []:
            self.add(element)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    @property
    def elements(self) -> List[Element]:
        return list(self._elements)

    def add(self, element: Element) -> int:
        """Append an element on top and return its id."""
        element.id = next(self._ids)
        self._elements.append(element)
        return element.id

    def get(self, element_id: Optional[int]) -> Optional[Element]:
        if element_id is None:
            return None
        for element in self._elements:
            if element.id == element_id:
                return element
        return None

    def last(self) -> Optional[Element]:
        return self._elements[-1] if self._elements else None

    def replace(self, element_id: int, element: Element) -> int:
        """Put a new element in place of an existing one and return the new id."""
        for i, existing in enumerate(self._elements):
            if existing.id == element_id:
                element.id = next(self._ids)
                self._elements[i] = element
                return element.id
        raise KeyError(f"No element with id {element_id}")

    def remove(self, element_id: int) -> Optional[Element]:
        for i, element in enumerate(self._elements):
            if element.id == element_id:
                return self._elements.pop(i)
        return None

    def pop(self) -> Optional[Element]:
        """Remove the topmost element (single-step undo)."""
        return self._elements.pop() if self._elements else None

    def clear(self):
        self._elements.clear()

    def hit_test(self, x: float, y: float) -> Optional[int]:
        """Id of the topmost hoverable shape containing (x, y), if any."""
        for element in reversed(self._elements):
            if element.type in BoardConfig.HOVERABLE_TYPES and element.contains(x, y):
                return element.id
        return None

    def to_list(self) -> List[dict]:
        return [element.to_dict() for element in self._elements]


class DocumentStore:
    """Persists a document as a flat JSON list of element dicts."""

    def __init__(self, path: str = BoardConfig.STORAGE_FILE):
        self.path = path

    def load(self) -> Document:
        """
        Load the stored document.

        A missing or unreadable file yields an empty document; malformed
        elements are skipped.
        """
        if not os.path.exists(self.path):
            return Document()

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read board from '{self.path}': {e}")
            return Document()

        if not isinstance(data, list):
            logger.warning(f"Ignoring '{self.path}': expected a list of elements")
            return Document()

        document = Document()
        for i, item in enumerate(data):
            try:
                document.add(Element.from_dict(item))
            except ValueError as e:
                logger.warning(f"Skipping element {i}: {e}")
        logger.debug(f"Loaded {len(document)} elements from '{self.path}'")
        return document

    def save(self, document: Document) -> bool:
        """Write the document; returns False if the file could not be written."""
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(document.to_list(), f)
        except OSError as e:
            logger.error(f"Could not save board to '{self.path}': {e}")
            return False
        return True
