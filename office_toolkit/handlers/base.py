"""
Base handler interface for office document categories.
"""

from abc import ABC, abstractmethod
from typing import FrozenSet, Iterable, Optional

from ..utils.paths import normalize_extension


class DocumentHandler(ABC):
    """
    Abstract base class for document category handlers.

    A handler describes one LibreOffice document category: the input
    extensions it recognizes and the output extensions it can render to.
    Subclasses declare both sets as class constants; instances may override
    them, which is how tests build handler doubles.
    """

    ACCEPTED_EXTENSIONS: FrozenSet[str] = frozenset()
    PRODUCIBLE_EXTENSIONS: FrozenSet[str] = frozenset()

    def __init__(self, accepted: Optional[Iterable[str]] = None, producible: Optional[Iterable[str]] = None):
        if accepted is None:
            accepted = self.ACCEPTED_EXTENSIONS
        if producible is None:
            producible = self.PRODUCIBLE_EXTENSIONS
        self._accepted = frozenset(normalize_extension(ext) for ext in accepted)
        self._producible = frozenset(normalize_extension(ext) for ext in producible)

    @property
    def accepted_extensions(self) -> FrozenSet[str]:
        return self._accepted

    @property
    def producible_extensions(self) -> FrozenSet[str]:
        return self._producible

    @property
    def name(self) -> str:
        return self.get_category_name()

    def accepts(self, extension: str) -> bool:
        """
        Check if this handler recognizes the given input extension.

        Args:
            extension: File extension, with or without a leading dot

        Returns:
            True if accepted, False otherwise
        """
        return normalize_extension(extension) in self._accepted

    def can_produce(self, extension: str) -> bool:
        """
        Check if this handler can convert to the given output extension.

        Args:
            extension: Target extension, with or without a leading dot

        Returns:
            True if the conversion is legal, False otherwise
        """
        return normalize_extension(extension) in self._producible

    @abstractmethod
    def get_category_name(self) -> str:
        """
        Get the name of the document category.

        Returns:
            String identifier for this category (e.g. 'writer')
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
