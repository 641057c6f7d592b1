"""
Handler registry for extension-to-handler dispatch.

The registry is an ordered, immutable collection of document handlers.
Lookups walk the handlers in registration order and the first match wins,
so an extension accepted by two handlers resolves to the earlier one.
"""

from typing import FrozenSet, Iterable, Iterator, Optional, Tuple

from .handlers import CalcHandler, DocumentHandler, DrawHandler, ImpressHandler, WriterHandler
from .utils.paths import normalize_extension


class HandlerRegistry:
    """Ordered, read-only lookup of document handlers by extension."""

    __slots__ = ("_handlers",)

    def __init__(self, handlers: Iterable[DocumentHandler]):
        object.__setattr__(self, "_handlers", tuple(handlers))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def handlers(self) -> Tuple[DocumentHandler, ...]:
        return self._handlers

    def __iter__(self) -> Iterator[DocumentHandler]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def can_handle(self, extension: str) -> bool:
        """
        Check if any registered handler accepts the extension.

        Args:
            extension: Source extension (case-insensitive, leading dot optional)

        Returns:
            True if some handler accepts it, False otherwise
        """
        return self.resolve(extension) is not None

    def resolve(self, extension: str) -> Optional[DocumentHandler]:
        """
        Find the handler for a source extension.

        Args:
            extension: Source extension (case-insensitive, leading dot optional)

        Returns:
            First handler in registration order that accepts the extension,
            or None if no handler does
        """
        ext = normalize_extension(extension)
        if not ext:
            return None
        for handler in self._handlers:
            if handler.accepts(ext):
                return handler
        return None

    @staticmethod
    def can_produce(handler: DocumentHandler, target_extension: str) -> bool:
        """Check if the handler can render to the target extension."""
        return handler.can_produce(target_extension)

    def supported_extensions(self) -> FrozenSet[str]:
        """Get the union of all accepted input extensions."""
        extensions = set()
        for handler in self._handlers:
            extensions.update(handler.accepted_extensions)
        return frozenset(extensions)

    def __repr__(self) -> str:
        names = ", ".join(handler.name for handler in self._handlers)
        return f"HandlerRegistry([{names}])"


def create_default_registry() -> HandlerRegistry:
    """
    Build the registry of LibreOffice document categories.

    Returns:
        Registry with writer, calc, impress and draw handlers, in that order
    """
    return HandlerRegistry([
        WriterHandler(),
        CalcHandler(),
        ImpressHandler(),
        DrawHandler(),
    ])


DEFAULT_REGISTRY = create_default_registry()
"""HandlerRegistry: Shared registry used when a converter is given none."""


def can_handle_extension(extension: str) -> bool:
    """Check if the default registry can convert files with this extension."""
    return DEFAULT_REGISTRY.can_handle(extension)
