"""
Drawing handler (LibreOffice Draw).
"""

from .base import DocumentHandler


class DrawHandler(DocumentHandler):
    """Drawings and diagrams: OpenDocument Graphics, Visio, CorelDRAW and Publisher."""

    ACCEPTED_EXTENSIONS = frozenset({
        "odg", "otg", "fodg", "sxd",
        "vsd", "vsdx", "vdx",
        "cdr", "pub", "wpg",
    })
    PRODUCIBLE_EXTENSIONS = frozenset({
        "pdf", "odg", "otg", "fodg",
        "html", "xhtml",
        "jpg", "png", "svg", "gif", "tiff", "bmp",
    })

    def get_category_name(self) -> str:
        return "draw"
