"""
Presentation handler (LibreOffice Impress).
"""

from .base import DocumentHandler


class ImpressHandler(DocumentHandler):
    """Presentations: PowerPoint, OpenDocument Presentation and Keynote."""

    ACCEPTED_EXTENSIONS = frozenset({
        "ppt", "pptx", "pptm", "pps", "ppsx", "pot", "potx",
        "odp", "otp", "fodp", "sxi",
        "key",
    })
    PRODUCIBLE_EXTENSIONS = frozenset({
        "pdf", "ppt", "pptx", "odp", "otp", "fodp",
        "html", "xhtml",
        "jpg", "png", "svg", "gif", "tiff",
    })

    def get_category_name(self) -> str:
        return "impress"
