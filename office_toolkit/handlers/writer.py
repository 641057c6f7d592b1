"""
Text document handler (LibreOffice Writer).
"""

from .base import DocumentHandler


class WriterHandler(DocumentHandler):
    """Word processing documents: Word, OpenDocument Text, RTF and plain text."""

    ACCEPTED_EXTENSIONS = frozenset({
        "doc", "docx", "docm", "dot", "dotx", "dotm",
        "odt", "ott", "fodt", "sxw",
        "rtf", "txt", "wpd", "wps", "abw",
        "htm", "html",
    })
    PRODUCIBLE_EXTENSIONS = frozenset({
        "pdf", "doc", "docx", "odt", "ott", "fodt", "rtf", "txt",
        "html", "xhtml", "epub",
        "jpg", "png", "svg",
    })

    def get_category_name(self) -> str:
        return "writer"
