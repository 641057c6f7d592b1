"""
Spreadsheet handler (LibreOffice Calc).
"""

from .base import DocumentHandler


class CalcHandler(DocumentHandler):
    """Spreadsheets: Excel, OpenDocument Spreadsheet and delimited text."""

    ACCEPTED_EXTENSIONS = frozenset({
        "xls", "xlsx", "xlsm", "xlsb", "xlt", "xltx",
        "ods", "ots", "fods", "sxc",
        "csv", "dif", "slk",
    })
    PRODUCIBLE_EXTENSIONS = frozenset({
        "pdf", "xls", "xlsx", "ods", "ots", "fods", "csv",
        "html", "xhtml",
        "jpg", "png", "svg",
    })

    def get_category_name(self) -> str:
        return "calc"
