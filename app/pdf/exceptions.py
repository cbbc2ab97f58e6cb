class PdfExtractionError(Exception):
    """Raised when a PDF cannot be parsed into text."""


class PdfPasswordError(PdfExtractionError):
    """Raised when a PDF is encrypted and cannot be opened without a password."""
