"""Maps parser failures to the message returned to the user.

Adapter errors are typed; anything else raised while extracting falls back
to a best-effort substring match on the error text.
"""

from app.pdf.exceptions import PdfExtractionError, PdfPasswordError

INVALID_PDF_MESSAGE = "Invalid PDF file. Please ensure the file is not corrupted."
PASSWORD_PROTECTED_MESSAGE = "Password-protected PDFs are not supported."
GENERIC_FAILURE_MESSAGE = "Failed to process document for text extraction."


def classify_extraction_error(exc: BaseException) -> str:
    """Return the user-facing message for an exception raised while extracting."""
    if isinstance(exc, PdfPasswordError):
        return PASSWORD_PROTECTED_MESSAGE
    if isinstance(exc, PdfExtractionError):
        return INVALID_PDF_MESSAGE

    # Order matters: any text mentioning "PDF" wins over "password".
    error_text = str(exc)
    if "Invalid PDF" in error_text or "PDF" in error_text:
        return INVALID_PDF_MESSAGE
    if "password" in error_text:
        return PASSWORD_PROTECTED_MESSAGE
    return GENERIC_FAILURE_MESSAGE
