import io

import pdfplumber
from pdfminer.pdfdocument import PDFPasswordIncorrect

from app.pdf.base import BasePdfExtractor
from app.pdf.exceptions import PdfExtractionError, PdfPasswordError
from app.pdf.models import PdfText


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, pdf_bytes: bytes, max_pages: int | None = None) -> PdfText:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                page_count = len(pdf.pages)
                limit = self._page_limit(max_pages, page_count)
                pages = [page.extract_text() or "" for page in pdf.pages[:limit]]
            return PdfText(text="\n".join(pages).strip(), page_count=page_count)
        except PdfExtractionError:
            raise
        except Exception as exc:
            if _is_password_error(exc):
                raise PdfPasswordError(
                    f"pdfplumber extraction failed: password required ({exc!r})"
                ) from exc
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc


def _is_password_error(exc: Exception) -> bool:
    # pdfplumber may wrap the pdfminer error in PdfminerException
    candidates = (exc, *exc.args, exc.__cause__, exc.__context__)
    return any(isinstance(candidate, PDFPasswordIncorrect) for candidate in candidates)
