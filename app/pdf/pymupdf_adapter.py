import pymupdf

from app.pdf.base import BasePdfExtractor
from app.pdf.exceptions import PdfExtractionError, PdfPasswordError
from app.pdf.models import PdfText


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, pdf_bytes: bytes, max_pages: int | None = None) -> PdfText:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.needs_pass:
                    raise PdfPasswordError("pymupdf extraction failed: password required")
                page_count = doc.page_count
                limit = self._page_limit(max_pages, page_count)
                pages = [doc[index].get_text() for index in range(limit)]
            return PdfText(text="\n".join(pages).strip(), page_count=page_count)
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
