from abc import ABC, abstractmethod

from app.pdf.models import PdfText


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    def __init__(self, default_max_pages: int | None = None) -> None:
        self._default_max_pages = default_max_pages

    @abstractmethod
    def extract(self, pdf_bytes: bytes, max_pages: int | None = None) -> PdfText:
        """Extract plain text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.
            max_pages: Read at most this many leading pages. None falls back
                to the adapter's default cap; with no cap every page is read.

        Returns:
            PdfText with the stripped text and the document's page count.

        Raises:
            PdfPasswordError: if the document is encrypted.
            PdfExtractionError: if extraction fails for any other reason.
        """

    def _page_limit(self, max_pages: int | None, page_count: int) -> int:
        cap = max_pages if max_pages is not None else self._default_max_pages
        return page_count if cap is None else min(cap, page_count)
