from app.config.settings import Settings
from app.extraction.error_classifier import classify_extraction_error
from app.extraction.exceptions import (
    ExtractionEmptyError,
    ExtractionError,
    ExtractionFailure,
)
from app.extraction.models import (
    ExtractionFailed,
    ExtractionResult,
    ExtractionSuccess,
    UploadedFile,
)
from app.extraction.validator import validate_upload
from app.logging.logger import Log
from app.pdf.base import BasePdfExtractor
from app.pdf.factory import PdfExtractorFactory

EMPTY_TEXT_MESSAGE = (
    "No text could be extracted from the PDF. "
    "The file might be image-based or corrupted."
)


class ExtractionHandler:
    """Validates one uploaded PDF and turns it into prompt text.

    Pipeline: validate -> read -> extract -> check non-empty.
    Every failure ends the attempt; nothing is retained between calls.
    """

    def __init__(self, pdf_extractor: BasePdfExtractor, settings: Settings) -> None:
        self._pdf_extractor = pdf_extractor
        self._settings = settings

    def handle(self, upload: UploadedFile | None) -> ExtractionResult:
        """Run the extraction flow and return a success or failure result."""
        try:
            return self._extract(upload)
        except ExtractionError as exc:
            Log.warning(f"Upload rejected ({exc.status_code}): {exc.message}")
            return ExtractionFailed(message=exc.message, status_code=exc.status_code)

    def _extract(self, upload: UploadedFile | None) -> ExtractionSuccess:
        document = validate_upload(upload, self._settings)
        Log.info(
            f"Extracting text from '{document.name}' ({document.size_bytes} bytes)"
        )

        try:
            pdf_bytes = document.read()
            pdf_text = self._pdf_extractor.extract(
                pdf_bytes, max_pages=self._settings.pdf_max_pages
            )
            text = pdf_text.text.strip()
        except Exception as exc:
            Log.exception(f"Error extracting text from '{document.name}': {exc}")
            raise ExtractionFailure(classify_extraction_error(exc)) from exc

        if not text:
            raise ExtractionEmptyError(EMPTY_TEXT_MESSAGE)

        Log.info(
            f"Extracted {len(text)} chars from '{document.name}' "
            f"({pdf_text.page_count} pages)"
        )
        return ExtractionSuccess(
            text=text,
            pages=pdf_text.page_count,
            total_pages=pdf_text.page_count,
        )


def build_extraction_handler(settings: Settings) -> ExtractionHandler:
    """Build an ExtractionHandler with the configured PDF engine."""
    return ExtractionHandler(
        pdf_extractor=PdfExtractorFactory.create(settings),
        settings=settings,
    )
