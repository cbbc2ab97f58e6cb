import io
from unittest.mock import MagicMock

from app.config.settings import Settings
from app.extraction.error_classifier import (
    GENERIC_FAILURE_MESSAGE,
    INVALID_PDF_MESSAGE,
    PASSWORD_PROTECTED_MESSAGE,
)
from app.extraction.handler import EMPTY_TEXT_MESSAGE, ExtractionHandler
from app.extraction.models import ExtractionFailed, ExtractionSuccess, UploadedFile
from app.pdf.base import BasePdfExtractor
from app.pdf.exceptions import PdfExtractionError, PdfPasswordError
from app.pdf.models import PdfText


def _make_upload(
    content: bytes = b"%PDF-fake",
    mime_type: str = "application/pdf",
    size_bytes: int | None = None,
) -> UploadedFile:
    return UploadedFile(
        name="deck.pdf",
        size_bytes=len(content) if size_bytes is None else size_bytes,
        mime_type=mime_type,
        stream=io.BytesIO(content),
    )


def _make_handler(
    text: str = "  Hello World \n",
    page_count: int = 3,
) -> tuple[ExtractionHandler, MagicMock]:
    pdf_extractor = MagicMock(spec=BasePdfExtractor)
    pdf_extractor.extract.return_value = PdfText(text=text, page_count=page_count)
    return ExtractionHandler(pdf_extractor, Settings()), pdf_extractor


class TestSuccessfulExtraction:
    def test_returns_trimmed_text_and_page_counts(self) -> None:
        handler, _extractor = _make_handler()

        result = handler.handle(_make_upload())

        assert result == ExtractionSuccess(text="Hello World", pages=3, total_pages=3)
        assert result.success is True

    def test_passes_bytes_and_page_cap_to_extractor(self) -> None:
        handler, pdf_extractor = _make_handler()

        handler.handle(_make_upload(content=b"%PDF-1.4 body"))

        pdf_extractor.extract.assert_called_once_with(b"%PDF-1.4 body", max_pages=50)

    def test_same_file_twice_gives_same_result(self) -> None:
        handler, _extractor = _make_handler()
        upload = _make_upload()

        assert handler.handle(upload) == handler.handle(upload)


class TestValidationFailures:
    def test_missing_file(self) -> None:
        handler, pdf_extractor = _make_handler()

        result = handler.handle(None)

        assert result == ExtractionFailed(message="No PDF file provided.", status_code=400)
        assert result.success is False
        pdf_extractor.extract.assert_not_called()

    def test_wrong_type_never_reaches_parser(self) -> None:
        handler, pdf_extractor = _make_handler()

        result = handler.handle(_make_upload(mime_type="text/plain"))

        assert isinstance(result, ExtractionFailed)
        assert result.status_code == 400
        pdf_extractor.extract.assert_not_called()

    def test_oversized_file(self) -> None:
        handler, pdf_extractor = _make_handler()

        result = handler.handle(_make_upload(size_bytes=10_485_761))

        assert isinstance(result, ExtractionFailed)
        assert result.status_code == 413
        pdf_extractor.extract.assert_not_called()


class TestEmptyText:
    def test_whitespace_only_text_is_422(self) -> None:
        handler, _extractor = _make_handler(text=" \n\t ")

        result = handler.handle(_make_upload())

        assert result == ExtractionFailed(message=EMPTY_TEXT_MESSAGE, status_code=422)


class TestParserFailures:
    def test_invalid_pdf_maps_to_500(self) -> None:
        handler, pdf_extractor = _make_handler()
        pdf_extractor.extract.side_effect = PdfExtractionError("Is this really a PDF?")

        result = handler.handle(_make_upload())

        assert result == ExtractionFailed(message=INVALID_PDF_MESSAGE, status_code=500)

    def test_password_error_maps_to_500(self) -> None:
        handler, pdf_extractor = _make_handler()
        pdf_extractor.extract.side_effect = PdfPasswordError("PDF requires a password")

        result = handler.handle(_make_upload())

        assert result == ExtractionFailed(message=PASSWORD_PROTECTED_MESSAGE, status_code=500)

    def test_unexpected_error_maps_to_generic_message(self) -> None:
        handler, pdf_extractor = _make_handler()
        pdf_extractor.extract.side_effect = RuntimeError("boom")

        result = handler.handle(_make_upload())

        assert result == ExtractionFailed(message=GENERIC_FAILURE_MESSAGE, status_code=500)
