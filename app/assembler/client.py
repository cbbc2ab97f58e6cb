import httpx

from app.assembler.exceptions import ExtractionTransportError
from app.extraction.models import (
    ExtractionFailed,
    ExtractionResult,
    ExtractionSuccess,
    UploadedFile,
)
from app.logging.logger import Log

MALFORMED_RESPONSE_MESSAGE = "Extraction service returned a malformed response."


class ExtractionClient:
    """Posts a selected file to the PDF text extraction endpoint."""

    FIELD_NAME = "pdfFile"

    def __init__(
        self,
        *,
        endpoint_url: str,
        timeout_seconds: float,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._endpoint_url = endpoint_url
        self._timeout_seconds = timeout_seconds
        self._http_client = http_client or httpx.Client()

    def extract(self, upload: UploadedFile) -> ExtractionResult:
        """Upload one file and decode the endpoint's JSON answer.

        Raises:
            ExtractionTransportError: if the request cannot be completed.
        """
        files = {self.FIELD_NAME: (upload.name, upload.read(), upload.mime_type)}
        try:
            response = self._http_client.post(
                self._endpoint_url,
                files=files,
                timeout=self._timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            raise ExtractionTransportError(
                f"Extraction request timed out after {self._timeout_seconds}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise ExtractionTransportError(f"Extraction request failed: {exc}") from exc

        return self._decode(response)

    def close(self) -> None:
        self._http_client.close()

    def __enter__(self) -> "ExtractionClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @staticmethod
    def _decode(response: httpx.Response) -> ExtractionResult:
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if not response.is_success or not data.get("success"):
            message = data.get("message") or (
                f"Failed to extract text from PDF: {response.reason_phrase}"
            )
            Log.warning(f"Extraction failed with status {response.status_code}: {message}")
            return ExtractionFailed(message=message, status_code=response.status_code)

        text = data.get("text") or ""
        try:
            if not isinstance(text, str):
                raise TypeError(f"text must be a string, got {type(text).__name__}")
            pages = int(data.get("pages") or 0)
            total_pages = int(data.get("totalPages") or pages)
        except (TypeError, ValueError) as exc:
            Log.warning(f"Malformed extraction response: {exc}")
            return ExtractionFailed(
                message=MALFORMED_RESPONSE_MESSAGE, status_code=response.status_code
            )
        return ExtractionSuccess(text=text, pages=pages, total_pages=total_pages)
