class ExtractionError(Exception):
    """Base exception for a rejected upload attempt. Carries the HTTP status."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class UploadValidationError(ExtractionError):
    """Raised when the upload is missing, has the wrong type, or is too large."""

    status_code = 400


class ExtractionEmptyError(ExtractionError):
    """Raised when the PDF parsed but yielded no text (image-only or corrupted)."""

    status_code = 422


class ExtractionFailure(ExtractionError):
    """Raised when the PDF parser fails on the uploaded content."""

    status_code = 500
