from app.config.settings import Settings
from app.extraction.exceptions import UploadValidationError
from app.extraction.models import UploadedFile

NO_FILE_MESSAGE = "No PDF file provided."
INVALID_TYPE_MESSAGE = "Invalid file type. Only PDF files are allowed."


def too_large_message(max_file_size_bytes: int) -> str:
    return f"File too large. Maximum size is {max_file_size_bytes // (1024 * 1024)}MB."


def validate_upload(upload: UploadedFile | None, settings: Settings) -> UploadedFile:
    """Check presence, declared MIME type and size, in that order.

    The file content is not inspected: a PDF declared as another type is
    rejected, and anything declared as a PDF passes to the parser.

    Raises:
        UploadValidationError: 400 for a missing file or wrong type, 413 when
            the file is larger than the configured limit.
    """
    if upload is None:
        raise UploadValidationError(NO_FILE_MESSAGE, status_code=400)
    if upload.mime_type != settings.allowed_mime_type:
        raise UploadValidationError(INVALID_TYPE_MESSAGE, status_code=400)
    if upload.size_bytes > settings.max_file_size_bytes:
        raise UploadValidationError(
            too_large_message(settings.max_file_size_bytes), status_code=413
        )
    return upload
