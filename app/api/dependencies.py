import io
import os

from fastapi import Request
from starlette.datastructures import UploadFile

from app.extraction.handler import ExtractionHandler
from app.extraction.models import UploadedFile


def get_extraction_handler(request: Request) -> ExtractionHandler:
    return request.app.state.extraction_handler


def to_uploaded_file(value: UploadFile | str | None) -> UploadedFile | None:
    """Convert a form value into the handler's transient file value.

    A plain text field carries no content type, so validation rejects it as
    the wrong file type.
    """
    if value is None:
        return None
    if isinstance(value, str):
        content = value.encode("utf-8")
        return UploadedFile(
            name="",
            size_bytes=len(content),
            mime_type="",
            stream=io.BytesIO(content),
        )
    size = value.size
    if size is None:
        # Measure the spooled file without reading it into memory.
        value.file.seek(0, os.SEEK_END)
        size = value.file.tell()
        value.file.seek(0)
    return UploadedFile(
        name=value.filename or "",
        size_bytes=size,
        mime_type=value.content_type or "",
        stream=value.file,
    )
