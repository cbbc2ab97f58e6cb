from dataclasses import dataclass, field
from typing import BinaryIO


@dataclass(frozen=True)
class UploadedFile:
    """A single uploaded file, valid only for the duration of one request."""

    name: str
    size_bytes: int
    mime_type: str
    stream: BinaryIO = field(repr=False, compare=False)

    def read(self) -> bytes:
        """Read the full file content from the start of the stream."""
        self.stream.seek(0)
        return self.stream.read()


@dataclass(frozen=True)
class ExtractionSuccess:
    """Text extracted from an uploaded PDF."""

    text: str
    pages: int
    total_pages: int

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class ExtractionFailed:
    """A rejected upload attempt with the message shown to the user."""

    message: str
    status_code: int

    @property
    def success(self) -> bool:
        return False


ExtractionResult = ExtractionSuccess | ExtractionFailed
