"""Wire schemas for the PDF text extraction endpoint."""

from pydantic import BaseModel, ConfigDict, Field

from app.extraction.models import ExtractionResult, ExtractionSuccess


class ExtractPdfTextResponse(BaseModel):
    """JSON body returned by POST /api/extract-pdf-text.

    Success bodies carry text, pages and totalPages; failure bodies carry
    only a message. Unset fields are left out of the JSON.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    text: str | None = None
    pages: int | None = None
    total_pages: int | None = Field(default=None, alias="totalPages")
    message: str | None = None

    @classmethod
    def from_result(cls, result: ExtractionResult) -> "ExtractPdfTextResponse":
        if isinstance(result, ExtractionSuccess):
            return cls(
                success=True,
                text=result.text,
                pages=result.pages,
                total_pages=result.total_pages,
            )
        return cls(success=False, message=result.message)

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)


class HealthResponse(BaseModel):
    status: str
