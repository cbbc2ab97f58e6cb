from dataclasses import dataclass


@dataclass(frozen=True)
class PdfText:
    """Text pulled from a PDF together with the document's page count."""

    text: str
    page_count: int
