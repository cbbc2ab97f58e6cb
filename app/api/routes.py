from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.api.dependencies import get_extraction_handler, to_uploaded_file
from app.api.schemas import ExtractPdfTextResponse, HealthResponse
from app.extraction.handler import ExtractionHandler
from app.extraction.models import ExtractionFailed

router = APIRouter()

PDF_FILE_FIELD = "pdfFile"


# ---------- Extract text from an uploaded PDF ----------
# The form is read by hand: a text value under pdfFile must reach the handler
# as a wrong-type upload instead of failing FastAPI's request validation.
@router.post(
    "/api/extract-pdf-text",
    response_model=ExtractPdfTextResponse,
    response_model_exclude_none=True,
)
async def extract_pdf_text(
    request: Request,
    handler: ExtractionHandler = Depends(get_extraction_handler),
) -> JSONResponse:
    async with request.form() as form:
        upload = to_uploaded_file(form.get(PDF_FILE_FIELD))
        result = await run_in_threadpool(handler.handle, upload)
    status_code = result.status_code if isinstance(result, ExtractionFailed) else 200
    return JSONResponse(
        status_code=status_code,
        content=ExtractPdfTextResponse.from_result(result).to_payload(),
    )


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok")
