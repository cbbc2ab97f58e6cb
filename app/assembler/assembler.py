from app.assembler.client import ExtractionClient
from app.assembler.exceptions import AssemblerBusyError, AssemblerError
from app.assembler.merge import merge_prompt_text
from app.assembler.models import AssemblerState
from app.assembler.trigger import BaseGenerationTrigger
from app.config.settings import Settings
from app.extraction.models import ExtractionFailed, UploadedFile
from app.extraction.validator import too_large_message
from app.logging.logger import Log

UNSUPPORTED_FILE_MESSAGE = "Only PDF files are supported."
EMPTY_EXTRACTION_MESSAGE = (
    "Could not extract text from the PDF. It might be empty or malformed."
)


class PromptAssembler:
    """Merges typed prompt text with an optional uploaded PDF before generation.

    State: idle -> processing_file -> (generating | failed).
    At most one upload is in flight per assembler.
    """

    def __init__(
        self,
        client: ExtractionClient,
        trigger: BaseGenerationTrigger,
        settings: Settings,
        prompt_text: str = "",
    ) -> None:
        self._client = client
        self._trigger = trigger
        self._settings = settings
        self.prompt_text = prompt_text
        self.selected_file: UploadedFile | None = None
        self.file_error: str | None = None
        self.state = AssemblerState.IDLE

    def select_file(self, upload: UploadedFile | None) -> bool:
        """Select a file for the next generation, rejecting non-PDF or oversized files.

        The typed prompt is left as it is. Returns True if the file was kept.
        """
        self.file_error = None
        if upload is None:
            self.selected_file = None
            return False
        if upload.mime_type != self._settings.allowed_mime_type:
            return self._reject_selection(UNSUPPORTED_FILE_MESSAGE)
        if upload.size_bytes > self._settings.max_file_size_bytes:
            return self._reject_selection(
                too_large_message(self._settings.max_file_size_bytes)
            )
        self.selected_file = upload
        Log.info(f"Selected file: {upload.name}")
        return True

    def generate(self) -> str | None:
        """Build the final prompt and start generation once.

        Returns the prompt handed to the trigger, or None when the document
        could not be used; file_error then holds the reason.
        """
        if self.state is AssemblerState.PROCESSING_FILE:
            raise AssemblerBusyError("A document is already being processed")

        final_text = self.prompt_text
        if self.selected_file is not None:
            final_text = self._combine_with_document(self.selected_file)
            if final_text is None:
                return None

        self.prompt_text = final_text
        self.state = AssemblerState.GENERATING
        self._trigger.start(final_text)
        return final_text

    def close(self) -> None:
        """Release the extraction client's HTTP connections."""
        self._client.close()

    def _combine_with_document(self, upload: UploadedFile) -> str | None:
        self.state = AssemblerState.PROCESSING_FILE
        self.file_error = None
        try:
            result = self._client.extract(upload)
        except AssemblerError as exc:
            return self._fail(f"Failed to process document: {exc}")
        except Exception as exc:
            Log.exception(f"Unexpected error while uploading '{upload.name}'")
            return self._fail(f"Failed to process document: {exc}")

        if isinstance(result, ExtractionFailed):
            return self._fail(f"Failed to process document: {result.message}")
        if not result.text.strip():
            return self._fail(EMPTY_EXTRACTION_MESSAGE)

        Log.info(
            f"Successfully extracted text from {result.pages} of "
            f"{result.total_pages} pages"
        )
        return merge_prompt_text(self.prompt_text, result.text)

    def _fail(self, message: str) -> None:
        Log.error(message)
        self.file_error = message
        self.state = AssemblerState.FAILED
        return None

    def _reject_selection(self, message: str) -> bool:
        self.file_error = message
        self.selected_file = None
        return False


def build_prompt_assembler(
    settings: Settings,
    trigger: BaseGenerationTrigger,
    prompt_text: str = "",
) -> PromptAssembler:
    """Build a PromptAssembler talking to the configured extraction endpoint."""
    client = ExtractionClient(
        endpoint_url=settings.extract_endpoint_url,
        timeout_seconds=settings.assembler_timeout_seconds,
    )
    return PromptAssembler(client, trigger, settings, prompt_text=prompt_text)
