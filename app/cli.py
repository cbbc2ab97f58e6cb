import argparse
import mimetypes
import sys
from pathlib import Path

from app.assembler.assembler import build_prompt_assembler
from app.assembler.trigger import RecordingGenerationTrigger
from app.config.settings import Settings
from app.extraction.models import UploadedFile
from app.logging.logger import Log


def open_uploaded_file(path: Path) -> UploadedFile:
    """Wrap a local file as an upload, guessing its MIME type from the suffix."""
    mime_type, _ = mimetypes.guess_type(path.name)
    return UploadedFile(
        name=path.name,
        size_bytes=path.stat().st_size,
        mime_type=mime_type or "application/octet-stream",
        stream=path.open("rb"),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Assemble a presentation prompt from typed text and an optional PDF"
    )
    parser.add_argument("--prompt", default="", help="Typed prompt text")
    parser.add_argument("--pdf", type=Path, help="Path to a PDF to extract text from")
    parser.add_argument("--url", help="Extraction endpoint URL (overrides settings)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    if args.url:
        settings.extract_endpoint_url = args.url

    trigger = RecordingGenerationTrigger()
    assembler = build_prompt_assembler(settings, trigger, prompt_text=args.prompt)

    upload = None
    try:
        upload = open_uploaded_file(args.pdf) if args.pdf else None
        if upload is not None and not assembler.select_file(upload):
            print(f"Error: {assembler.file_error}", file=sys.stderr)
            return 1
        final_prompt = assembler.generate()
    finally:
        if upload is not None:
            upload.stream.close()
        assembler.close()

    if final_prompt is None:
        print(f"Error: {assembler.file_error}", file=sys.stderr)
        return 1
    print(final_prompt)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
