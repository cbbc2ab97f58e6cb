import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_page_cap(self) -> None:
        s = Settings()
        assert s.pdf_max_pages == 50

    def test_default_max_file_size_is_ten_mib(self) -> None:
        s = Settings()
        assert s.max_file_size_bytes == 10_485_760

    def test_default_allowed_mime_type(self) -> None:
        s = Settings()
        assert s.allowed_mime_type == "application/pdf"

    def test_default_assembler_timeout(self) -> None:
        s = Settings()
        assert s.assembler_timeout_seconds == 60


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_pdf_engine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PDF_ENGINE", "pymupdf")
        s = Settings()
        assert s.pdf_engine == "pymupdf"

    def test_loads_max_file_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_FILE_SIZE_BYTES", "1024")
        s = Settings()
        assert s.max_file_size_bytes == 1024

    def test_loads_extract_endpoint_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXTRACT_ENDPOINT_URL", "http://api.example.com/api/extract-pdf-text")
        s = Settings()
        assert s.extract_endpoint_url == "http://api.example.com/api/extract-pdf-text"


class TestSettingsValidation:
    def test_invalid_api_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_page_cap_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PDF_MAX_PAGES", "abc")
        with pytest.raises(ValidationError):
            Settings()
