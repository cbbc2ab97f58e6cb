from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8000

    pdf_engine: str = "pdfplumber"
    pdf_max_pages: int = 50
    max_file_size_bytes: int = 10 * 1024 * 1024
    allowed_mime_type: str = "application/pdf"

    extract_endpoint_url: str = "http://localhost:8000/api/extract-pdf-text"
    assembler_timeout_seconds: int = 60
