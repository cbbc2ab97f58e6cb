from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from app.api.application import create_app
from app.config.settings import Settings


@pytest.fixture(params=["pdfplumber", "pymupdf"])
def test_settings(request: pytest.FixtureRequest) -> Settings:
    return Settings(pdf_engine=request.param)


@pytest.fixture
def api_client(test_settings: Settings) -> Generator[TestClient, None, None]:
    with TestClient(create_app(test_settings)) as client:
        yield client
