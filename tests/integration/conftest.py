from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.config.settings import Settings
from app.main import create_app

CDN = "https://cdn.example.com/"


@pytest.fixture
def local_settings() -> Settings:
    """Settings wiring every provider to a local, network-free adapter."""
    return Settings(
        storage_provider="memory",
        vision_provider="example",
        text_extraction_provider="pdfplumber",
        toxicity_provider="example",
        aws_bucket_name="media",
        cloudfront_base_url=CDN,
        video_poll_interval_seconds=0,
        video_poll_max_attempts=3,
    )


@pytest.fixture
def local_app(local_settings: Settings) -> FastAPI:
    return create_app(local_settings)


@pytest.fixture
def client(local_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(local_app) as test_client:
        yield test_client
