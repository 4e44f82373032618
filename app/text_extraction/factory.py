from app.config.aws import create_aws_client
from app.config.settings import Settings
from app.storage.base import BaseObjectStore
from app.text_extraction.base import BaseTextExtractor
from app.text_extraction.pdfplumber_adapter import PdfPlumberExtractor
from app.text_extraction.textract_adapter import TextractExtractor


class TextExtractorFactory:
    """Creates the correct text extractor based on settings."""

    PROVIDERS: tuple[str, ...] = ("textract", "pdfplumber")

    @classmethod
    def create(cls, settings: Settings, store: BaseObjectStore) -> BaseTextExtractor:
        provider = settings.text_extraction_provider.lower()
        if provider == "pdfplumber":
            return PdfPlumberExtractor(store=store)
        if provider == "textract":
            return TextractExtractor(client=create_aws_client("textract", settings))
        raise ValueError(
            f"Unknown text extraction provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
