import pytest

from app.storage.memory_adapter import MemoryObjectStore
from app.storage.models import StorageLocation
from app.text_extraction.exceptions import TextExtractionError
from app.text_extraction.pdfplumber_adapter import PdfPlumberExtractor


async def _stored(content: bytes, name: str = "doc.pdf") -> tuple[PdfPlumberExtractor, StorageLocation]:
    store = MemoryObjectStore(bucket="local")
    location = store.location_for(None, name)
    await store.put(location, content, "application/pdf")
    return PdfPlumberExtractor(store=store), location


class TestPdfPlumberExtractor:
    @pytest.mark.asyncio
    async def test_extract_returns_text(self, sample_pdf_bytes: bytes) -> None:
        extractor, location = await _stored(sample_pdf_bytes)
        result = await extractor.extract_text(location)
        assert "Quarterly intake report" in result

    @pytest.mark.asyncio
    async def test_extract_multi_page(self, multi_page_pdf_bytes: bytes) -> None:
        extractor, location = await _stored(multi_page_pdf_bytes)
        result = await extractor.extract_text(location)
        assert "Cover letter" in result
        assert "Signed agreement" in result

    @pytest.mark.asyncio
    async def test_extract_empty_pdf_returns_empty_string(self, empty_pdf_bytes: bytes) -> None:
        extractor, location = await _stored(empty_pdf_bytes)
        assert await extractor.extract_text(location) == ""

    @pytest.mark.asyncio
    async def test_non_pdf_object_yields_no_text(self) -> None:
        extractor, location = await _stored(b"\x89PNG\r\n", name="cat.png")
        assert await extractor.extract_text(location) == ""

    @pytest.mark.asyncio
    async def test_corrupt_pdf_raises(self) -> None:
        extractor, location = await _stored(b"%PDF-1.4 garbage")
        with pytest.raises(TextExtractionError):
            await extractor.extract_text(location)

    @pytest.mark.asyncio
    async def test_missing_object_raises(self) -> None:
        extractor = PdfPlumberExtractor(store=MemoryObjectStore(bucket="local"))
        with pytest.raises(TextExtractionError, match="Cannot read"):
            await extractor.extract_text(StorageLocation(bucket="local", key="missing.pdf"))
