import asyncio
import io

import pdfplumber

from app.logging.logger import Log
from app.storage.base import BaseObjectStore
from app.storage.exceptions import StorageError
from app.storage.models import StorageLocation
from app.text_extraction.base import BaseTextExtractor
from app.text_extraction.exceptions import TextExtractionError

_PDF_MAGIC = b"%PDF"


class PdfPlumberExtractor(BaseTextExtractor):
    """Extracts text locally with pdfplumber, reading bytes back from the store.

    pdfplumber has no OCR: objects that are not PDFs yield empty text.
    """

    def __init__(self, store: BaseObjectStore) -> None:
        self._store = store

    async def extract_text(self, location: StorageLocation) -> str:
        try:
            content = await self._store.get(location)
        except StorageError as exc:
            raise TextExtractionError(f"Cannot read {location.key} for extraction: {exc}") from exc

        if not content.lstrip().startswith(_PDF_MAGIC):
            Log.warning(f"Skipping local text extraction for non-PDF object {location.key}")
            return ""
        return await asyncio.to_thread(self._extract, content)

    @staticmethod
    def _extract(pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise TextExtractionError(f"pdfplumber extraction failed: {exc}") from exc
