import asyncio
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from app.logging.logger import Log
from app.storage.models import StorageLocation
from app.text_extraction.base import BaseTextExtractor
from app.text_extraction.exceptions import TextExtractionError


class TextractExtractor(BaseTextExtractor):
    """Extracts text from a stored object using Textract OCR.

    Only LINE blocks are kept; lines are joined with a single space.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    async def extract_text(self, location: StorageLocation) -> str:
        try:
            response = await asyncio.to_thread(
                self._client.detect_document_text,
                Document={"S3Object": {"Bucket": location.bucket, "Name": location.key}},
            )
        except (BotoCoreError, ClientError) as exc:
            raise TextExtractionError(f"Textract extraction failed: {exc}") from exc

        try:
            lines = [
                str(block.get("Text") or "")
                for block in response.get("Blocks") or []
                if block.get("BlockType") == "LINE"
            ]
        except (AttributeError, TypeError) as exc:
            raise TextExtractionError(f"Malformed Textract response for {location.key}") from exc
        Log.debug(f"Textract returned {len(lines)} lines for {location.key}")
        return " ".join(lines).strip()
