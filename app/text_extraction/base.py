from abc import ABC, abstractmethod

from app.storage.models import StorageLocation


class BaseTextExtractor(ABC):
    """Contract for all text extraction adapters."""

    @abstractmethod
    async def extract_text(self, location: StorageLocation) -> str:
        """Extract plain text from a stored image or document.

        Args:
            location: Where the object lives in the object store.

        Returns:
            Extracted text as a single string; empty when the object has none.

        Raises:
            TextExtractionError: if extraction fails for any reason.
        """
