from abc import ABC, abstractmethod

from app.toxicity.models import ToxicityResult


class BaseToxicityClassifier(ABC):
    """Contract for all toxicity classifier adapters."""

    @abstractmethod
    async def classify(self, text: str) -> ToxicityResult:
        """Score how toxic a piece of text is.

        Args:
            text: Non-empty plain text, typically from the text extraction step.

        Returns:
            ToxicityResult with a 0-1 score and the provider's detail payload.

        Raises:
            ToxicityError: on any failure.
        """
