"""Example toxicity classifier adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseToxicityClassifier and register the provider in ToxicityClassifierFactory.
"""

from app.toxicity.base import BaseToxicityClassifier
from app.toxicity.models import ToxicityResult


class ExampleClassifier(BaseToxicityClassifier):
    """Example adapter that scores every text as harmless. No network calls."""

    def __init__(self, score: float = 0.0) -> None:
        self._score = score

    async def classify(self, text: str) -> ToxicityResult:
        return ToxicityResult(
            toxicity_score=self._score,
            detail={"Toxicity": self._score, "Labels": [], "Characters": len(text)},
        )
