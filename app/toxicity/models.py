from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ToxicityResult:
    """Output of a toxicity classifier.

    toxicity_score is in [0, 1]; detail is the provider's raw result object.
    """

    toxicity_score: float
    detail: dict[str, Any] | None = None
