import httpx
import openai

from app.logging.logger import Log
from app.toxicity.base import BaseToxicityClassifier
from app.toxicity.exceptions import ToxicityError, ToxicityNetworkError
from app.toxicity.models import ToxicityResult


class OpenAIModerationClassifier(BaseToxicityClassifier):
    """Toxicity classifier adapter built on the OpenAI moderation endpoint.

    The score is the highest category score of the first result.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._model = model

    async def classify(self, text: str) -> ToxicityResult:
        try:
            response = await self._client.moderations.create(model=self._model, input=text)
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ToxicityNetworkError(f"Moderation provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ToxicityNetworkError(f"Moderation provider API error: {exc}") from exc

        if not response.results:
            raise ToxicityError("Moderation provider returned no results")
        result = response.results[0]
        Log.debug(f"Moderation result flagged={result.flagged}")
        scores = result.category_scores.model_dump()
        numeric = [float(value) for value in scores.values() if isinstance(value, (int, float))]
        score = max(numeric, default=0.0)
        return ToxicityResult(toxicity_score=score, detail=result.model_dump())
