import asyncio
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from app.logging.logger import Log
from app.toxicity.base import BaseToxicityClassifier
from app.toxicity.exceptions import ToxicityError, ToxicityNetworkError
from app.toxicity.models import ToxicityResult

MAX_SEGMENT_BYTES = 1000
MAX_SEGMENTS = 10


def _hard_split(word: str, max_bytes: int) -> list[str]:
    pieces: list[str] = []
    chunk = ""
    for char in word:
        if len((chunk + char).encode("utf-8")) > max_bytes:
            pieces.append(chunk)
            chunk = char
        else:
            chunk += char
    if chunk:
        pieces.append(chunk)
    return pieces


def split_segments(text: str, max_bytes: int = MAX_SEGMENT_BYTES) -> list[str]:
    """Split text on whitespace into segments of at most max_bytes UTF-8 bytes.

    Words longer than max_bytes are cut on character boundaries.
    """
    segments: list[str] = []
    current = ""
    for word in text.split():
        for piece in _hard_split(word, max_bytes):
            candidate = f"{current} {piece}" if current else piece
            if len(candidate.encode("utf-8")) > max_bytes:
                segments.append(current)
                current = piece
            else:
                current = candidate
    if current:
        segments.append(current)
    return segments


class ComprehendClassifier(BaseToxicityClassifier):
    """Toxicity classifier adapter built on Comprehend detect_toxic_content.

    Text is sent as up to MAX_SEGMENTS segments; the most toxic segment decides
    the score and is returned as the detail payload.
    """

    def __init__(self, client: Any, language_code: str = "en") -> None:
        self._client = client
        self._language_code = language_code

    async def classify(self, text: str) -> ToxicityResult:
        segments = split_segments(text)
        if not segments:
            return ToxicityResult(toxicity_score=0.0)
        if len(segments) > MAX_SEGMENTS:
            Log.warning(
                f"Text split into {len(segments)} segments, classifying first {MAX_SEGMENTS}"
            )
            segments = segments[:MAX_SEGMENTS]

        try:
            response = await asyncio.to_thread(
                self._client.detect_toxic_content,
                TextSegments=[{"Text": segment} for segment in segments],
                LanguageCode=self._language_code,
            )
        except (BotoCoreError, ClientError) as exc:
            raise ToxicityNetworkError(f"Comprehend toxicity call failed: {exc}") from exc

        Log.debug(f"Comprehend toxic content response: {response}")
        results = response.get("ResultList") or []
        if not results:
            return ToxicityResult(toxicity_score=0.0)

        try:
            scored = [(float(result.get("Toxicity") or 0.0), result) for result in results]
        except (TypeError, ValueError) as exc:
            raise ToxicityError(f"Malformed toxicity score in response: {exc}") from exc

        score, worst = max(scored, key=lambda pair: pair[0])
        Log.info(f"Toxicity confidence score: {score}")
        return ToxicityResult(toxicity_score=score, detail=worst)
