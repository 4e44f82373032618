from app.config.aws import create_aws_client
from app.config.settings import Settings
from app.toxicity.base import BaseToxicityClassifier
from app.toxicity.comprehend_adapter import ComprehendClassifier
from app.toxicity.example_adapter import ExampleClassifier
from app.toxicity.openai_adapter import OpenAIModerationClassifier


class ToxicityClassifierFactory:
    """Creates the configured toxicity classifier adapter."""

    PROVIDERS: tuple[str, ...] = ("comprehend", "openai", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseToxicityClassifier:
        provider = settings.toxicity_provider.lower()
        if provider == "example":
            return ExampleClassifier()
        if provider == "comprehend":
            return ComprehendClassifier(
                client=create_aws_client("comprehend", settings),
                language_code=settings.toxicity_language_code,
            )
        if provider == "openai":
            if not settings.openai_api_key:
                raise ValueError("openai_api_key is required for toxicity_provider=openai")
            return OpenAIModerationClassifier(
                api_key=settings.openai_api_key,
                model=settings.openai_moderation_model,
                timeout_seconds=settings.openai_timeout_seconds,
            )
        raise ValueError(
            f"Unknown toxicity provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
