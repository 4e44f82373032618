from app.config.aws import create_aws_client
from app.config.settings import Settings
from app.vision.base import BaseVisionModerator
from app.vision.example_adapter import ExampleModerator
from app.vision.rekognition_adapter import RekognitionModerator


class VisionModeratorFactory:
    """Creates the configured vision moderation adapter."""

    PROVIDERS: tuple[str, ...] = ("rekognition", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseVisionModerator:
        provider = settings.vision_provider.lower()
        if provider == "example":
            return ExampleModerator()
        if provider == "rekognition":
            return RekognitionModerator(client=create_aws_client("rekognition", settings))
        raise ValueError(
            f"Unknown vision provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
