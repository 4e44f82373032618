from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000

    aws_access_key: str = ""
    aws_secret_key: str = Field(
        default="",
        validation_alias=AliasChoices("aws_secret_key", "aws_secrete_key"),
    )
    aws_session_token: str = ""
    s3_aws_region: str = "us-east-1"
    aws_bucket_name: str = ""
    cloudfront_base_url: str = ""

    default_storage_folder: str = "Worktool"

    storage_provider: str = "s3"
    vision_provider: str = "rekognition"
    text_extraction_provider: str = "textract"
    toxicity_provider: str = "comprehend"

    moderation_confidence_threshold: float = 90.0
    toxicity_threshold: float = 0.75
    toxicity_language_code: str = "en"

    video_poll_interval_seconds: float = 5
    video_poll_max_attempts: int = 120

    openai_api_key: str = ""
    openai_moderation_model: str = "omni-moderation-latest"
    openai_timeout_seconds: int = 30
