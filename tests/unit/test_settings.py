import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_port(self) -> None:
        s = Settings()
        assert s.port == 3000

    def test_default_storage_folder(self) -> None:
        s = Settings()
        assert s.default_storage_folder == "Worktool"

    def test_default_thresholds(self) -> None:
        s = Settings()
        assert s.moderation_confidence_threshold == 90.0
        assert s.toxicity_threshold == 0.75

    def test_default_video_polling(self) -> None:
        s = Settings()
        assert s.video_poll_interval_seconds == 5
        assert s.video_poll_max_attempts == 120

    def test_default_providers(self) -> None:
        s = Settings()
        assert s.storage_provider == "s3"
        assert s.vision_provider == "rekognition"
        assert s.text_extraction_provider == "textract"
        assert s.toxicity_provider == "comprehend"


class TestSettingsFromEnv:
    def test_loads_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        s = Settings()
        assert s.port == 8080

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_bucket_and_cdn(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AWS_BUCKET_NAME", "media")
        monkeypatch.setenv("CLOUDFRONT_BASE_URL", "https://cdn.example.com/")
        s = Settings()
        assert s.aws_bucket_name == "media"
        assert s.cloudfront_base_url == "https://cdn.example.com/"

    def test_loads_secret_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AWS_SECRET_KEY", "s3cr3t")
        s = Settings()
        assert s.aws_secret_key == "s3cr3t"

    def test_loads_legacy_secret_key_spelling(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("AWS_SECRET_KEY", raising=False)
        monkeypatch.setenv("AWS_SECRETE_KEY", "legacy")
        s = Settings()
        assert s.aws_secret_key == "legacy"


class TestSettingsValidation:
    def test_invalid_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_threshold_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOXICITY_THRESHOLD", "high")
        with pytest.raises(ValidationError):
            Settings()
