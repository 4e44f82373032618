from app.api.endpoints import MULTIPLE, PDF, VIDEO, serialize_label
from app.moderation.models import MimeCategory, ReasonCode, rejection
from app.storage.models import StorageLocation
from app.vision.models import ModerationLabel

LOCATION = StorageLocation(bucket="media", key="Worktool/file")


class TestSerializeLabel:
    def test_image_label_has_no_timestamp(self) -> None:
        label = ModerationLabel(name="Suggestive", confidence=95.5, parent_name="")
        assert serialize_label(label) == {
            "Name": "Suggestive",
            "Confidence": 95.5,
            "ParentName": "",
        }

    def test_video_label_carries_timestamp(self) -> None:
        label = ModerationLabel(
            name="Graphic Violence", confidence=91.0, parent_name="Violence", timestamp_ms=1200
        )
        assert serialize_label(label)["Timestamp"] == 1200


class TestRejectionPayload:
    def test_multiple_uses_category_specific_message(self) -> None:
        verdict = rejection(LOCATION, MimeCategory.PDF, ReasonCode.TOXIC_CONTENT, details={"x": 1})

        payload = MULTIPLE.rejection_payload(verdict)

        assert payload == {
            "error": "Toxic content detected in PDF and file deleted",
            "details": {"x": 1},
        }

    def test_pdf_flags_failure(self) -> None:
        verdict = rejection(LOCATION, MimeCategory.PDF, ReasonCode.TOXIC_CONTENT)

        payload = PDF.rejection_payload(verdict)

        assert payload == {"success": False, "error": "Toxic content detected and file deleted"}

    def test_unlisted_reason_falls_back_to_default_message(self) -> None:
        verdict = rejection(LOCATION, MimeCategory.UNSUPPORTED, ReasonCode.UNSUPPORTED_TYPE)

        assert MULTIPLE.rejection_payload(verdict) == {"error": "Unsupported file type"}


class TestSuccessPayload:
    def test_video_returns_url_list(self) -> None:
        urls = ["https://cdn/a.mp4", "https://cdn/b.mp4"]
        assert VIDEO.success_payload(urls) == {
            "message": "Media uploaded and passed moderation successfully",
            "data": urls,
        }
