"""Per-route upload behaviour: form field, accepted types, messages and payload shape."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from app.moderation.models import MimeCategory, ReasonCode, Rejected
from app.vision.models import ModerationLabel

UrlRenderer = Callable[[list[str]], dict[str, Any]]


@dataclass(frozen=True)
class UploadEndpoint:
    form_field: str
    missing_message: str
    success_message: str
    render_urls: UrlRenderer
    batch: bool = False
    accepted: frozenset[MimeCategory] | None = None
    flag_failure: bool = False
    messages: dict[tuple[ReasonCode, MimeCategory], str] = field(default_factory=dict)

    def success_payload(self, urls: list[str]) -> dict[str, Any]:
        return {"message": self.success_message, **self.render_urls(urls)}

    def rejection_payload(self, verdict: Rejected) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.flag_failure:
            payload["success"] = False
        payload["error"] = self.messages.get((verdict.reason, verdict.category), verdict.message)
        if verdict.violations:
            payload["violations"] = [serialize_label(label) for label in verdict.violations]
        if verdict.details is not None:
            payload["details"] = verdict.details
        return payload


def serialize_label(label: ModerationLabel) -> dict[str, Any]:
    data: dict[str, Any] = {
        "Name": label.name,
        "Confidence": label.confidence,
        "ParentName": label.parent_name,
    }
    if label.timestamp_ms is not None:
        data["Timestamp"] = label.timestamp_ms
    return data


IMAGE = UploadEndpoint(
    form_field="image",
    missing_message="Please provide an image",
    success_message="Image uploaded and passed moderation successfully",
    render_urls=lambda urls: {"image": urls[0]},
    accepted=frozenset({MimeCategory.IMAGE}),
)

PDF = UploadEndpoint(
    form_field="file",
    missing_message="Please provide a PDF file",
    success_message="PDF uploaded and passed moderation successfully",
    render_urls=lambda urls: {"pdf": urls[0]},
    accepted=frozenset({MimeCategory.PDF}),
    flag_failure=True,
)

MULTIPLE = UploadEndpoint(
    form_field="file",
    missing_message="Please provide a file to upload",
    success_message="File uploaded and passed moderation successfully",
    render_urls=lambda urls: {"fileUrl": urls[0], "fileUrls": urls},
    batch=True,
    messages={
        (ReasonCode.CONTENT_VIOLATION, MimeCategory.IMAGE): "Content violation detected in image",
        (ReasonCode.CONTENT_VIOLATION, MimeCategory.VIDEO): "Content violation detected in video",
        (ReasonCode.NEGATIVE_SENTIMENT, MimeCategory.IMAGE): (
            "Negative sentiment detected in image content"
        ),
        (ReasonCode.TOXIC_CONTENT, MimeCategory.PDF): (
            "Toxic content detected in PDF and file deleted"
        ),
    },
)

VIDEO = UploadEndpoint(
    form_field="media",
    missing_message="Please provide the media to upload",
    success_message="Media uploaded and passed moderation successfully",
    render_urls=lambda urls: {"data": urls},
    batch=True,
    accepted=frozenset({MimeCategory.VIDEO}),
)

UNIVERSAL = UploadEndpoint(
    form_field="file",
    missing_message="Please provide a file",
    success_message="File uploaded and passed moderation successfully",
    render_urls=lambda urls: {"fileUrl": urls[0]},
    flag_failure=True,
)
