from dataclasses import dataclass, field

from app.moderation.models import Accepted, Rejected


@dataclass(frozen=True)
class UploadedFile:
    """One decoded file from an upload request, held only while in flight."""

    original_name: str
    mime_type: str
    content: bytes = field(repr=False)
    size_bytes: int = 0

    @classmethod
    def from_bytes(cls, original_name: str, mime_type: str, content: bytes) -> "UploadedFile":
        return cls(
            original_name=original_name,
            mime_type=mime_type,
            content=content,
            size_bytes=len(content),
        )


@dataclass
class BatchOutcome:
    """Result of a multi-file upload: either all accepted or one rejection."""

    accepted: list[Accepted] = field(default_factory=list)
    rejection: Rejected | None = None

    @property
    def ok(self) -> bool:
        return self.rejection is None

    @property
    def urls(self) -> list[str]:
        return [verdict.public_url for verdict in self.accepted]
