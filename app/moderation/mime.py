from app.moderation.models import MimeCategory


def classify_mime(mime_type: str | None) -> MimeCategory:
    """Map a MIME type onto the moderation category that handles it.

    Parameters such as `; charset=...` and letter case are ignored.
    """
    if not mime_type:
        return MimeCategory.UNSUPPORTED
    essence = mime_type.split(";", 1)[0].strip().lower()
    if essence.startswith("image/"):
        return MimeCategory.IMAGE
    if essence.startswith("video/"):
        return MimeCategory.VIDEO
    if essence == "application/pdf":
        return MimeCategory.PDF
    return MimeCategory.UNSUPPORTED
