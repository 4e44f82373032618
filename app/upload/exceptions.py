class UploadError(Exception):
    """Base exception for client-side upload errors."""


class MissingFileError(UploadError):
    """Raised when a request carries no file to upload."""


class InvalidUploadError(UploadError):
    """Raised when the request body cannot be decoded as a multipart form."""
