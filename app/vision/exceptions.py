class VisionError(Exception):
    """Raised when a vision moderation provider call fails."""
