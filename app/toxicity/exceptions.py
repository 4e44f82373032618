class ToxicityError(Exception):
    """Raised when toxicity classification fails."""


class ToxicityNetworkError(ToxicityError):
    """Raised when the classifier provider call fails due to network/infrastructure issues."""
