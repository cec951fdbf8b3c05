class LrcSyncError(Exception):
    """Base exception for lrcsync."""


class FetchError(LrcSyncError):
    """Raised when a provider request fails."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} fetching {url}")


class ParseError(LrcSyncError):
    """Raised when a provider response cannot be decoded.

    ``field`` names the offending response key when a single field is to blame.
    """

    def __init__(self, url: str, reason: str, field: str | None = None):
        self.url = url
        self.reason = reason
        self.field = field
        where = f" (field {field!r})" if field else ""
        super().__init__(f"Parse error for {url}{where}: {reason}")


class InvalidFieldError(LrcSyncError, ValueError):
    """Raised when a lyrics payload field holds a value of the wrong type."""

    def __init__(self, field: str, expected: str, value: object):
        self.field = field
        self.expected = expected
        self.value = value
        super().__init__(f"expected {expected}, got {type(value).__name__} {value!r}")
