from typing import Optional


class UpstreamError(Exception):
    """Third-party API answered with a non-success status or could not be reached."""

    def __init__(self, provider: str, status_code: int, message: Optional[str] = None):
        self.provider = provider
        self.status_code = status_code
        super().__init__(message or f"{provider} API error: {status_code}")
