from typing import List, Optional, Tuple


class SpeechLocalesError(Exception):
    """Base exception for speech locale table generation"""
    pass


class SpeechNetworkError(SpeechLocalesError):
    """Raised when network-related errors occur (timeout, connection issues)"""
    pass


class SpeechApiError(SpeechLocalesError):
    """Raised when the service answers with a non-success status.

    Attributes:
        status_code: HTTP status code of the response.
        code: Error code from the response body, if any.
        details: ``(reason, message)`` pairs from the response body.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[List[Tuple[str, str]]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details or []

    @classmethod
    def from_response(cls, response) -> "SpeechApiError":
        """Build the error from a ``requests`` response.

        The service reports errors as
        ``{"error": {"code", "message", "errors": [{"reason", "message"}]}}``;
        any other body falls back to the HTTP reason phrase.
        """
        status_code = response.status_code
        message = f"HTTP {status_code} {response.reason or ''}".strip()
        code = None
        details = []
        try:
            body = response.json()
        except ValueError:
            body = None

        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            code = error.get("code")
            message = error.get("message") or message
            for item in error.get("errors") or []:
                if isinstance(item, dict):
                    details.append(
                        (item.get("reason") or "", item.get("message") or "")
                    )
        return cls(message, status_code=status_code, code=code,
                   details=details)
