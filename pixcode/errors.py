from __future__ import annotations


class ValidationError(ValueError):
    """Raised when inputs cannot produce a well-formed BR Code payload.

    ``code`` is a stable machine-readable identifier (e.g. ``"empty_key"``);
    the message is meant for display.
    """

    def __init__(self, message: str, code: str = "invalid") -> None:
        super().__init__(message)
        self.code = code
        self.message = message
