from __future__ import annotations


class MalformedDocumentError(ValueError):
    """Raised when document text cannot be parsed as a well-formed markup tree."""

    def __init__(self, message: str, position: tuple[int, int] | None = None) -> None:
        super().__init__(message)
        self.position = position
