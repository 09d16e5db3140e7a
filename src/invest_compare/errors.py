from __future__ import annotations

from typing import Optional


class InvalidInputError(ValueError):
    """Raised when an investment input record falls outside its documented domain."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
