"""Errors raised while scoring a simulation through a text-generation provider."""

from typing import Optional

PREVIEW_CHARS = 100

_RATE_LIMIT_MARKERS = ("429", "quota", "too many requests")


class EvaluationError(Exception):
    """Raised when evaluation fails."""

    pass


class ValidationError(EvaluationError):
    """The provider returned JSON that breaks the score or shape contract."""

    pass


class ParseError(EvaluationError):
    """The provider returned text that is not JSON once fences are removed."""

    def __init__(self, message: str, text: str):
        self.preview = preview_text(text)
        super().__init__(f"{message}: {self.preview}")


class CollaboratorUnavailable(EvaluationError):
    """The call to the text-generation provider itself failed."""

    def __init__(self, message: str, provider: Optional[str] = None):
        self.provider = provider
        super().__init__(message)

    @property
    def is_rate_limited(self) -> bool:
        message = str(self).lower()
        if self.__cause__ is not None:
            message += " " + str(self.__cause__).lower()
        return any(marker in message for marker in _RATE_LIMIT_MARKERS)


def preview_text(text: str, limit: int = PREVIEW_CHARS) -> str:
    """Truncate text for error messages and logs."""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."
