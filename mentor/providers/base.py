"""Base interface for all AI provider backends."""

import enum
from abc import ABC, abstractmethod
from typing import Any

from ..constants import TRANSIENT_STATUS_CODES


class ErrorKind(str, enum.Enum):
    transient = "transient"  # model unavailable; try the next one
    fatal = "fatal"  # stop the chain


class ProviderError(Exception):
    """A classified failure from a single provider call."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        status_code: int | None = None,
        model: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.model = model

    @property
    def transient(self) -> bool:
        return self.kind is ErrorKind.transient

    def __repr__(self) -> str:
        return (
            f"ProviderError({self.message!r}, kind={self.kind.value}, "
            f"status_code={self.status_code}, model={self.model!r})"
        )


def classify_status(status_code: int) -> ErrorKind:
    """Map an upstream HTTP status to an error kind."""
    if status_code in TRANSIENT_STATUS_CODES:
        return ErrorKind.transient
    return ErrorKind.fatal


class ProviderBackend(ABC):
    """Base class for all provider backends.

    ``generate`` returns the provider's raw response payload; pulling the
    text out of it is the chain's job.  Every failure must surface as a
    ProviderError.
    """

    requires_credential: bool = True

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def generate(self, model: str, prompt: str, credential: str | None) -> Any:
        pass

    def check_reachable(self) -> bool | None:
        """Return whether the provider answers, or None when it cannot be checked without a key."""
        return None
