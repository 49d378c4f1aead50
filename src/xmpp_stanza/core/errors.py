"""Stanza domain exceptions."""

from __future__ import annotations


class StanzaError(Exception):
    """Base for stanza domain errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, object] | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}
        self.original_error = original_error


class StanzaConfigurationError(StanzaError):
    """Config validation or load failure."""


class StanzaParseError(StanzaError):
    """XML text could not be parsed into a node."""


class UnknownStanzaError(StanzaError):
    """Element could not be mapped to a packet constructor."""


class XMLBuildError(StanzaError):
    """Builder misuse, or the builder has no document to produce."""
