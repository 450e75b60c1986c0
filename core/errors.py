from __future__ import annotations
from enum import Enum


class ErrorKind(str, Enum):
    API = "API"
    NETWORK = "NETWORK"
    PARSING = "PARSING"


_MESSAGES = {
    ErrorKind.API: "Error connecting to the meal suggestion service. Please try again.",
    ErrorKind.NETWORK: "Network error. Please check your internet connection.",
    ErrorKind.PARSING: "Error processing the meal suggestion. Please try again.",
}

MISSING_KEY_MESSAGE = "API key is not configured. Please add your API key to the .env file."


class SuggestionError(Exception):
    """Failure fetching a suggestion, classified for display to the user."""

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        self.kind = kind
        self.message = message or _MESSAGES[kind]
        super().__init__(self.message)
