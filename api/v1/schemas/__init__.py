"""Re-export individual schema modules for easy imports."""

from .meal import ParseRequest, ServingsUpdate, SuggestionRequest
from .support import SupportOut, SupportRequest

__all__ = [
    "ParseRequest",
    "ServingsUpdate",
    "SuggestionRequest",
    "SupportOut",
    "SupportRequest",
]
