# api/v1/errors.py
from __future__ import annotations

from fastapi import HTTPException, status

from core.errors import ErrorKind, SuggestionError

_STATUS = {
    ErrorKind.API: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.NETWORK: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.PARSING: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def http_error(exc: SuggestionError) -> HTTPException:
    """SuggestionError ➜ HTTPException carrying `{kind, message}`."""
    return HTTPException(
        status_code=_STATUS[exc.kind],
        detail={"kind": exc.kind.value, "message": exc.message},
    )
