"""Translation of component results into HTTP errors."""

from fastapi import HTTPException, status

from core.result import Err, ErrorKind

_STATUS_BY_KIND = {
    ErrorKind.DUPLICATE_USERNAME: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.AUTHENTICATION_MISSING: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORAGE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def http_error(err: Err) -> HTTPException:
    """Build the HTTPException for a failed component result."""
    headers = None
    if _STATUS_BY_KIND[err.kind] == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return HTTPException(
        status_code=_STATUS_BY_KIND[err.kind], detail=err.message, headers=headers
    )


def unwrap(result):
    """Return the value of an Ok result or raise the matching HTTPException."""
    if isinstance(result, Err):
        raise http_error(result)
    return result.value
