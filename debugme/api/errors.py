from fastapi import HTTPException

from ..errors import (
    DebugMeError,
    InvalidArgument,
    NotFound,
    PreconditionViolation,
    TutorUnavailable,
)

_STATUS = [
    (InvalidArgument, 400),
    (NotFound, 404),
    (PreconditionViolation, 409),
    (TutorUnavailable, 503),
]


def to_http(exc: DebugMeError) -> HTTPException:
    for error_type, status_code in _STATUS:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))
