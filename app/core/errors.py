from typing import Optional

from fastapi import HTTPException


class QuizActionError(HTTPException):
    """Typed failure raised by the quiz services.

    Subclasses map one error kind to one HTTP status, so a service can raise
    them directly and the route layer needs no translation.
    """

    status_code = 500
    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, headers: Optional[dict] = None):
        super().__init__(status_code=self.status_code, detail=message, headers=headers)
        self.message = message


class Unauthorized(QuizActionError):
    status_code = 401
    code = "UNAUTHORIZED"

    def __init__(self, message: str = "You must be signed in to perform this action."):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class NotFound(QuizActionError):
    status_code = 404
    code = "NOT_FOUND"


class Forbidden(QuizActionError):
    status_code = 403
    code = "FORBIDDEN"


class BadRequest(QuizActionError):
    status_code = 400
    code = "BAD_REQUEST"
