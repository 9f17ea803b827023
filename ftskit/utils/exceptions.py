from fastapi import HTTPException, status
from typing import Optional


class APIException(HTTPException):
    """API exception carrying a machine-readable code."""

    def __init__(self, status_code: int, code: str, message: Optional[str] = None):
        detail = {"code": code, "message": message or "An error occurred"}
        super().__init__(status_code=status_code, detail=detail)


class BadRequestError(APIException):
    """400 Bad Request Error."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST, code=code, message=message
        )
