from fastapi import HTTPException, status
from typing import Optional


class APIException(HTTPException):
    """Error rendered as {"error": {"code", "message"[, "field"]}}."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: Optional[str] = None,
        field: Optional[str] = None,
    ):
        detail = {"code": code, "message": message or "An error occurred"}
        if field is not None:
            detail["field"] = field
        super().__init__(status_code=status_code, detail=detail)


class BadRequestError(APIException):
    """400: the request asks for more than the service allows."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST, code=code, message=message
        )


class InvalidSampleError(APIException):
    """422: numeric input is well-typed but cannot be analyzed as a sample
    (ragged or featureless rows, non-finite numbers, unpaired lengths)."""

    def __init__(self, code: str, field: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            code=code,
            message=message,
            field=field,
        )


class ServerError(APIException):
    """500 Internal Server Error."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code=code,
            message=message,
        )
