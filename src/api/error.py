from typing import Optional

from fastapi import status
from libs.result import Error


class ApiError(Exception):
    """Business error raised from a route, rendered as {"error": {...}}"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, base_error: Error, status_code: Optional[int] = None):
        self.base_error = base_error
        if status_code is not None:
            self.status_code = status_code
        super().__init__(base_error.message)

    def body(self) -> dict:
        error_dict = {"code": self.base_error.code, "message": self.base_error.message}
        if self.base_error.details is not None:
            error_dict["details"] = self.base_error.details
        return {"error": error_dict}


class ClientError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class ServerError(ApiError):
    def body(self) -> dict:
        # Internal details stay in the logs
        return {"error": {"code": self.base_error.code, "message": "Internal server error"}}
