from fastapi import HTTPException, status


class Unauthorized(HTTPException):
    """Missing or unknown device credential."""
    def __init__(self, detail: str = "unauthorized"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class BadRequest(HTTPException):
    """Malformed input, duplicate device id, missing required fields."""
    def __init__(self, detail: str = "bad request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str = "not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class Internal(HTTPException):
    """Storage or rendering failure."""
    def __init__(self, detail: str = "internal error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
