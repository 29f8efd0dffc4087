"""API exception module.

Every failure leaves the API as a static, human-readable message rendered
as ``{"error": <message>}`` by the handler registered in ``salesboard.app``.
"""
from fastapi import HTTPException, status


class APIException(HTTPException):
    """Base API exception class."""

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
    ):
        super().__init__(status_code=status_code, detail=detail)


class StoreQueryError(APIException):
    """A read query against the transaction store failed."""

    def __init__(self, detail: str = "Failed to fetch transactions"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class InitializationError(APIException):
    """Fetching or loading the seed dataset failed."""

    def __init__(self, detail: str = "Failed to initialize database"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
