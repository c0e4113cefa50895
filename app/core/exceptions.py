# app/core/exceptions.py

from fastapi import HTTPException, status

class ValidationException(HTTPException):
    def __init__(self, detail: str = "Invalid request data"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

class NotFoundException(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

class InternalErrorException(HTTPException):
    """
    Error genérico 500. El mensaje nunca expone la causa real;
    el detalle queda solo en los logs.
    """
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
