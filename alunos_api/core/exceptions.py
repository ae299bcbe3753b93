from typing import Optional
from fastapi import status


class BaseAPIException(Exception):
    """
    Parent class for every custom error raised by the service.
    The message is what the client sees, so it must never carry internals.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(self.message)


class BadRequestException(BaseAPIException):
    """400: the request could not be read (e.g. malformed JSON body)."""
    def __init__(self, message: str = "Requisição inválida"):
        super().__init__(
            message=message,
            code="BAD_REQUEST",
            status_code=status.HTTP_400_BAD_REQUEST
        )


class NotFoundException(BaseAPIException):
    """404: no aluno matched the given id."""
    def __init__(self, message: str = "Aluno não encontrado."):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND
        )


class StoreError(BaseAPIException):
    """
    500: the database rejected the statement or could not be reached.

    ``detail`` keeps the driver's description for the server log; the
    public message stays generic.
    """
    def __init__(self, detail: str = "", operation: Optional[str] = None):
        self.detail = detail
        self.operation = operation
        super().__init__(
            message="Erro interno do servidor",
            code="STORE_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
