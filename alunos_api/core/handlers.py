# alunos_api/core/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from alunos_api.core.exceptions import BaseAPIException, StoreError
from alunos_api.core.logging import logger

INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"


# 1. Database failures: log the detail, answer with the generic text
async def store_error_handler(request: Request, exc: StoreError):
    logger.error(
        "Erro ao %s: %s",
        exc.operation or f"{request.method} {request.url.path}",
        exc.detail,
        exc_info=exc.__cause__ or exc,
    )
    return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=exc.status_code)


# 2. Custom logic errors (raised by the endpoints)
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    return PlainTextResponse(exc.message, status_code=exc.status_code)


# 3. Standard HTTP errors (unknown URL, wrong method, ...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


# 4. Anything else: never leak the exception to the client
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)
    return PlainTextResponse(
        INTERNAL_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    # Starlette picks the handler of the most specific class in the MRO
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
