import json
from typing import Any, Dict

from fastapi import Request

from alunos_api.core.database import Database
from alunos_api.core.exceptions import BadRequestException
from alunos_api.schemas.aluno import AlunoPayload

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_db(request: Request) -> Database:
    """
    Dependency returning the pool handle created at startup.
    Each repository call borrows and returns its own connection.
    """
    return request.app.state.db


async def _read_body(request: Request) -> Dict[str, Any]:
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)

    if not await request.body():
        return {}
    try:
        data = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise BadRequestException("Corpo da requisição inválido")
    return data if isinstance(data, dict) else {}


async def get_payload(request: Request) -> AlunoPayload:
    """
    Dependency parsing a JSON or form body into an AlunoPayload.
    Unknown keys are dropped and missing keys stay None.
    """
    return AlunoPayload.model_validate(await _read_body(request))
