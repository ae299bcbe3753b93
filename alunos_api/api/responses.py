import math
from typing import Any, Dict, List

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse


def _json_safe(row: Dict[str, Any]) -> Dict[str, Any]:
    # NaN and +/-Infinity have no JSON spelling; they go out as null
    return {
        key: None if isinstance(value, float) and not math.isfinite(value) else value
        for key, value in row.items()
    }


def list_response(rows: List[Dict[str, Any]]) -> JSONResponse:
    """200 with the rows as a JSON array (empty when there are none)."""
    return JSONResponse(
        jsonable_encoder([_json_safe(row) for row in rows]),
        status_code=status.HTTP_200_OK,
    )


def created_response(row: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(jsonable_encoder(_json_safe(row)), status_code=status.HTTP_201_CREATED)


def updated_response(row: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(jsonable_encoder(_json_safe(row)), status_code=status.HTTP_200_OK)


def deleted_response(aluno_id: str) -> PlainTextResponse:
    return PlainTextResponse(
        f"Aluno com id {aluno_id} foi deletado com sucesso.",
        status_code=status.HTTP_200_OK,
    )


def delete_not_found_response(aluno_id: str) -> PlainTextResponse:
    return PlainTextResponse(
        f"Aluno com id {aluno_id} não encontrado.",
        status_code=status.HTTP_404_NOT_FOUND,
    )
