from typing import List

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from alunos_api.api.endpoints import alunos
from alunos_api.schemas.aluno import CREATE_EXAMPLE, UPDATE_EXAMPLE, Aluno, AlunoPayload

# (method, path, endpoint, success status, response model, body example, summary)
ROUTES = [
    ("GET", "/alunos", alunos.get_alunos, status.HTTP_200_OK, List[Aluno], None,
     "Obtém a lista de todos os alunos cadastrados."),
    ("POST", "/alunos/criar", alunos.create_aluno, status.HTTP_201_CREATED, Aluno, CREATE_EXAMPLE,
     "Cria um novo aluno."),
    ("PUT", "/alunos/editar/{id}", alunos.update_aluno, status.HTTP_200_OK, Aluno, UPDATE_EXAMPLE,
     "Edita um aluno existente."),
    ("DELETE", "/alunos/deletar/{id}", alunos.delete_aluno, status.HTTP_200_OK, None, None,
     "Deleta um aluno existente."),
]


def _request_body_doc(example: dict) -> dict:
    # The body is parsed by get_payload, so describe it for the docs by hand
    schema = AlunoPayload.model_json_schema()
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": schema, "example": example},
                "application/x-www-form-urlencoded": {"schema": schema, "example": example},
            },
        }
    }


def build_router() -> APIRouter:
    router = APIRouter(tags=["Alunos"])
    for method, path, endpoint, status_code, response_model, body_example, summary in ROUTES:
        route_kwargs = {
            "methods": [method],
            "status_code": status_code,
            "summary": summary,
        }
        if response_model is None:
            route_kwargs["response_class"] = PlainTextResponse
        else:
            route_kwargs["response_model"] = response_model
        if body_example is not None:
            route_kwargs["openapi_extra"] = _request_body_doc(body_example)
        router.add_api_route(path, endpoint, **route_kwargs)
    return router


api_router = build_router()
