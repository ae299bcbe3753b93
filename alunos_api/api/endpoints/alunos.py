from fastapi import Depends

from alunos_api.api import responses
from alunos_api.api.deps import get_db, get_payload
from alunos_api.core.database import Database
from alunos_api.core.exceptions import NotFoundException
from alunos_api.schemas.aluno import AlunoPayload
from alunos_api.services.aluno import aluno as crud_aluno


async def get_alunos(db: Database = Depends(get_db)):
    """
    Obtém a lista de todos os alunos cadastrados.
    """
    alunos = await crud_aluno.list_alunos(db)
    return responses.list_response(alunos)


async def create_aluno(
    aluno: AlunoPayload = Depends(get_payload),
    db: Database = Depends(get_db)
):
    """
    Cria um novo aluno.

    - **nome**: Nome do aluno (obrigatório no banco)
    - **nota_primeiro_semestre**, **nota_segundo_semestre**: Notas
    - **nome_professor**: Nome do professor
    - **numero_sala**: Número da sala
    """
    created = await crud_aluno.create_aluno(db, aluno)
    return responses.created_response(created)


async def update_aluno(
    id: str,
    aluno: AlunoPayload = Depends(get_payload),
    db: Database = Depends(get_db)
):
    """
    Edita um aluno existente.

    Todos os campos são regravados; campos ausentes ficam nulos.
    """
    updated = await crud_aluno.update_aluno(db, id, aluno)
    if updated is None:
        raise NotFoundException()
    return responses.updated_response(updated)


async def delete_aluno(id: str, db: Database = Depends(get_db)):
    """
    Deleta um aluno existente.
    """
    if await crud_aluno.delete_aluno(db, id):
        return responses.deleted_response(id)
    return responses.delete_not_found_response(id)
