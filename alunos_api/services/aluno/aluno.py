import logging
import re
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert, select, update

from alunos_api.core.database import Database
from alunos_api.models.aluno import alunos_table
from alunos_api.schemas.aluno import AlunoPayload

logger = logging.getLogger(__name__)

# INTEGER column range
MIN_KEY = -2**31
MAX_KEY = 2**31 - 1
KEY_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


def _key_clause(aluno_id: Any):
    """
    WHERE clause for an id taken verbatim from the URL.

    An id that is not an integer still produces a statement, one that can
    match no row, so the store reports zero affected rows.
    """
    if aluno_id is None or not KEY_PATTERN.fullmatch(str(aluno_id)):
        return alunos_table.c.id.is_(None)
    key = int(str(aluno_id))
    if not MIN_KEY <= key <= MAX_KEY:
        return alunos_table.c.id.is_(None)
    return alunos_table.c.id == key


async def list_alunos(db: Database) -> List[Dict[str, Any]]:
    """Every aluno in store order."""
    result = await db.execute(select(alunos_table), operation="buscar alunos")
    logger.debug("Listed %d alunos", len(result.rows))
    return result.rows


async def create_aluno(db: Database, aluno: AlunoPayload) -> Dict[str, Any]:
    """Insert one aluno and return the stored row, id included."""
    statement = (
        insert(alunos_table)
        .values(**aluno.to_columns())
        .returning(*alunos_table.c)
    )
    result = await db.execute(statement, operation="criar aluno")
    created = result.rows[0]
    logger.info("Aluno %s criado", created["id"])
    return created


async def update_aluno(db: Database, aluno_id: Any, aluno: AlunoPayload) -> Optional[Dict[str, Any]]:
    """
    Rewrite all five columns of one aluno.

    Fields missing from ``aluno`` are written as NULL. Returns the updated row,
    or None when no aluno has this id.
    """
    statement = (
        update(alunos_table)
        .where(_key_clause(aluno_id))
        .values(**aluno.to_columns())
        .returning(*alunos_table.c)
    )
    result = await db.execute(statement, operation="editar aluno")
    if not result.rows:
        logger.info("Aluno %s não encontrado para edição", aluno_id)
        return None
    logger.info("Aluno %s editado", aluno_id)
    return result.rows[0]


async def delete_aluno(db: Database, aluno_id: Any) -> bool:
    """Remove one aluno; False when no row had this id."""
    statement = delete(alunos_table).where(_key_clause(aluno_id))
    result = await db.execute(statement, operation="deletar aluno")
    deleted = result.row_count > 0
    logger.info("Aluno %s %s", aluno_id, "deletado" if deleted else "não encontrado para remoção")
    return deleted
