import asyncio
import logging

from alunos_api.core.config import settings
from alunos_api.core.database import Database
from alunos_api.core.exceptions import StoreError
from alunos_api.schemas.aluno import AlunoPayload
from alunos_api.services.aluno import aluno as crud_aluno

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_ALUNOS = [
    AlunoPayload(nome="João", nota_primeiro_semestre=8.5, nota_segundo_semestre=9.0,
                 nome_professor="Maria", numero_sala=101),
    AlunoPayload(nome="Maria", nota_primeiro_semestre=9.0, nota_segundo_semestre=9.5,
                 nome_professor="Ana", numero_sala=102),
    AlunoPayload(nome="Pedro", nota_primeiro_semestre=7.0, nota_segundo_semestre=6.5,
                 nome_professor="Carlos", numero_sala=101),
]


async def seed_data():
    """
    Insert a few sample alunos when the table is empty.
    """
    db = Database(settings)
    try:
        await db.create_tables()

        # Check if data already exists to avoid duplication
        if await crud_aluno.list_alunos(db):
            logger.info("Database already contains data. Skipping seed.")
            return

        logger.info("Seeding data...")
        for aluno in SAMPLE_ALUNOS:
            await crud_aluno.create_aluno(db, aluno)
        logger.info("Data seeded successfully!")

    except StoreError as e:
        logger.error(f"Error seeding data: {e.detail}")
    finally:
        await db.dispose() # Always close the pool


if __name__ == "__main__":
    asyncio.run(seed_data())
