from sqlalchemy import Column, Float, Integer, String
from alunos_api.core.database import Base


class Aluno(Base):
    __tablename__ = "alunos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String, nullable=False)
    nota_primeiro_semestre = Column(Float, nullable=True)
    nota_segundo_semestre = Column(Float, nullable=True)
    nome_professor = Column(String, nullable=True)
    numero_sala = Column(Integer, nullable=True)

    def __repr__(self):
        return f"<Aluno(id={self.id}, nome='{self.nome}', sala={self.numero_sala})>"


alunos_table = Aluno.__table__
