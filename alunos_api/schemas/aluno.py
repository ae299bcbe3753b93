from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


CREATE_EXAMPLE = {
    "nome": "João",
    "nota_primeiro_semestre": 8.5,
    "nota_segundo_semestre": 9.0,
    "nome_professor": "Maria",
    "numero_sala": 101,
}

UPDATE_EXAMPLE = {
    "nome": "Maria",
    "nota_primeiro_semestre": 9.0,
    "nota_segundo_semestre": 9.5,
    "nome_professor": "Ana",
    "numero_sala": 102,
}


class AlunoPayload(BaseModel):
    """
    Request body for create and update.

    Every field is optional and unknown keys are dropped. Values are coerced
    leniently (form posts send ``"8.5"``); a value that does not coerce is
    kept as sent so the database is the one to reject it.
    """
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"examples": [CREATE_EXAMPLE, UPDATE_EXAMPLE]},
    )

    nome: Optional[str] = None
    nota_primeiro_semestre: Optional[float] = None
    nota_segundo_semestre: Optional[float] = None
    nome_professor: Optional[str] = None
    numero_sala: Optional[int] = None

    @field_validator("*", mode="wrap")
    @classmethod
    def keep_raw_on_failure(cls, value, handler):
        try:
            return handler(value)
        except ValidationError:
            return value

    def to_columns(self) -> Dict[str, Any]:
        """All five columns; fields that were not sent become None."""
        return {name: getattr(self, name) for name in type(self).model_fields}


class Aluno(BaseModel):
    """A stored aluno as returned to clients."""
    id: int
    nome: Optional[str] = None
    nota_primeiro_semestre: Optional[float] = None
    nota_segundo_semestre: Optional[float] = None
    nome_professor: Optional[str] = None
    numero_sala: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
