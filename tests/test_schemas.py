from alunos_api.schemas.aluno import AlunoPayload


def test_unknown_fields_are_dropped():
    payload = AlunoPayload.model_validate({"nome": "Ana", "id": 7, "turma": "B"})

    assert payload.to_columns() == {
        "nome": "Ana",
        "nota_primeiro_semestre": None,
        "nota_segundo_semestre": None,
        "nome_professor": None,
        "numero_sala": None,
    }


def test_form_strings_are_coerced():
    payload = AlunoPayload.model_validate({
        "nome": "Ana",
        "nota_primeiro_semestre": "8.5",
        "numero_sala": "101",
    })

    assert payload.nota_primeiro_semestre == 8.5
    assert payload.numero_sala == 101


def test_uncoercible_values_are_kept_as_sent():
    payload = AlunoPayload.model_validate({"nome": "Ana", "numero_sala": "sala A"})
    assert payload.numero_sala == "sala A"


def test_absent_fields_are_distinct_from_empty_values():
    payload = AlunoPayload.model_validate({"nome": "", "numero_sala": 0})

    assert payload.model_fields_set == {"nome", "numero_sala"}
    assert payload.nome == ""
    assert payload.numero_sala == 0
    assert payload.nome_professor is None


def test_schema_carries_examples():
    examples = AlunoPayload.model_json_schema()["examples"]
    assert [example["numero_sala"] for example in examples] == [101, 102]
