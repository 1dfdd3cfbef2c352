"""Unit tests for schema validation of poem documents."""

from __future__ import annotations

from pathlib import Path

import pytest

from poem_validator.exceptions import SchemaDefinitionError, SchemaValidationError
from poem_validator.parsing import YamlParser
from poem_validator.schema import load_poem_schema, schema_loader
from poem_validator.validators import SchemaIssue, collect_schema_issues, validate_schema


def test_embedded_schema_is_a_draft7_object_schema() -> None:
    schema = load_poem_schema()

    assert schema["$schema"].startswith("http://json-schema.org/draft-07/")
    assert schema["type"] == "object"
    assert load_poem_schema() is schema


def test_valid_document_has_no_issues(data_dir: Path) -> None:
    document = YamlParser().load_document(data_dir / "sonnet.poem")

    assert collect_schema_issues(document) == []
    validate_schema(document)


def test_language_contents_are_not_checked_by_schema() -> None:
    document = {
        "v1": {"language": "not a real tag", "text": "..."},
        "v2": {"language": 7, "text": "..."},
        "v3": {"text": "..."},
    }

    assert collect_schema_issues(document) == []


def test_every_violation_is_reported(data_dir: Path) -> None:
    document = YamlParser().load_document(data_dir / "broken_schema.poem")

    issues = collect_schema_issues(document)

    assert [issue.yaml_path for issue in issues] == ["/v1", "/v2/title", "/v3"]
    assert issues[0].message == "'text' is a required property"
    assert "'rhyme' was unexpected" in issues[2].message


def test_issue_count_matches_independent_field_violations() -> None:
    document = {
        "a": {"title": "A"},
        "b": {"title": "B"},
        "c": {"title": "C"},
        "d": {"text": "fine"},
    }

    issues = collect_schema_issues(document)

    assert len(issues) == 3
    assert {issue.yaml_path for issue in issues} == {"/a", "/b", "/c"}


def test_non_mapping_document_is_a_root_issue() -> None:
    issues = collect_schema_issues(["not", "a", "mapping"])

    assert len(issues) == 1
    assert issues[0].yaml_path == ""
    assert str(issues[0]).startswith("(root): ")


def test_empty_document_is_rejected() -> None:
    assert collect_schema_issues(None)
    assert collect_schema_issues({})


def test_validate_schema_raises_with_all_issues(data_dir: Path) -> None:
    document = YamlParser().load_document(data_dir / "broken_schema.poem")

    with pytest.raises(SchemaValidationError) as exc_info:
        validate_schema(document)

    assert len(exc_info.value.issues) == 3
    lines = str(exc_info.value).splitlines()
    assert lines[0] == "Schema validation failed:"
    assert lines[1] == "  ✖ /v1: 'text' is a required property"
    assert len(lines) == 4


def test_results_are_identical_across_runs(data_dir: Path) -> None:
    document = YamlParser().load_document(data_dir / "broken_schema.poem")

    assert collect_schema_issues(document) == collect_schema_issues(document)


def test_invalid_schema_is_a_definition_error() -> None:
    with pytest.raises(SchemaDefinitionError, match="Invalid schema"):
        collect_schema_issues({"v1": {"text": "x"}}, schema={"type": "not-a-type"})


def test_unparseable_schema_file_is_a_definition_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    broken = tmp_path / "poem.schema.json"
    broken.write_text("{ not json", encoding="utf-8")
    monkeypatch.setattr(schema_loader, "POEM_SCHEMA_PATH", broken)

    with pytest.raises(SchemaDefinitionError, match="Invalid schema"):
        load_poem_schema()


def test_schema_issue_renders_location() -> None:
    assert str(SchemaIssue(message="boom", yaml_path="/v1/text")) == "/v1/text: boom"
