"""Unit tests for strict language tag validation."""

from __future__ import annotations

import pytest

from poem_validator.exceptions import LanguageTagError
from poem_validator.language import (
    is_language_code,
    is_script_code,
    is_valid_language_tag,
    validate_language_codes,
)


@pytest.mark.parametrize("code", ["eng", "deu", "srp", "zho", "grc"])
def test_known_language_codes(code: str) -> None:
    assert is_language_code(code)


@pytest.mark.parametrize("code", ["", "xx", "en", "e1g", "english"])
def test_unknown_language_codes(code: str) -> None:
    assert not is_language_code(code)


@pytest.mark.parametrize("code", ["Latn", "Cyrl", "Hans", "Grek"])
def test_known_script_codes(code: str) -> None:
    assert is_script_code(code)


@pytest.mark.parametrize("code", ["", "Lat", "Qwer", "Latin"])
def test_unknown_script_codes(code: str) -> None:
    assert not is_script_code(code)


@pytest.mark.parametrize("tag", ["eng", "eng-Latn", "srp-Cyrl", "zho-Hans"])
def test_valid_tags(tag: str) -> None:
    assert is_valid_language_tag(tag)


@pytest.mark.parametrize("tag", ["xx", "xx-Latn", "e1g-Cyrl", "eng-Qwer", "eng-", "eng_Latn", ""])
def test_invalid_tags(tag: str) -> None:
    assert not is_valid_language_tag(tag)


def test_subtags_after_script_are_ignored() -> None:
    assert is_valid_language_tag("eng-Latn-US")
    assert is_valid_language_tag("eng-Latn-not-checked-at-all")


def test_unknown_base_rejected_regardless_of_script() -> None:
    assert not is_valid_language_tag("xx-Latn")
    assert not is_valid_language_tag("xx-Qwer")


def test_valid_document_passes() -> None:
    validate_language_codes(
        {
            "original": {"language": "eng", "text": "..."},
            "serbian": {"language": "srp-Cyrl", "text": "..."},
        }
    )


def test_missing_language_names_the_version() -> None:
    document = {
        "v1": {"language": "eng", "text": "..."},
        "v2": {"text": "..."},
    }

    with pytest.raises(LanguageTagError, match="Missing required language property in version 'v2'") as exc_info:
        validate_language_codes(document)

    assert exc_info.value.version_key == "v2"
    assert exc_info.value.yaml_path == "/v2"


def test_non_string_language_is_rejected() -> None:
    with pytest.raises(LanguageTagError, match="Language property must be a string in version 'v1'") as exc_info:
        validate_language_codes({"v1": {"language": 639, "text": "..."}})

    assert exc_info.value.yaml_path == "/v1/language"


def test_null_language_is_not_a_string() -> None:
    with pytest.raises(LanguageTagError, match="must be a string"):
        validate_language_codes({"v1": {"language": None, "text": "..."}})


def test_invalid_tag_names_tag_and_version() -> None:
    document = {
        "v1": {"language": "eng", "text": "..."},
        "v2": {"language": "xx-Latn", "text": "..."},
    }

    with pytest.raises(LanguageTagError) as exc_info:
        validate_language_codes(document)

    assert str(exc_info.value) == "Invalid language tag 'xx-Latn' in version 'v2'"
    assert exc_info.value.version_key == "v2"


def test_first_failing_version_wins() -> None:
    document = {
        "a": {"language": "eng", "text": "..."},
        "b": {"language": "zz-Latn", "text": "..."},
        "c": {"text": "..."},
    }

    with pytest.raises(LanguageTagError, match="version 'b'"):
        validate_language_codes(document)


def test_non_mapping_entry_counts_as_missing_language() -> None:
    with pytest.raises(LanguageTagError, match="Missing required language property in version 'v1'"):
        validate_language_codes({"v1": "just text"})


@pytest.mark.parametrize("document", [None, [], ["eng"], "eng", 42])
def test_non_mapping_document_is_skipped(document) -> None:
    validate_language_codes(document)


@pytest.mark.parametrize("tag", ["ENG", "ENG-latn", "eng-LATN", "Srp-Cyrl"])
def test_code_case_is_left_to_the_tables(tag: str) -> None:
    assert is_valid_language_tag(tag)
