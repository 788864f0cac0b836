"""Tests for record clamping, label sanitization and JSON mapping."""

from __future__ import annotations

import pytest

from prr.model import AssessmentRecord
from prr.record import (
    clamp_field,
    clamp_record,
    is_clamped,
    parse_assignment,
    record_from_dict,
    record_to_dict,
    sanitize_finding_ref,
)


def test_default_record_is_clamped() -> None:
    assert is_clamped(AssessmentRecord())


@pytest.mark.parametrize(
    ("name", "value", "expected"),
    [
        ("scope", 0, 1),
        ("scope", 4, 3),
        ("ease", -2, 1),
        ("ease", 6, 5),
        ("confidentiality", 9, 3),
        ("avg", 3, 2),
        ("privacy_budget", 5, 4),
        ("override_overall", 6, 5),
        ("override_likelihood", -1, 0),
    ],
)
def test_clamp_field(name: str, value: int, expected: int) -> None:
    assert clamp_field(name, value) == expected


def test_clamp_record_coerces_flags_and_label() -> None:
    record = AssessmentRecord(reid=1, singling=0, finding_ref="  id#42  ")  # type: ignore[arg-type]

    clamped = clamp_record(record)

    assert clamped.reid is True
    assert clamped.singling is False
    assert clamped.finding_ref == "id42"


class TestSanitizeFindingRef:
    def test_keeps_allowed_charset(self) -> None:
        assert sanitize_finding_ref("A-z_0 9./x") == "A-z_0 9./x"

    def test_drops_disallowed_characters(self) -> None:
        assert sanitize_finding_ref("<script>alert(1)</script>") == "scriptalert1/script"

    def test_truncates_to_forty_characters(self) -> None:
        assert sanitize_finding_ref("x" * 60) == "x" * 40

    @pytest.mark.parametrize("raw", ["", None, "   ", "@@@"])
    def test_empty_results(self, raw: str | None) -> None:
        assert sanitize_finding_ref(raw) == ""


class TestJsonMapping:
    def test_to_dict_uses_persisted_keys(self) -> None:
        payload = record_to_dict(AssessmentRecord(data_type=2, privacy_budget=3, finding_ref="R-1"))

        assert payload["dataType"] == 2
        assert payload["privacyBudget"] == 3
        assert payload["findingRef"] == "R-1"
        assert payload["c"] == 0
        assert isinstance(payload["scope"], int)

    def test_round_trip(self) -> None:
        record = AssessmentRecord(scope=3, data_type=3, ease=4, reid=True, override_overall=2, finding_ref="F-9")

        assert record_from_dict(record_to_dict(record)) == record

    def test_from_dict_accepts_attribute_names_and_clamps(self) -> None:
        record = record_from_dict({"ease": 12, "data_type": 3, "linkage_internal_to_external": True})

        assert record.ease == 5
        assert record.data_type == 3
        assert record.linkage_internal_to_external is True

    def test_from_dict_ignores_unknown_keys(self) -> None:
        assert record_from_dict({"colour": "blue"}) == AssessmentRecord()

    @pytest.mark.parametrize(
        ("raw", "match"),
        [({"ease": "3"}, "ease"), ({"reid": 1}, "reid"), ({"scope": True}, "scope")],
        ids=["string_number", "int_flag", "bool_number"],
    )
    def test_from_dict_rejects_wrong_types(self, raw: dict[str, object], match: str) -> None:
        with pytest.raises(ValueError, match=match):
            record_from_dict(raw)


class TestParseAssignment:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("ease=4", ("ease", 4)),
            ("dataType=2", ("data_type", 2)),
            ("reid=true", ("reid", True)),
            ("singling=0", ("singling", False)),
            ("findingRef=ABC-1", ("finding_ref", "ABC-1")),
            (" c = 3 ", ("confidentiality", 3)),
        ],
    )
    def test_valid(self, text: str, expected: tuple[str, object]) -> None:
        assert parse_assignment(text) == expected

    @pytest.mark.parametrize(
        ("text", "match"),
        [
            ("ease", "field=value"),
            ("=3", "field=value"),
            ("ease=high", "integer"),
            ("reid=maybe", "boolean"),
            ("colour=3", "unknown"),
        ],
    )
    def test_invalid(self, text: str, match: str) -> None:
        with pytest.raises(ValueError, match=match):
            parse_assignment(text)
