"""Tests for enum declarations."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from labelenum.declaration import Declaration, build_declaration
from labelenum.errors import MalformedEnum


class TestDeclaration:
    def test_basic(self):
        declaration = Declaration(
            name="Status",
            entries=(("SUCCESS", 0), ("ERROR", 1)),
            labels={0: "request success", 1: "request failure"},
        )
        assert declaration.names == ["SUCCESS", "ERROR"]
        assert declaration.values == [0, 1]
        assert len(declaration) == 2

    def test_values_are_not_coerced(self):
        declaration = build_declaration(
            "Mixed", [("A", "1"), ("B", True), ("C", 1.5), ("D", 2)], {}
        )
        assert declaration.values == ["1", True, 1.5, 2]
        assert type(declaration.values[1]) is bool
        assert type(declaration.values[3]) is int

    def test_frozen(self):
        declaration = build_declaration("Status", [("A", 1)], {1: "a"})
        with pytest.raises(ValidationError):
            declaration.name = "Other"

    def test_duplicate_values_allowed(self):
        declaration = build_declaration("Alias", [("YES", 1), ("OK", 1)], {1: "yes"})
        assert declaration.values == [1, 1]

    def test_empty_is_valid_declaration(self):
        assert len(build_declaration("Empty", [])) == 0

    def test_merged_value_types_are_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="labelenum.declaration"):
            build_declaration("Mixed", [("ONE", 1), ("YES", True)], {1: "one"})
        assert "Mixed" in caplog.text
        assert "1 and True" in caplog.text

    def test_same_type_duplicates_not_logged_as_merged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="labelenum.declaration"):
            build_declaration("Alias", [("YES", 1), ("OK", 1)], {1: "yes"})
        assert "share one" not in caplog.text


class TestBuildDeclarationErrors:
    def test_duplicate_name(self):
        with pytest.raises(MalformedEnum, match="more than once"):
            build_declaration("Dup", [("A", 1), ("A", 2)])

    def test_name_not_identifier(self):
        with pytest.raises(MalformedEnum, match="not an identifier"):
            build_declaration("Bad", [("NOT VALID", 1)])

    @pytest.mark.parametrize("value", [None, [1], {"a": 1}, object(), b"raw"])
    def test_non_primitive_value(self, value):
        with pytest.raises(MalformedEnum) as exc_info:
            build_declaration("Bad", [("A", value)])
        assert exc_info.value.enum_name == "Bad"
        assert exc_info.value.problems

    def test_non_string_label(self):
        with pytest.raises(MalformedEnum):
            build_declaration("Bad", [("A", 1)], {1: 100})

    def test_wraps_validation_error(self):
        with pytest.raises(MalformedEnum) as exc_info:
            build_declaration("Bad", [("A", None)])
        assert isinstance(exc_info.value.__cause__, ValidationError)


class TestFromTriples:
    def test_from_triples(self):
        declaration = Declaration.from_triples(
            "Status",
            [("SUCCESS", 0, "request success"), ("ERROR", 1, "request failure")],
        )
        assert declaration.entries == (("SUCCESS", 0), ("ERROR", 1))
        assert declaration.labels == {0: "request success", 1: "request failure"}

    def test_shared_value_keeps_last_label(self):
        declaration = Declaration.from_triples("Alias", [("YES", 1, "yes"), ("OK", 1, "okay")])
        assert declaration.labels == {1: "okay"}

    @pytest.mark.parametrize("triple", [("A", 1), ("A",), ("A", 1, "a", "b"), 5])
    def test_bad_triple(self, triple):
        with pytest.raises(MalformedEnum, match="triple"):
            Declaration.from_triples("Bad", [triple])
