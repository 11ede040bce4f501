"""Tests for constant extraction from enum classes."""

from __future__ import annotations

import pytest

from labelenum import LabeledEnum, define_enum
from labelenum.errors import MalformedEnum
from labelenum.extractor import (
    LABELS_ATTR,
    extract_constants,
    extract_declaration,
    reserved_names,
)


class TestExtractDeclaration:
    def test_collects_constants_in_order(self, status_enum):
        declaration = extract_declaration(status_enum)
        assert declaration.name == "Status"
        assert declaration.entries == (("SUCCESS", 0), ("ERROR", 1))

    def test_labels_attribute_is_not_a_constant(self, status_enum):
        declaration = extract_declaration(status_enum)
        assert LABELS_ATTR not in declaration.names
        assert declaration.labels == {0: "request success", 1: "request failure"}

    def test_skips_non_constants(self):
        class Noisy(LabeledEnum):
            A = 1
            _hidden = 2
            table = {"x": 1}
            items = [1, 2]

            def helper(self):
                return 3

            @staticmethod
            def util():
                return 4

            @property
            def prop(self):
                return 5

            __labels__ = {1: "a"}

        assert extract_declaration(Noisy).entries == (("A", 1),)

    def test_all_primitive_types(self):
        class Mixed(LabeledEnum):
            FLAG = True
            COUNT = 3
            RATIO = 0.5
            CODE = "c"

            __labels__ = {True: "flag", 3: "count", 0.5: "ratio", "c": "code"}

        assert extract_declaration(Mixed).values == [True, 3, 0.5, "c"]

    def test_no_labels(self):
        class Bare(LabeledEnum):
            A = 1

        assert extract_declaration(Bare).labels == {}

    def test_labels_as_pairs(self):
        class Pairs(LabeledEnum):
            A = 1

            __labels__ = [(1, "a")]

        assert extract_declaration(Pairs).labels == {1: "a"}

    def test_prebuilt_declaration(self):
        Status = define_enum("Status", [("A", 1, "a")])
        assert extract_declaration(Status) is Status.__declaration__

    def test_reserved_clash(self):
        class Clash(LabeledEnum):
            label = "x"

        with pytest.raises(MalformedEnum) as exc_info:
            extract_declaration(Clash)
        assert exc_info.value.problems == ["'label' is reserved"]

    def test_root_class_has_no_constants(self):
        assert extract_declaration(LabeledEnum).entries == ()


class TestExtractConstants:
    def test_returns_copies(self, status_enum):
        declaration = extract_declaration(status_enum)
        value_of, labels = extract_constants(declaration)
        assert value_of == {"SUCCESS": 0, "ERROR": 1}
        assert labels == {0: "request success", 1: "request failure"}
        value_of["OTHER"] = 2
        labels[2] = "other"
        assert extract_constants(declaration) == (
            {"SUCCESS": 0, "ERROR": 1},
            {0: "request success", 1: "request failure"},
        )


class TestReservedNames:
    def test_includes_api(self):
        names = reserved_names()
        assert {"name", "value", "label", "has_name", "get_map", "call", "from_name"} <= names

    def test_excludes_private(self):
        assert not any(name.startswith("_") for name in reserved_names())
