"""Tests for source declaration and normalized source models."""

import pytest
from pydantic import ValidationError

from k8sconfig.sources import NormalizedSource, SourceDeclaration


class TestSourceDeclaration:
    """Test binding and predicates of SourceDeclaration."""

    def test_label_expression_is_split(self):
        decl = SourceDeclaration(label="labelNameValue=labelValueValue")
        assert decl.label_name == "labelNameValue"
        assert decl.label_value == "labelValueValue"
        assert decl.label == "labelNameValue=labelValueValue"

    def test_explicit_label_parts(self):
        decl = SourceDeclaration.model_validate({"label_name": "tier", "label_value": "web"})
        assert decl.label == "tier=web"

    def test_label_and_parts_conflict(self):
        with pytest.raises(ValidationError, match="not both"):
            SourceDeclaration(label="tier=web", label_name="tier")

    def test_value_without_name(self):
        with pytest.raises(ValidationError, match="label_value requires label_name"):
            SourceDeclaration(label_value="web")

    def test_label_must_be_string(self):
        with pytest.raises(ValidationError, match="label must be a string"):
            SourceDeclaration.model_validate({"label": 42})

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            SourceDeclaration.model_validate({"name": "a", "colour": "blue"})

    def test_blank_strings_are_unset(self):
        decl = SourceDeclaration(name="", namespace="", label="")
        assert decl.name is None
        assert decl.namespace is None
        assert decl.label_name is None
        assert decl.label is None

    def test_is_empty(self):
        assert SourceDeclaration().is_empty()
        assert SourceDeclaration(name="", namespace=None, label="").is_empty()
        assert not SourceDeclaration(name="a").is_empty()
        assert not SourceDeclaration(namespace="ns").is_empty()
        assert not SourceDeclaration(label="tier").is_empty()

    def test_keyless_label_still_selects_by_label(self):
        decl = SourceDeclaration(label="=web")
        assert decl.label_name is None
        assert decl.selects_by_label
        assert not decl.is_empty()

    def test_keyed_label_equals_explicit_parts(self):
        assert SourceDeclaration(label="tier") == SourceDeclaration(label_name="tier")

    def test_binding_does_not_mutate_input(self):
        raw = {"name": "a", "label": "tier=web"}
        SourceDeclaration.model_validate(raw)
        assert raw == {"name": "a", "label": "tier=web"}

    def test_declaration_is_immutable(self):
        decl = SourceDeclaration(name="a")
        with pytest.raises(ValidationError):
            decl.name = "b"


class TestNormalize:
    """Test applying defaults to a single declaration."""

    def test_name_defaults_without_label(self):
        source = SourceDeclaration(namespace="ns").normalize("dflt", "dflt-ns")
        assert source == NormalizedSource(name="dflt", namespace="ns")

    def test_name_kept_with_label(self):
        source = SourceDeclaration(name="nameValue", label="tier").normalize("dflt", "dflt-ns")
        assert source.name == "nameValue"
        assert source.namespace == "dflt-ns"
        assert source.label_name == "tier"

    def test_no_name_with_label(self):
        source = SourceDeclaration(label="tier").normalize("dflt", "dflt-ns")
        assert source.name is None

    def test_empty_defaults_are_unset(self):
        source = SourceDeclaration().normalize("", "")
        assert source == NormalizedSource()


class TestNormalizedSource:
    """Test NormalizedSource helpers."""

    def test_label_selector(self):
        assert NormalizedSource(label_name="tier", label_value="web").label_selector == "tier=web"
        assert NormalizedSource(label_name="tier").label_selector == "tier"
        assert NormalizedSource(name="a").label_selector is None

    def test_has_label(self):
        assert NormalizedSource(label_name="tier").has_label
        assert not NormalizedSource(name="a").has_label

    def test_is_immutable(self):
        source = NormalizedSource(name="a")
        with pytest.raises(ValidationError):
            source.name = "b"
