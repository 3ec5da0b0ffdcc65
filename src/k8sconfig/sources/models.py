"""Pydantic models for config map source declarations.

A ``SourceDeclaration`` is what a user writes in configuration: every field is
optional. A ``NormalizedSource`` is what the resolver hands to the retrieval
layer: defaults applied and the label split into name and value.

Unset values are always ``None``. Empty strings coming from configuration are
bound to ``None`` so that ``""`` and a missing key mean the same thing.
"""

from typing import Any

from pydantic import PrivateAttr, field_validator, model_validator

from k8sconfig.models import ConfigBaseModel

from .labels import format_label, parse_label


def blank_to_none(value: str | None) -> str | None:
    """Collapse empty strings to None."""
    return value or None


class NormalizedSource(ConfigBaseModel):
    """A fully resolved config map lookup descriptor.

    ``name`` may be None for label-selected sources, since a label may match
    several config maps. ``namespace`` carries the declaration's namespace or
    the default one.

    Attributes:
        name: Config map name, or None when selecting by label
        namespace: Namespace to look in
        label_name: Label key to select on, if any
        label_value: Label value to match, if the expression had one
    """

    name: str | None = None
    namespace: str | None = None
    label_name: str | None = None
    label_value: str | None = None

    @property
    def has_label(self) -> bool:
        return self.label_name is not None

    @property
    def label_selector(self) -> str | None:
        """Kubernetes label selector string (``key`` or ``key=value``)."""
        return format_label(self.label_name, self.label_value)


class SourceDeclaration(ConfigBaseModel):
    """A user-declared config map source.

    The label can be bound either as a single expression or as explicit parts:

    ```yaml
    sources:
      - name: billing
      - namespace: shared
        label: tier=web
      - label_name: tier
        label_value: web
    ```

    Attributes:
        name: Config map name override
        namespace: Namespace override
        label_name: Label key parsed from the ``label`` expression
        label_value: Label value parsed from the ``label`` expression

    Example:
        >>> decl = SourceDeclaration(label="tier=web")
        >>> decl.label_name, decl.label_value
        ('tier', 'web')
    """

    name: str | None = None
    namespace: str | None = None
    label_name: str | None = None
    label_value: str | None = None

    # A label expression was bound but had no key, e.g. "=web"
    _keyless_label: bool = PrivateAttr(default=False)

    @model_validator(mode="wrap")
    @classmethod
    def _split_label(cls, data: Any, handler: Any) -> "SourceDeclaration":
        if not isinstance(data, dict) or "label" not in data:
            return handler(data)

        if data.get("label_name") or data.get("label_value"):
            raise ValueError("Specify either 'label' or 'label_name'/'label_value', not both")

        label = data["label"]
        if label is not None and not isinstance(label, str):
            raise ValueError(f"label must be a string, got {type(label).__name__}")

        data = {key: value for key, value in data.items() if key != "label"}
        data["label_name"], data["label_value"] = parse_label(label)
        declaration = handler(data)
        declaration._keyless_label = bool(label) and declaration.label_name is None
        return declaration

    @field_validator("name", "namespace", "label_name", "label_value", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str):
            return blank_to_none(value)
        return value

    @model_validator(mode="after")
    def _value_needs_name(self) -> "SourceDeclaration":
        if self.label_value is not None and self.label_name is None:
            raise ValueError("label_value requires label_name")
        return self

    @property
    def label(self) -> str | None:
        """The label expression this declaration selects on."""
        return format_label(self.label_name, self.label_value)

    @property
    def selects_by_label(self) -> bool:
        """True when a label was declared, even one the parser could not use."""
        return self.label_name is not None or self._keyless_label

    def is_empty(self) -> bool:
        """True when no field of the declaration is set."""
        return self.name is None and self.namespace is None and not self.selects_by_label

    def normalize(
        self, default_name: str | None, default_namespace: str | None
    ) -> NormalizedSource:
        """Apply defaults to this declaration.

        Without a label the name falls back to ``default_name``. With a label the
        name is kept as declared, possibly None. The namespace always falls back
        to ``default_namespace``.
        """
        if not self.selects_by_label:
            name = self.name or blank_to_none(default_name)
        else:
            name = self.name

        return NormalizedSource(
            name=name,
            namespace=self.namespace or blank_to_none(default_namespace),
            label_name=self.label_name,
            label_value=self.label_value,
        )
