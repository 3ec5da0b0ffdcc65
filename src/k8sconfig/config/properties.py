"""Config map configuration properties.

Bound from the ``spring.cloud.kubernetes.config`` section:

```yaml
spring:
  application:
    name: billing
  cloud:
    kubernetes:
      config:
        enabled: true
        enable-api: true
        namespace: prod
        paths:
          - /etc/config/billing.yaml
        sources:
          - name: billing-overrides
          - namespace: shared
            label: tier=web
```
"""

from typing import ClassVar

from pydantic import ConfigDict, Field, field_validator

from k8sconfig.models import ConfigBaseModel
from k8sconfig.sources import NormalizedSource, SourceDeclaration, resolve_sources
from k8sconfig.sources.models import blank_to_none


class ConfigMapProperties(ConfigBaseModel):
    """Configuration for config map property sources.

    Attributes:
        enabled: Whether config map property sources are used at all
        enable_api: Whether config maps are read through the Kubernetes API
        name: Default config map name
        namespace: Default namespace
        paths: Files of mounted config maps to read instead of the API
        sources: Declared sources, in precedence order

    Example:
        >>> props = ConfigMapProperties(name="billing", namespace="prod")
        >>> [s.name for s in props.determine_sources()]
        ['billing']
    """

    # Allow mutability for config merging
    model_config = ConfigDict(extra="forbid", frozen=False)

    configuration_target: ClassVar[str] = "Config Map"

    enabled: bool = True
    enable_api: bool = True
    name: str | None = None
    namespace: str | None = None
    paths: list[str] = Field(default_factory=list)
    sources: list[SourceDeclaration] = Field(default_factory=list)

    @field_validator("name", "namespace", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: object) -> object:
        if isinstance(value, str):
            return blank_to_none(value)
        return value

    def determine_sources(self) -> list[NormalizedSource]:
        """The name/namespace/label lookups to build property sources from.

        When no sources are declared a single source is built from ``name`` and
        ``namespace``.
        """
        return resolve_sources(self.name, self.namespace, self.sources)
