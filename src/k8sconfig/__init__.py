"""k8sconfig - resolve which Kubernetes config maps an application reads.

Quick example:

```python
from k8sconfig import SourceDeclaration, resolve_sources

sources = resolve_sources(
    "billing",
    "prod",
    [SourceDeclaration(name="billing-overrides"), SourceDeclaration(label="tier=web")],
)
```
"""

from k8sconfig.config import ConfigMapProperties, load_properties
from k8sconfig.sources import (
    NormalizedSource,
    SourceDeclaration,
    format_label,
    parse_label,
    resolve_sources,
)

__all__ = [
    "SourceDeclaration",
    "NormalizedSource",
    "resolve_sources",
    "parse_label",
    "format_label",
    "ConfigMapProperties",
    "load_properties",
]
