"""Base Pydantic models for k8sconfig.

This module provides the base model class that all k8sconfig Pydantic models
inherit from. It establishes consistent configuration across models:

- Strict field validation (no extra fields allowed)
- Immutable instances, so resolved values can be shared freely

Example:
    >>> from k8sconfig.models import ConfigBaseModel
    >>>
    >>> class Identity(ConfigBaseModel):
    ...     name: str | None = None
    >>>
    >>> Identity(name="app").model_dump()
    {'name': 'app'}
"""

from pydantic import BaseModel, ConfigDict


class ConfigBaseModel(BaseModel):
    """Base model for all k8sconfig Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable

    Models bound from user configuration that need mutability (e.g.
    ConfigMapProperties) override ``model_config``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
