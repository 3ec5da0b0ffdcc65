"""
Configuration subpackage.

Config map properties and the YAML loader that binds them.
"""

from .loader import default_namespace, load_properties
from .properties import ConfigMapProperties

__all__ = ["ConfigMapProperties", "load_properties", "default_namespace"]
