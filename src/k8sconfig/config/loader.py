"""Configuration loader for config map properties.

This module loads ``ConfigMapProperties`` from an application YAML file,
applying relaxed key binding and the default name and namespace lookups.
"""

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .properties import ConfigMapProperties

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "K8SCONFIG_CONFIG"
NAMESPACE_ENV_VAR = "KUBERNETES_NAMESPACE"
SERVICE_ACCOUNT_NAMESPACE_PATH = Path("/var/run/secrets/kubernetes.io/serviceaccount/namespace")

PROPERTIES_PREFIX = ("spring", "cloud", "kubernetes", "config")
APPLICATION_NAME_KEY = ("spring", "application", "name")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def load_properties(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
    namespace_path: Path | None = None,
) -> ConfigMapProperties:
    """Load config map properties from an application YAML file.

    Args:
        config_path: Optional path to the YAML file.
                    If not provided, looks for:
                    1. K8SCONFIG_CONFIG environment variable
                    2. ./application.yaml
                    3. ./application.yml
        environ: Environment to read variables from, defaults to os.environ
        namespace_path: Service account namespace file used as the last
                    namespace fallback, defaults to the in-cluster path

    Returns:
        ConfigMapProperties with defaults applied

    Raises:
        FileNotFoundError: If an explicitly requested config file doesn't exist
        ValueError: If the file can't be parsed or the properties are invalid
    """
    if environ is None:
        environ = os.environ

    # Determine config file path
    if config_path is None:
        env_path = environ.get(CONFIG_ENV_VAR)
        if env_path:
            config_path = Path(env_path)
        else:
            candidates = [Path.cwd() / "application.yaml", Path.cwd() / "application.yml"]
            for candidate in candidates:
                if candidate.exists():
                    config_path = candidate
                    break

    raw_config: Any = None
    if config_path is None:
        logger.info("No application config file found, using default properties")
    else:
        raw_config = _read_yaml(config_path)

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping at the top level")

    section = properties_section(raw_config)
    application_name = _lookup(raw_config, APPLICATION_NAME_KEY)

    if not section.get("name") and application_name:
        logger.debug(f"Using application name {application_name!r} as default config map name")
        section["name"] = application_name

    if not section.get("namespace"):
        namespace = default_namespace(environ, namespace_path)
        if namespace:
            section["namespace"] = namespace

    try:
        properties = ConfigMapProperties.model_validate(section)
    except ValidationError as e:
        raise ValueError(f"Invalid config map properties: {e}") from e

    logger.debug(f"Loaded config map properties: {properties}")
    return properties


def properties_section(raw_config: Mapping[str, Any]) -> dict[str, Any]:
    """Extract the config map properties section with relaxed key names.

    The section may be nested (``spring: cloud: ...``) or a single dotted key
    (``spring.cloud.kubernetes.config: ...``).
    """
    section = _lookup(raw_config, PROPERTIES_PREFIX)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"'{'.'.join(PROPERTIES_PREFIX)}' must be a mapping")
    return relax_keys(section)


def default_namespace(
    environ: Mapping[str, str], namespace_path: Path | None = None
) -> str | None:
    """Namespace to use when the configuration doesn't name one.

    Checks the KUBERNETES_NAMESPACE variable, then the service account
    namespace file mounted into pods.
    """
    if namespace_path is None:
        namespace_path = SERVICE_ACCOUNT_NAMESPACE_PATH

    namespace = environ.get(NAMESPACE_ENV_VAR)
    if namespace:
        return namespace

    if namespace_path.is_file():
        namespace = namespace_path.read_text().strip()
        if namespace:
            logger.debug(f"Using service account namespace {namespace!r} from {namespace_path}")
            return namespace
    return None


def relax_keys(value: Any) -> Any:
    """Rewrite kebab-case and camelCase mapping keys to snake_case, recursively.

    Raises:
        ValueError: If two spellings of the same key appear in one mapping
    """
    if isinstance(value, dict):
        relaxed: dict[Any, Any] = {}
        spelled: dict[Any, Any] = {}
        for key, item in value.items():
            snake = _snake_case(key)
            if snake in spelled:
                raise ValueError(
                    f"Keys {spelled[snake]!r} and {key!r} both set {snake!r}, use only one"
                )
            spelled[snake] = key
            relaxed[snake] = relax_keys(item)
        return relaxed
    if isinstance(value, list):
        return [relax_keys(item) for item in value]
    return value


def _snake_case(key: Any) -> Any:
    if not isinstance(key, str):
        return key
    return _CAMEL_BOUNDARY.sub("_", key).replace("-", "_").lower()


def _read_yaml(config_path: Path) -> Any:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found at {config_path}")

    logger.debug(f"Loading config map properties from: {config_path}")
    try:
        with open(config_path) as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML config file {config_path}: {e}") from e


def _lookup(raw_config: Mapping[str, Any], path: tuple[str, ...]) -> Any:
    dotted = ".".join(path)
    if dotted in raw_config:
        return raw_config[dotted]

    node: Any = raw_config
    for key in path:
        if not isinstance(node, Mapping) or key not in node:
            return None
        node = node[key]
    return node
