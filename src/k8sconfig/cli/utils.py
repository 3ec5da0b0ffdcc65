"""Output and logging helpers shared by the k8sconfig commands."""

import json
import logging
import os
import traceback
from collections.abc import Sequence
from typing import Any, NoReturn

import click

from k8sconfig.sources import NormalizedSource

DEBUG_ENV_VAR = "K8SCONFIG_DEBUG"


def configure_logging(debug: bool = False) -> None:
    """Send k8sconfig log records to stderr.

    Args:
        debug: Log at DEBUG instead of WARNING. K8SCONFIG_DEBUG set to
            "1", "true" or "yes" has the same effect.
    """
    if not debug:
        debug = os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes")
    level = logging.DEBUG if debug else logging.WARNING

    package_logger = logging.getLogger("k8sconfig")
    package_logger.setLevel(level)

    # Repeated invocations in one process replace the handler
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
    package_logger.addHandler(handler)


def describe_source(source: NormalizedSource) -> str:
    """One-line description: ``namespace/name``, plus the selector when labelled."""
    namespace = source.namespace or "<default>"
    if source.has_label:
        target = f"{namespace}/{source.name}" if source.name else f"{namespace}/*"
        return f"{target} [{source.label_selector}]"
    return f"{namespace}/{source.name or '<unnamed>'}"


def source_payload(source: NormalizedSource) -> dict[str, Any]:
    payload = source.model_dump(mode="json")
    payload["label_selector"] = source.label_selector
    return payload


def output_sources(sources: Sequence[NormalizedSource], json_output: bool = False) -> None:
    """Print resolved sources, one per line or as a JSON document."""
    if json_output:
        body = {"status": "ok", "result": [source_payload(source) for source in sources]}
        click.echo(json.dumps(body, indent=2))
        return

    for source in sources:
        click.echo(describe_source(source))


def output_error(error: Exception, json_output: bool = False, debug: bool = False) -> NoReturn:
    """Report why sources couldn't be resolved, then abort the command.

    With ``debug`` the exception type and traceback are included.
    """
    if json_output:
        body: dict[str, Any] = {"status": "error", "error": str(error)}
        if debug:
            body["type"] = type(error).__name__
            body["traceback"] = traceback.format_exc()
        click.echo(json.dumps(body, indent=2))
    else:
        click.echo(f"Error: {error}", err=True)
        if debug:
            click.echo(traceback.format_exc(), err=True)

    raise click.Abort()
