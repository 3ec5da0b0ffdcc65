from pathlib import Path

import click

from k8sconfig.cli.utils import configure_logging, output_error, output_sources
from k8sconfig.config import load_properties


@click.command(name="sources")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Application YAML file to read",
)
@click.option("--name", help="Override the default config map name")
@click.option("--namespace", help="Override the default namespace")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def sources(
    config_path: Path | None,
    name: str | None,
    namespace: str | None,
    json_output: bool,
    debug: bool,
) -> None:
    """List the config map sources that would be looked up.

    Reads the spring.cloud.kubernetes.config section, applies the default
    name and namespace and prints one line per resolved source.

    \b
    Examples:
        k8sconfig sources                          # Use ./application.yaml
        k8sconfig sources --config app.yaml        # Use a specific file
        k8sconfig sources --namespace staging      # Override the namespace
        k8sconfig sources --json-output            # Output in JSON format
    """
    configure_logging(debug)

    try:
        properties = load_properties(config_path)
    except (FileNotFoundError, ValueError) as e:
        output_error(e, json_output, debug)

    if name:
        properties.name = name
    if namespace:
        properties.namespace = namespace

    if not properties.enabled:
        if json_output:
            output_sources([], json_output)
        else:
            click.echo(f"{properties.configuration_target} property sources are disabled")
        return

    output_sources(properties.determine_sources(), json_output)
